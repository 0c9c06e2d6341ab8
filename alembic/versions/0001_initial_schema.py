# File: alembic/versions/0001_initial_schema.py | Version: 1.0 | Title: Bases, tables, columns, rows, EAV cells, views
"""initial schema"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "base",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.text("0"), nullable=False),
    )
    op.create_index("ix_base_owner_id", "base", ["owner_id"])

    op.create_table(
        "data_table",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("base_id", sa.String(), sa.ForeignKey("base.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.text("0"), nullable=False),
    )
    op.create_index("ix_data_table_base_id", "data_table", ["base_id"])

    op.create_table(
        "data_column",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("table_id", sa.String(), sa.ForeignKey("data_table.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("order", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.text("0"), nullable=False),
    )
    op.create_index("ix_data_column_table_id", "data_column", ["table_id"])
    op.create_index("ix_data_column_table_order", "data_column", ["table_id", "order"])

    op.create_table(
        "data_row",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("table_id", sa.String(), sa.ForeignKey("data_table.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.text("0"), nullable=False),
    )
    op.create_index("ix_data_row_table_id", "data_row", ["table_id"])
    op.create_index("ix_data_row_table_deleted", "data_row", ["table_id", "is_deleted"])

    op.create_table(
        "cell",
        sa.Column("row_id", sa.String(), sa.ForeignKey("data_row.id"), primary_key=True),
        sa.Column("column_id", sa.String(), sa.ForeignKey("data_column.id"), primary_key=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("flattened_value_text", sa.Text(), nullable=True),
        sa.Column("flattened_value_number", sa.Float(), nullable=True),
    )
    op.create_index("ix_cell_column_text", "cell", ["column_id", "flattened_value_text"])
    op.create_index("ix_cell_column_number", "cell", ["column_id", "flattened_value_number"])

    op.create_table(
        "views",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("table_id", sa.String(), sa.ForeignKey("data_table.id"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=True),
        sa.Column("column_order", sa.JSON(), nullable=False),
        sa.Column("hidden_columns", sa.JSON(), nullable=False),
        sa.Column("filters", sa.JSON(), nullable=False),
        sa.Column("sorts", sa.JSON(), nullable=False),
        sa.Column("search_term", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_views_table", "views", ["table_id"])


def downgrade():
    op.drop_index("ix_views_table", table_name="views")
    op.drop_table("views")
    op.drop_index("ix_cell_column_number", table_name="cell")
    op.drop_index("ix_cell_column_text", table_name="cell")
    op.drop_table("cell")
    op.drop_index("ix_data_row_table_deleted", table_name="data_row")
    op.drop_index("ix_data_row_table_id", table_name="data_row")
    op.drop_table("data_row")
    op.drop_index("ix_data_column_table_order", table_name="data_column")
    op.drop_index("ix_data_column_table_id", table_name="data_column")
    op.drop_table("data_column")
    op.drop_index("ix_data_table_base_id", table_name="data_table")
    op.drop_table("data_table")
    op.drop_index("ix_base_owner_id", table_name="base")
    op.drop_table("base")
