# File: /gridbase/core/config.py | Version: 1.0 | Title: Central App Settings (Pydantic v2)
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Database ---
    DATABASE_URL: str = "sqlite:///./gridbase.db"

    # --- API behavior toggles ---
    ENABLE_STD_ERRORS: bool = (
        False  # set True in .env to enable standardized error responses
    )

    # --- Row queries ---
    ROW_QUERY_DEFAULT_LIMIT: int = 50
    ROW_QUERY_MAX_LIMIT: int = 100

    # --- Bulk generation ---
    BULK_MAX_ROWS: int = 100_000
    BULK_ROW_BATCH_SIZE: int = 5_000
    BULK_CELL_BATCH_SIZE: int = 10_000
    BULK_PROGRESS_GRACE_SECONDS: float = 5.0
    BULK_PROGRESS_EXPIRY_SECONDS: float = 10.0

    # --- Flattened value maintenance ---
    REFLATTEN_BATCH_SIZE: int = 1_000

    # v2-style config
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
