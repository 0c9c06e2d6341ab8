# File: /gridbase/main.py | Version: 1.0 | Title: FastAPI App (router includes + domain error handlers)
from __future__ import annotations

from fastapi import FastAPI

from gridbase.core.config import settings
from gridbase.core.error_handlers import register_domain_error_handlers
from gridbase.core.logging import configure_logging
from gridbase.observability.sentry import init_sentry_if_configured
from gridbase.routers import cells, health, rows, views

# Initialize logging & observability
configure_logging()
init_sentry_if_configured()

# App
app = FastAPI(title="Gridbase API")

app.include_router(rows.router)
app.include_router(cells.router)
app.include_router(views.router)
app.include_router(health.router)

# Domain errors (ValidationError, NotFoundError, ...) always map to HTTP codes
register_domain_error_handlers(app)

# Optional standardized error responses
if getattr(settings, "ENABLE_STD_ERRORS", False):
    from gridbase.core.error_handlers import register_exception_handlers

    register_exception_handlers(app)
