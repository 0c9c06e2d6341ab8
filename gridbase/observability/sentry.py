# File: gridbase/observability/sentry.py | Version: 1.0 | Title: Optional Sentry initialization (domain 4xx filtered)
import logging
import os

from gridbase.core.errors import GridError

log = logging.getLogger(__name__)


def drop_client_errors(event, hint):
    """
    Sentry ``before_send`` hook. Domain errors that map to a 4xx response
    (bad filter, unknown table, columnless bulk run) are caller mistakes and
    are not reported; storage and partial-completion failures still are.
    """
    exc_info = hint.get("exc_info") if hint else None
    if exc_info:
        exc = exc_info[1]
        if isinstance(exc, GridError) and exc.status_code < 500:
            return None
    return event


def init_sentry_if_configured() -> bool:
    dsn = os.getenv("SENTRY_DSN", "").strip()
    if not dsn:
        log.info("Sentry disabled (no SENTRY_DSN).")
        return False

    try:
        import sentry_sdk

        sentry_sdk.init(
            dsn=dsn,
            environment=os.getenv("SENTRY_ENVIRONMENT", "development"),
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
            profiles_sample_rate=float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.0")),
            send_default_pii=False,
            before_send=drop_client_errors,
        )
        log.info("Sentry initialized.")
        return True
    except Exception as e:  # pragma: no cover (best-effort)
        log.warning("Sentry init failed: %s", e)
        return False
