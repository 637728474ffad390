import logging
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

logger = logging.getLogger(__name__)


def init_sentry(
    dsn: Optional[str],
    *,
    environment: Optional[str] = None,
    traces_sample_rate: float = 0.0,
    profiles_sample_rate: float = 0.0,
) -> bool:
    """Start error reporting for the API; returns False when no DSN is set."""
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    sentry_sdk.init(
        dsn=dsn,
        integrations=[FastApiIntegration()],
        environment=environment,
        traces_sample_rate=traces_sample_rate,
        profiles_sample_rate=profiles_sample_rate,
    )
    logger.info(
        "Initialized Sentry%s; traces=%.2f profiles=%.2f",
        f" (environment={environment})" if environment else "",
        traces_sample_rate,
        profiles_sample_rate,
    )
    return True


def report_self_test() -> str:
    """Send an info-level event so operators can check the DSN end to end."""
    event_id = sentry_sdk.capture_message("Ten-pin scorer self-test", level="info")
    return str(event_id)
