import logging
import os

logger = logging.getLogger(__name__)


def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "/api").strip()
    if not val.startswith("/"):
        val = "/" + val
    if len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def _parse_origins(raw):
    """Split a comma-separated origin list, refusing the '*' wildcard."""
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    if "*" in origins:
        raise ValueError(
            "ALLOWED_ORIGINS cannot include '*' (wildcard). Specify explicit, trusted origins."
        )
    return origins


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))

ALLOWED_ORIGINS = _parse_origins(os.getenv("ALLOWED_ORIGINS"))
ALLOW_CREDENTIALS = os.getenv("ALLOW_CREDENTIALS", "true").lower() == "true"

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()


def parse_sample_rate(raw, env_var, default=0.0):
    """Read a Sentry sample rate, falling back to ``default`` when unusable."""
    if raw is None:
        return default

    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "%s is not a valid float (got %r); defaulting to %.2f",
            env_var,
            raw,
            default,
        )
        return default

    if value < 0:
        logger.warning("%s cannot be negative; defaulting to %.2f", env_var, default)
        return default

    return value


SENTRY_DSN = (os.getenv("SENTRY_DSN") or "").strip() or None
SENTRY_ENVIRONMENT = (os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None
SENTRY_TRACES_SAMPLE_RATE = parse_sample_rate(
    os.getenv("SENTRY_TRACES_SAMPLE_RATE"), "SENTRY_TRACES_SAMPLE_RATE"
)
SENTRY_PROFILES_SAMPLE_RATE = parse_sample_rate(
    os.getenv("SENTRY_PROFILES_SAMPLE_RATE"), "SENTRY_PROFILES_SAMPLE_RATE"
)


def configure_logging(level=None):
    """Send log records to stderr at ``level`` (defaults to LOG_LEVEL)."""
    name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
