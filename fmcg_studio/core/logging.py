import logging
import logging.config

from fmcg_studio.core.config import settings

_configured = False


def setup_logging(level: str | None = None) -> None:
    """Configure console logging for the API process. Safe to call more than once."""
    global _configured
    if _configured:
        return

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "fmcg_studio": {
                "handlers": ["console"],
                "level": (level or settings.LOG_LEVEL).upper(),
                "propagate": True,
            },
        },
    })
    _configured = True
    logging.getLogger(__name__).debug("Logging configured (model=%s)", settings.GROQ_MODEL)
