# homebank_helper/utilities/config_logging.py
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "simple",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console"],
        },
        "homebank_helper": {"level": "DEBUG", "propagate": True},
    },
}


def logging_config(console_level: str | None = None) -> dict:
    """Return a copy of ``LOGGING`` with the console level overridden."""
    cfg = {**LOGGING, "handlers": {k: dict(v) for k, v in LOGGING["handlers"].items()}}
    if console_level:
        cfg["handlers"]["console"]["level"] = console_level.upper()
    return cfg
