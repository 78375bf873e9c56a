import logging.config

import structlog

from signupcheck import config

timestamper = structlog.processors.TimeStamper(fmt="iso")

# applied to records from plain stdlib loggers (the page objects, tenacity, playwright)
foreign_pre_chain = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    timestamper,
]

# human readable locally, one JSON object per line on CI
handler_to_use = "console" if config.is_development() else "json"

logging.config.dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.dev.ConsoleRenderer(colors=False),
            "foreign_pre_chain": foreign_pre_chain,
        },
        "json": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.JSONRenderer(),
            "foreign_pre_chain": foreign_pre_chain,
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
        "json": {
            "level": "INFO",
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "loggers": {
        "": {
            "handlers": [handler_to_use],
            "level": "INFO",
            "propagate": True,
        },
    },
})

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def logging_setup(log_level: int | None = None) -> None:
    if log_level is None:
        log_level = config.get_log_level()

    handler = logging.getHandlerByName(handler_to_use)
    assert handler is not None
    handler.setLevel(log_level)

    logging.getLogger().setLevel(log_level)

    # playwright's sync API runs on an asyncio loop, whose debug output is noise
    if log_level > logging.DEBUG:
        logging.getLogger("asyncio").setLevel(logging.WARNING)
