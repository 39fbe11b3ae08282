import logging

import structlog


def configure_logging(level="INFO", fmt="json"):
    """Route stdlib logging and structlog through one pipeline.

    `fmt` is "json" for machine-readable output or "console" for local runs.
    """
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format="%(message)s")
    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
