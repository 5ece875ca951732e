"""Tests for the logging setup."""

import logging

from lessonshop.infrastructure.log_config import InterceptHandler, configure_logging


def test_uvicorn_loggers_are_routed_to_loguru():
    configure_logging("debug")

    for name in ("uvicorn", "uvicorn.access"):
        std_logger = logging.getLogger(name)
        assert [type(h) for h in std_logger.handlers] == [InterceptHandler]
        assert std_logger.propagate is False


def test_intercepted_record_reaches_loguru():
    from loguru import logger

    messages = []
    sink_id = logger.add(messages.append, format="{message}")
    try:
        logging.getLogger("uvicorn.error").handlers = [InterceptHandler()]
        logging.getLogger("uvicorn.error").warning("port in use")
    finally:
        logger.remove(sink_id)

    assert any("port in use" in m for m in messages)
