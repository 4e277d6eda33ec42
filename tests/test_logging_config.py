import logging

from config.logging_config import setup_logging


def test_setup_logging_aligns_uvicorn_levels():
    setup_logging("debug")

    assert logging.getLogger("uvicorn.access").level == logging.DEBUG
    assert logging.getLogger("uvicorn.error").level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")

    assert logging.getLogger("uvicorn.access").level == logging.INFO
