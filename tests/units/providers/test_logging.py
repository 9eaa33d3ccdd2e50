import logging

from date_formatting.providers.logging import LOGGER_NAME, LoggingProvider


def test_logging_provider_is_a_singleton() -> None:
    """
    Tests that every construction returns the same provider.
    """
    assert LoggingProvider() is LoggingProvider()


def test_get_logger_returns_configured_logger() -> None:
    """
    Tests that the project logger has a stderr handler attached.
    """
    logger = LoggingProvider().get_logger()

    assert logger.name == LOGGER_NAME
    assert any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers)


def test_level_override_adjusts_existing_logger() -> None:
    """
    Tests that a CLI level override applies even after configuration.
    """
    provider = LoggingProvider()
    provider.get_logger()

    try:
        assert provider.get_logger(level_override="DEBUG").level == logging.DEBUG
    finally:
        provider.get_logger(level_override="INFO")


def test_unknown_level_falls_back_to_info() -> None:
    """
    Tests the level name resolution.
    """
    assert LoggingProvider._resolve_level("verbose") == logging.INFO
    assert LoggingProvider._resolve_level("warning") == logging.WARNING
