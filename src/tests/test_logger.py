from src.catalog_api import catalog_api_logger
from src.utils.logger import AppLogger, get_current_app_name, get_current_logger, logger, set_app_context


def test_app_context_switches_logger():
    assert get_current_logger() is logger
    assert get_current_app_name() == "app_logger"

    with set_app_context(AppLogger.CATALOG_API):
        assert get_current_logger() is catalog_api_logger
        assert get_current_app_name() == "catalog_api"

    assert get_current_logger() is logger


def test_app_context_resets_after_error():
    try:
        with set_app_context(AppLogger.CATALOG_API):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert get_current_app_name() == "app_logger"
