import logging
from unittest.mock import patch
from claimcheck.log import get_logger, setup_logging

def test_module_loggers_share_project_root():
    """
    WHY: LOG_LEVEL should govern our own modules without turning on library debug output.
    HOW: Ask for a module logger.
    EXPECTED: It lives under the 'claimcheck' hierarchy.
    """
    logger = get_logger("fetch")
    assert logger.name == "claimcheck.fetch"
    assert logger.parent.name == "claimcheck"

def test_setup_logging_applies_level_to_project_only(settings):
    settings.LOG_LEVEL = "DEBUG"
    with patch("claimcheck.log.get_settings", return_value=settings), patch("logging.basicConfig") as basic:
        setup_logging()
    assert basic.call_args.kwargs["level"] == logging.WARNING
    assert logging.getLogger("claimcheck").level == logging.DEBUG
    logging.getLogger("claimcheck").setLevel(logging.NOTSET)
