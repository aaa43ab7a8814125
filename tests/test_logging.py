import logging

from training_events_api.app.core.logging_config import HANDLER_PREFIX, setup_logging


def _own_handlers():
    return [
        h for h in logging.getLogger().handlers
        if (h.get_name() or "").startswith(HANDLER_PREFIX)
    ]


def test_repeated_setup_does_not_stack_handlers():
    setup_logging("WARNING")
    setup_logging("DEBUG")
    assert len(_own_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_file_handler(tmp_path):
    logfile = tmp_path / "app.log"
    setup_logging("INFO", str(logfile))
    try:
        logging.getLogger("training_events_api.test").info("written to file")
        for handler in _own_handlers():
            handler.flush()
        assert "written to file" in logfile.read_text(encoding="utf-8")
    finally:
        setup_logging("WARNING")
    assert len(_own_handlers()) == 1


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO
    setup_logging("WARNING")
