import logging

from regtag.utils.logger import setup_logging


def test_setup_logging_writes_file(tmp_path) -> None:
    log_file = tmp_path / "regtag.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("INFO", str(log_file))
        logging.getLogger("regtag.test").info("looking up tags")
        assert logging.getLogger("urllib3").level == logging.WARNING
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    content = log_file.read_text()
    assert "regtag.test - INFO - looking up tags" in content
