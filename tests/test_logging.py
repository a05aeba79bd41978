import logging

from core.logging import ColoredFormatter


def test_colored_formatter_leaves_record_plain():
    record = logging.LogRecord("services.photo_deletion", logging.WARNING, __file__, 1, "⚠️ Not found in: k", None, None)
    output = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert output.startswith("\033[33mWARNING\033[0m")
    assert output.endswith("Not found in: k")
    assert record.levelname == "WARNING"
