import logging

from utils.logging_utils import (
    StructuredLogger,
    TraceIdFilter,
    clear_logging_context,
    configure_logging,
    get_logging_context,
    set_logging_context,
)


def make_record(**attrs):
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


def test_context_set_and_clear():
    clear_logging_context()
    set_logging_context(trace_id="abc")
    set_logging_context(path="/api/users")

    assert get_logging_context() == {"trace_id": "abc", "path": "/api/users"}

    clear_logging_context()
    assert get_logging_context() == {}


def test_trace_filter_uses_context_or_placeholder():
    trace_filter = TraceIdFilter()
    clear_logging_context()

    record = make_record()
    assert trace_filter.filter(record) is True
    assert record.trace_id == "-"

    set_logging_context(trace_id="ctx-id")
    record = make_record()
    trace_filter.filter(record)
    assert record.trace_id == "ctx-id"

    explicit = make_record(trace_id="explicit")
    trace_filter.filter(explicit)
    assert explicit.trace_id == "explicit"
    clear_logging_context()


def test_structured_logger_merges_context_and_extra(caplog):
    caplog.set_level(logging.DEBUG, logger="tests.structured")
    set_logging_context(trace_id="ctx-id", path="/x")
    try:
        StructuredLogger("tests.structured").debug("hello", extra={"trace_id": "override", "operation": "op"})
    finally:
        clear_logging_context()

    record = caplog.records[-1]
    assert record.trace_id == "override"
    assert record.path == "/x"
    assert record.operation == "op"


def test_configure_logging_writes_trace_id_to_file(tmp_path):
    configure_logging("DEBUG", tmp_path)
    try:
        set_logging_context(trace_id="file-trace")
        logging.getLogger("tests.file").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
    finally:
        clear_logging_context()
        configure_logging("DEBUG", None)

    content = (tmp_path / "backend.log").read_text(encoding="utf-8")
    assert "[file-trace] written" in content


def test_configure_logging_does_not_duplicate_handlers():
    root = logging.getLogger()
    configure_logging("INFO", None)
    before = len(root.handlers)

    configure_logging("INFO", None)

    assert len(root.handlers) == before
