# tests/core/test_logger.py
import json
import logging

from core.logger import JsonFormatter, RequestIdFilter, get_logger, request_id_ctx_var


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("storefront.test", logging.INFO, __file__, 10, "Listed %d products", (3,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    entry = json.loads(JsonFormatter().format(make_record(request_id="req-1", context={"page": 2})))

    assert entry["level"] == "INFO"
    assert entry["logger"] == "storefront.test"
    assert entry["message"] == "Listed 3 products"
    assert entry["environment"] == "test"
    assert entry["request_id"] == "req-1"
    assert entry["context"] == {"page": 2}


def test_json_formatter_omits_missing_request_id():
    entry = json.loads(JsonFormatter().format(make_record(request_id="-")))
    assert "request_id" not in entry
    assert "context" not in entry


def test_request_id_filter_reads_context_var():
    token = request_id_ctx_var.set("req-42")
    try:
        record = make_record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "req-42"
    finally:
        request_id_ctx_var.reset(token)

    record = make_record()
    RequestIdFilter().filter(record)
    assert record.request_id == "-"


def test_get_logger_configures_once():
    logger = get_logger("storefront.test.once")
    assert len(logger.handlers) == 2
    assert get_logger("storefront.test.once").handlers == logger.handlers
