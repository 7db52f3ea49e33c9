import json
import logging

from routeguard.core.engine import RouteGuardEngine
from routeguard.core.guards import require_auth
from routeguard.core.model import GuardContext
from routeguard.logging.context import (
    TraceIdFilter,
    clear_current_trace_id,
    gen_trace_id,
    get_current_trace_id,
    set_current_trace_id,
)
from routeguard.logging.decision_logger import DecisionLogger


def test_trace_id_set_get_clear_with_token():
    token = set_current_trace_id("abc")
    assert get_current_trace_id() == "abc"
    clear_current_trace_id(token)
    assert get_current_trace_id() is None


def test_trace_id_clear_without_token():
    set_current_trace_id("xyz")
    clear_current_trace_id()
    assert get_current_trace_id() is None


def test_gen_trace_id_is_uuid_like_and_filter_injects_record_field(caplog):
    rid = gen_trace_id()
    assert isinstance(rid, str) and len(rid) >= 32
    logger = logging.getLogger("routeguard.test")
    logger.setLevel(logging.INFO)
    caplog.set_level(logging.INFO, logger="routeguard.test")
    f = TraceIdFilter()
    logger.addFilter(f)
    set_current_trace_id("trace-1")
    try:
        logger.info("msg")
        rec = caplog.records[-1]
        assert rec.trace_id == "trace-1"
    finally:
        clear_current_trace_id()
        logger.removeFilter(f)


def test_trace_id_reaches_decision_log_of_denied_navigation(caplog):
    caplog.set_level(logging.INFO, logger="routeguard.audit")
    engine = RouteGuardEngine([require_auth], logger_sink=DecisionLogger(as_json=True))
    token = set_current_trace_id("nav-42")
    try:
        result = engine.evaluate_sync(GuardContext(current_path="/dashboard"))
    finally:
        clear_current_trace_id(token)
    assert result.redirect_to == "/login"
    records = [r for r in caplog.records if r.name == "routeguard.audit"]
    payload = json.loads(records[-1].getMessage())
    assert payload["trace_id"] == "nav-42"
    assert payload["reason"] == "Authentication required"
    assert get_current_trace_id() is None
