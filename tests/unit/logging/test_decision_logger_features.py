import json
import logging

from routeguard.logging.decision_logger import DecisionLogger


def test_decision_logger_as_json_true_emits_json(caplog):
    caplog.set_level(logging.INFO, logger="routeguard.audit")
    logger = DecisionLogger(as_json=True, level=logging.INFO)
    payload = {"allowed": True, "context": {"current_path": "/"}}

    logger.log(payload)

    assert caplog.records, "No log records captured"
    rec = caplog.records[-1]
    assert rec.getMessage() == json.dumps(payload, ensure_ascii=False)
    assert rec.levelno == logging.INFO
    assert rec.name == "routeguard.audit"


def test_decision_logger_as_json_false_emits_text_prefix(caplog):
    caplog.set_level(logging.DEBUG, logger="routeguard.audit")
    logger = DecisionLogger(as_json=False, level=logging.DEBUG)
    payload = {"allowed": False, "redirect_to": "/login"}

    logger.log(payload)

    rec = caplog.records[-1]
    msg = rec.getMessage()
    assert msg.startswith("decision {")
    assert "'redirect_to': '/login'" in msg
    assert rec.levelno == logging.DEBUG


def test_decision_logger_respects_log_level_warning(caplog):
    caplog.set_level(logging.INFO, logger="routeguard.audit")
    logger = DecisionLogger(as_json=True, level=logging.WARNING)

    logger.log({"allowed": False})

    assert caplog.records[-1].levelno == logging.WARNING


def test_decision_logger_custom_logger_name(caplog):
    caplog.set_level(logging.INFO, logger="myapp.routes")
    DecisionLogger(logger_name="myapp.routes").log({"allowed": True})
    assert caplog.records[-1].name == "myapp.routes"
