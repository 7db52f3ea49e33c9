#!/usr/bin/env python3
"""
DecisionLogger configuration demo.

Run:
  python examples/logging/decision_logger_demo.py

Shows plain sampling and smart (allow/deny aware) sampling. Emits JSON lines
via the 'routeguard.audit' logger.
"""

import logging

from routeguard import GuardContext, RouteGuardEngine, public_only, require_auth
from routeguard.logging.decision_logger import DecisionLogger


def setup_logging() -> None:
    root = logging.getLogger()
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(h)
    root.setLevel(logging.INFO)


def run(engine: RouteGuardEngine) -> None:
    engine.evaluate_sync(GuardContext(is_authenticated=True, onboarding_complete=True, current_path="/dashboard"))
    engine.evaluate_sync(GuardContext(is_authenticated=False, current_path="/dashboard"))


def main() -> None:
    setup_logging()

    print("\n=== 1) Log everything ===")
    run(RouteGuardEngine([require_auth], logger_sink=DecisionLogger(as_json=True)))

    print("\n=== 2) Smart sampling: every denial, 5% of allows ===")
    audit = DecisionLogger(as_json=True, smart_sampling=True, category_sampling_rates={"deny": 1.0, "allow": 0.05})
    run(RouteGuardEngine([require_auth], logger_sink=audit))

    print("\n=== 3) Public-only page, text format ===")
    run(RouteGuardEngine([public_only], logger_sink=DecisionLogger(as_json=False)))


if __name__ == "__main__":
    main()
