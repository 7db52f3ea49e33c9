"""Routing-layer adapters that enforce guard decisions.

Import the framework-specific module directly (``routeguard.adapters.starlette``
or ``routeguard.adapters.litestar``); each requires its optional extra.
"""

from ._common import ContextBuilder, SAFE_DEFAULT_REASON, decide

__all__ = ["ContextBuilder", "SAFE_DEFAULT_REASON", "decide"]
