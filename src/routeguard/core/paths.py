from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import GuardConfigurationError

ENV_SIGN_IN = "ROUTEGUARD_SIGN_IN_PATH"
ENV_ONBOARDING_PREFIX = "ROUTEGUARD_ONBOARDING_PREFIX"
ENV_ONBOARDING_START = "ROUTEGUARD_ONBOARDING_START"
ENV_LANDING = "ROUTEGUARD_LANDING_PATH"


def is_under(path: str, prefix: str) -> bool:
    """Segment-aware prefix check: '/onboarding/2' is under '/onboarding', '/onboardingx' is not."""
    prefix = prefix.rstrip("/") or "/"
    if prefix == "/":
        return path.startswith("/")
    return path == prefix or path.startswith(prefix + "/")


@dataclass(frozen=True)
class RoutePaths:
    """Paths the built-in guards redirect to."""

    sign_in: str = "/login"
    onboarding_prefix: str = "/onboarding"
    onboarding_start: str = "/onboarding/1"
    landing: str = "/dashboard"

    def __post_init__(self) -> None:
        for field_name in ("sign_in", "onboarding_prefix", "onboarding_start", "landing"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.startswith("/"):
                raise GuardConfigurationError(
                    f"RoutePaths.{field_name} must be an absolute path, got {value!r}"
                )
        if not is_under(self.onboarding_start, self.onboarding_prefix):
            raise GuardConfigurationError(
                f"onboarding_start {self.onboarding_start!r} is not under "
                f"onboarding_prefix {self.onboarding_prefix!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RoutePaths":
        """Build paths from ``ROUTEGUARD_*`` environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            sign_in=env.get(ENV_SIGN_IN, defaults.sign_in),
            onboarding_prefix=env.get(ENV_ONBOARDING_PREFIX, defaults.onboarding_prefix),
            onboarding_start=env.get(ENV_ONBOARDING_START, defaults.onboarding_start),
            landing=env.get(ENV_LANDING, defaults.landing),
        )


DEFAULT_PATHS = RoutePaths()

__all__ = ["RoutePaths", "DEFAULT_PATHS", "is_under"]
