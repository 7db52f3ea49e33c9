import types

import pytest

from routeguard.core.context import build_context, validate_context
from routeguard.core.errors import ContextUnavailableError, GuardConfigurationError
from routeguard.core.model import GuardContext


class AuthState:
    def __init__(self, is_authenticated=True, is_new_user=False):
        self.is_authenticated = is_authenticated
        self.is_new_user = is_new_user


class AsyncOnboarding:
    def __init__(self, complete=None, error=None):
        self._complete = complete
        self._error = error
        self.calls = 0

    async def onboarding_complete(self):
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._complete


@pytest.mark.asyncio
async def test_build_context_from_plain_and_async_providers():
    onboarding = AsyncOnboarding(complete=False)
    ctx = await build_context(AuthState(True, True), onboarding, "/onboarding/2")
    assert ctx == GuardContext(
        is_authenticated=True, is_new_user=True, onboarding_complete=False, current_path="/onboarding/2"
    )
    assert onboarding.calls == 1


@pytest.mark.asyncio
async def test_build_context_accepts_callables():
    auth = types.SimpleNamespace(is_authenticated=lambda: False, is_new_user=lambda: False)
    onboarding = types.SimpleNamespace(onboarding_complete=True)
    ctx = await build_context(auth, onboarding, "/")
    assert ctx.is_authenticated is False and ctx.onboarding_complete is True


@pytest.mark.asyncio
async def test_provider_failure_surfaces_as_context_unavailable():
    boom = RuntimeError("onboarding service unavailable")
    with pytest.raises(ContextUnavailableError) as exc_info:
        await build_context(AuthState(), AsyncOnboarding(error=boom), "/dashboard")
    assert exc_info.value.__cause__ is boom
    assert exc_info.value.provider == "onboarding provider"


@pytest.mark.asyncio
async def test_missing_field_fails_fast():
    with pytest.raises(GuardConfigurationError):
        await build_context(types.SimpleNamespace(is_authenticated=True), AsyncOnboarding(True), "/")


@pytest.mark.asyncio
async def test_undefined_value_is_not_guessed():
    with pytest.raises(GuardConfigurationError):
        await build_context(AuthState(is_new_user=None), AsyncOnboarding(True), "/")
    with pytest.raises(GuardConfigurationError):
        await build_context(AuthState(), AsyncOnboarding(complete=None), "/")


@pytest.mark.asyncio
async def test_missing_provider_or_path():
    with pytest.raises(GuardConfigurationError):
        await build_context(None, AsyncOnboarding(True), "/")
    with pytest.raises(GuardConfigurationError):
        await build_context(AuthState(), AsyncOnboarding(True), None)


def test_validate_context():
    ctx = GuardContext(current_path="/")
    assert validate_context(ctx) is ctx
    with pytest.raises(GuardConfigurationError):
        validate_context({"is_authenticated": True})
    with pytest.raises(GuardConfigurationError):
        validate_context(GuardContext(is_authenticated=1, current_path="/"))  # type: ignore[arg-type]
    with pytest.raises(GuardConfigurationError):
        validate_context(GuardContext(current_path=None))  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_failing_provider_property_is_wrapped():
    class BrokenAuth:
        @property
        def is_authenticated(self):
            raise TimeoutError("session lookup timed out")

        is_new_user = False

    with pytest.raises(ContextUnavailableError) as exc_info:
        await build_context(BrokenAuth(), AsyncOnboarding(True), "/")
    assert isinstance(exc_info.value.__cause__, TimeoutError)
