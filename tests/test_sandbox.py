import pytest

from diagram_engine.errors import SandboxNotReady
from diagram_engine.sandbox import FAILED, NOT_READY, READY, SandboxLoader


class FakeEngine:
    pass


def test_engine_unavailable_before_initialize():
    loader = SandboxLoader(FakeEngine)
    assert loader.state == NOT_READY
    with pytest.raises(SandboxNotReady):
        loader.engine


def test_initialize_once():
    calls = []

    def factory():
        calls.append(1)
        return FakeEngine()

    loader = SandboxLoader(factory)
    engine = loader.initialize()
    assert loader.ready and loader.state == READY
    assert loader.initialize() is engine
    assert loader.engine is engine
    assert len(calls) == 1


def test_failure_is_reported_and_retryable():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise OSError("wasm module missing")
        return FakeEngine()

    loader = SandboxLoader(flaky)
    with pytest.raises(SandboxNotReady) as exc:
        loader.initialize()
    assert isinstance(exc.value.__cause__, OSError)
    assert loader.state == FAILED
    assert isinstance(loader.error, OSError)
    with pytest.raises(SandboxNotReady):
        loader.engine

    loader.initialize()
    assert loader.ready
    assert loader.error is None


def test_loaders_are_independent():
    a = SandboxLoader(FakeEngine)
    b = SandboxLoader(FakeEngine)
    a.initialize()
    assert not b.ready
    assert b.initialize() is not a.engine
