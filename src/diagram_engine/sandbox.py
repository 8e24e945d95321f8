# MIT License (see LICENSE)
"""
Loader for the optional free-play rigid-body sandbox.

The sandbox engine itself is an outside collaborator. The host hands in a
factory that builds it; the loader owns nothing global, so two loaders never
share an engine or a failure.

States:
    NOT_READY  initialize() has not succeeded yet
    READY      the engine is available
    FAILED     the last initialize() raised; calling it again retries
"""
from __future__ import annotations
import logging
from typing import Callable, Generic, TypeVar

from .errors import SandboxNotReady

logger = logging.getLogger(__name__)

NOT_READY = "not_ready"
READY = "ready"
FAILED = "failed"

T = TypeVar("T")


class SandboxLoader(Generic[T]):
    """
    Explicitly initialized holder of a sandbox engine.

    Args:
        factory: Zero-argument callable building the engine.

    Example:
        loader = SandboxLoader(make_engine)
        loader.initialize()
        loader.engine.step()
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._engine: T | None = None
        self._state = NOT_READY
        self.error: Exception | None = None

    @property
    def state(self) -> str:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state == READY

    def initialize(self) -> T:
        """
        Build the engine once. Later calls return the same engine.

        Raises:
            SandboxNotReady: If the factory raised; the cause is chained and
                             kept on `error`.
        """
        if self._state == READY:
            return self._engine
        try:
            engine = self._factory()
        except Exception as exc:
            self._state = FAILED
            self.error = exc
            logger.warning("sandbox failed to initialize: %s", exc)
            raise SandboxNotReady(f"sandbox failed to initialize: {exc}") from exc
        self._engine = engine
        self._state = READY
        self.error = None
        logger.debug("sandbox ready")
        return engine

    @property
    def engine(self) -> T:
        """The engine; raises SandboxNotReady before a successful initialize()."""
        if self._state != READY:
            raise SandboxNotReady(f"sandbox is {self._state}; call initialize() first")
        return self._engine
