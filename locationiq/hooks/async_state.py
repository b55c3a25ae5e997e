"""Observable ``{data, loading, error}`` state wrapped around one async operation.

A hook moves ``IDLE -> PENDING -> RESOLVED | REJECTED`` on ``execute`` and
back to ``IDLE`` on ``reset``. Every transition replaces the immutable
``AsyncState`` snapshot and notifies subscribers synchronously.

Overlapping executions are not coalesced. Without ``latest_only`` each call
writes its outcome when it settles, so a slow earlier call can overwrite the
result of a later one. With ``latest_only=True`` every execution takes a
sequence number and only the most recent one may write; ``reset`` also
invalidates anything still in flight.
"""

import itertools
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any, Generic, TypeVar

import structlog
from pydantic import BaseModel, ConfigDict

logger = structlog.get_logger()

T = TypeVar("T")


class HookStatus(StrEnum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class AsyncState(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: T | None = None
    loading: bool = False
    error: Exception | None = None
    status: HookStatus = HookStatus.IDLE


Listener = Callable[[AsyncState[Any]], None]


class AsyncHook(Generic[T]):
    def __init__(
        self,
        operation: Callable[[], Awaitable[T]] | None = None,
        *,
        latest_only: bool = False,
    ):
        self._operation = operation
        self._latest_only = latest_only
        self._state: AsyncState[T] = AsyncState()
        self._listeners: list[Listener] = []
        self._sequence = itertools.count(1)
        self._latest = 0

    @property
    def state(self) -> AsyncState[T]:
        return self._state

    @property
    def data(self) -> T | None:
        return self._state.data

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Exception | None:
        return self._state.error

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with each new state. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def execute(self) -> None:
        if self._operation is None:
            raise TypeError(f"{type(self).__name__} has no bound operation")
        await self._run(self._operation)

    def reset(self) -> None:
        self._latest = next(self._sequence)
        self._set(AsyncState())

    async def _run(self, call: Callable[[], Awaitable[T]]) -> None:
        ticket = next(self._sequence)
        self._latest = ticket
        self._set(AsyncState(loading=True, status=HookStatus.PENDING))
        try:
            result = await call()
        except Exception as e:
            if self._is_stale(ticket):
                return
            logger.debug("Hook execution rejected", hook=type(self).__name__, error=type(e).__name__)
            self._set(AsyncState(error=e, status=HookStatus.REJECTED))
            return
        if self._is_stale(ticket):
            return
        self._set(AsyncState(data=result, status=HookStatus.RESOLVED))

    def _is_stale(self, ticket: int) -> bool:
        return self._latest_only and ticket != self._latest

    def _set(self, state: AsyncState[T]) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
