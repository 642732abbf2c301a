from __future__ import annotations
import asyncio
from typing import Any, Awaitable, Callable, Generator, Generic, Optional, Tuple, TypeVar, Union

from .maybe import ABSENT, Maybe

T = TypeVar("T")
R = TypeVar("R")
D = TypeVar("D")


class Pending(Generic[T]):
    """A ``Maybe`` that has not been resolved yet.

    Wraps a zero-argument async callable producing a ``Maybe``. Nothing runs
    until the chain is awaited; the first await resolves the source and every
    later await returns the same container. Each operator awaits the previous
    step and then applies the matching ``Maybe`` operator, so a chain can mix
    sync and async steps and still be awaited once at the end::

        human = await (
            Maybe.from_(h)
            .bind_async(load_profile)
            .with_(lambda p: p.touch())
            .check(lambda p: p.active)
            .value_or_throw("inactive profile")
        )
    """

    def __init__(self, run: Callable[[], Awaitable[Optional[Maybe[T]]]]) -> None:
        self._run = run
        self._outcome: Optional[asyncio.Future[Maybe[T]]] = None

    def done(self) -> bool:
        return self._outcome is not None and self._outcome.done()

    async def resolve(self) -> Maybe[T]:
        # the first caller runs the source; concurrent and later callers share its outcome
        if self._outcome is None:
            self._outcome = asyncio.get_running_loop().create_future()
            try:
                self._outcome.set_result(_as_maybe(await self._run()))
            except asyncio.CancelledError:
                self._outcome.cancel()
                raise
            except BaseException as ex:
                self._outcome.set_exception(ex)
        return await self._outcome

    def __await__(self) -> Generator[Any, None, Maybe[T]]:
        return self.resolve().__await__()

    def _then(self, step: Callable[[Maybe[T]], Union[Maybe[R], Awaitable[Maybe[R]]]]) -> "Pending[R]":
        async def run() -> Maybe[R]:
            result = step(await self.resolve())
            if isinstance(result, Maybe):
                return result
            return await result
        return Pending(run)

    # -- chaining -----------------------------------------------------------

    def bind(self, f: Callable[[T], Optional[Maybe[R]]], error_message: str = "") -> "Pending[R]":
        return self._then(lambda m: m.bind(f, error_message))

    def map(self, f: Callable[[T], Optional[R]], error_message: str = "") -> "Pending[R]":
        return self._then(lambda m: m.map(f, error_message))

    def bind_async(self, f: Callable[[T], Any], error_message: str = "") -> "Pending[R]":
        return self._then(lambda m: m.bind_async(f, error_message))

    def map_async(self, f: Callable[[T], Any], error_message: str = "") -> "Pending[R]":
        return self._then(lambda m: m.map_async(f, error_message))

    def check(self, predicate: Callable[[T], bool], error_message: Optional[str] = None) -> "Pending[T]":
        return self._then(lambda m: m.check(predicate, error_message))

    def check_null(self, error_message: str = "") -> "Pending[T]":
        return self._then(lambda m: m.check_null(error_message))

    def check_async(self, predicate: Callable[[T], Awaitable[bool]], error_message: Optional[str] = None) -> "Pending[T]":
        return self._then(lambda m: m.check_async(predicate, error_message))

    def with_(self, *modifications: Callable[[T], Any]) -> "Pending[T]":
        return self._then(lambda m: m.with_(*modifications))

    # -- terminal -----------------------------------------------------------

    async def bind_out(self, f: Callable[[T], Optional[Maybe[R]]], error_message: str = "",
                       default: D = None) -> Tuple[Maybe[R], Union[R, D]]:
        return (await self.resolve()).bind_out(f, error_message, default)

    async def has_value(self) -> bool:
        return (await self.resolve()).has_value

    async def value_or_throw(self, error_message: Optional[str] = None) -> T:
        return (await self.resolve()).value_or_throw(error_message)

    async def or_else(self, default: T) -> T:
        return (await self.resolve()).or_else(default)

    async def or_else_get(self, provider: Callable[[], T]) -> T:
        return (await self.resolve()).or_else_get(provider)

    async def or_else_async(self, provider: Callable[[], Awaitable[Optional[T]]],
                            error_message: Optional[str] = None) -> T:
        return await (await self.resolve()).or_else_async(provider, error_message)


def defer(source: Awaitable[Optional[Maybe[T]]]) -> Pending[T]:
    """Lift an awaitable of ``Maybe`` (e.g. a coroutine) into a chainable ``Pending``."""
    async def run() -> Optional[Maybe[T]]:
        return await source
    return Pending(run)


def _as_maybe(result: Any) -> Maybe[Any]:
    if result is None:
        return ABSENT
    if not isinstance(result, Maybe):
        raise TypeError(f"Pending source must resolve to Maybe, got {type(result).__name__}")
    return result
