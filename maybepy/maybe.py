from __future__ import annotations
import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Optional, Tuple, TypeVar, Union

from . import config
from .errors import ContractViolation, ProviderReturnedNone

if TYPE_CHECKING:
    from .pending import Pending

T = TypeVar("T")
R = TypeVar("R")
D = TypeVar("D")


class Maybe(Generic[T]):
    """A value that is either ``Present`` or absent.

    Operators short-circuit on absence: the supplied function is never called
    and the result stays absent. For ``bind``/``map`` a non-empty
    ``error_message`` turns a missing result into a raised
    ``ContractViolation``; for ``check``/``check_async`` any message does,
    including ``""``.
    """

    @property
    def has_value(self) -> bool: raise NotImplementedError
    def is_present(self) -> bool: return self.has_value
    def is_absent(self) -> bool: return not self.has_value

    @staticmethod
    def from_(value: Optional[T]) -> "Maybe[T]":
        return Present(value) if value is not None else ABSENT  # type: ignore[return-value]

    from_optional = from_

    def to_optional(self) -> Optional[T]:
        return self.value if self.has_value else None  # type: ignore[attr-defined]

    # -- bind ---------------------------------------------------------------

    def bind(self, f: Callable[[T], Optional["Maybe[R]"]], error_message: str = "") -> "Maybe[R]":
        if not self.has_value:
            return ABSENT  # type: ignore[return-value]
        return _settle(f(self.value), error_message, "bind")  # type: ignore[attr-defined]

    def bind_out(self, f: Callable[[T], Optional["Maybe[R]"]], error_message: str = "",
                 default: D = None) -> Tuple["Maybe[R]", Union[R, D]]:
        """Like ``bind`` but also returns the unwrapped result (or ``default``)."""
        result = self.bind(f, error_message)
        return result, (result.value if result.has_value else default)  # type: ignore[attr-defined]

    def map(self, f: Callable[[T], Optional[R]], error_message: str = "") -> "Maybe[R]":
        if not self.has_value:
            return ABSENT  # type: ignore[return-value]
        return _settle_value(f(self.value), error_message, "map")  # type: ignore[attr-defined]

    def bind_async(self, f: Callable[[T], Union[Awaitable[Optional["Maybe[R]"]], Optional["Maybe[R]"]]],
                   error_message: str = "") -> "Pending[R]":
        """Bind with a producer that may return an awaitable; ``f`` may also be synchronous."""
        from .pending import Pending

        async def run() -> Maybe[R]:
            if not self.has_value:
                return ABSENT  # type: ignore[return-value]
            result = f(self.value)  # type: ignore[attr-defined]
            if inspect.isawaitable(result):
                result = await result
            return _settle(result, error_message, "bind_async")
        return Pending(run)

    def map_async(self, f: Callable[[T], Union[Awaitable[Optional[R]], Optional[R]]],
                  error_message: str = "") -> "Pending[R]":
        from .pending import Pending

        async def run() -> Maybe[R]:
            if not self.has_value:
                return ABSENT  # type: ignore[return-value]
            result = f(self.value)  # type: ignore[attr-defined]
            if inspect.isawaitable(result):
                result = await result
            return _settle_value(result, error_message, "map_async")
        return Pending(run)

    # -- check --------------------------------------------------------------

    def check(self, predicate: Callable[[T], bool], error_message: Optional[str] = None) -> "Maybe[T]":
        # absence is not re-validated, even with a message
        if not self.has_value:
            return self
        if predicate(self.value):  # type: ignore[attr-defined]
            return self
        return _fail_check(error_message, "check")

    def check_null(self, error_message: str = "") -> "Maybe[T]":
        if not self.has_value:
            _violate(error_message, "check_null")
        return self

    def check_async(self, predicate: Callable[[T], Awaitable[bool]], error_message: Optional[str] = None) -> "Pending[T]":
        from .pending import Pending

        async def run() -> Maybe[T]:
            if not self.has_value:
                return self
            if await predicate(self.value):  # type: ignore[attr-defined]
                return self
            return _fail_check(error_message, "check_async")
        return Pending(run)

    # -- mutate -------------------------------------------------------------

    def with_(self, *modifications: Callable[[T], Any]) -> "Maybe[T]":
        """Apply each modification to the payload in order.

        The payload is shared, not copied: changes are visible through every
        reference to it, including the one the caller wrapped.
        """
        if not self.has_value:
            return self
        value = self.value  # type: ignore[attr-defined]
        for modify in modifications:
            modify(value)
        return Present(value)

    # -- terminal -----------------------------------------------------------

    def value_or_throw(self, error_message: Optional[str] = None) -> T:
        if self.has_value:
            return self.value  # type: ignore[attr-defined]
        if error_message is None:
            error_message = config.get_settings().default_error_message
        _violate(error_message, "value_or_throw")

    def or_else(self, default: T) -> T:
        return self.value if self.has_value else default  # type: ignore[attr-defined]

    def or_else_get(self, provider: Callable[[], T]) -> T:
        return self.value if self.has_value else provider()  # type: ignore[attr-defined]

    async def or_else_async(self, provider: Callable[[], Awaitable[Optional[T]]],
                            error_message: Optional[str] = None) -> T:
        if self.has_value:
            return self.value  # type: ignore[attr-defined]
        fallback = provider()
        if inspect.isawaitable(fallback):
            fallback = await fallback
        if fallback is not None:
            return fallback
        if error_message is None:
            error_message = config.get_settings().provider_error_message
        config.get_logger().debug("contract violation", op="or_else_async", error=error_message)
        raise ProviderReturnedNone(error_message, op="or_else_async")


@dataclass(frozen=True)
class Present(Maybe[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("Present cannot hold None; use Maybe.from_ for nullable values")

    @property
    def has_value(self) -> bool: return True


class _Absent(Maybe[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "Absent"

    @property
    def has_value(self) -> bool: return False


ABSENT: Maybe[Any] = _Absent()


def from_nullable(v: Optional[T]) -> Maybe[T]:
    return Maybe.from_(v)


def _violate(error_message: str, op: str) -> None:
    config.get_logger().debug("contract violation", op=op, error=error_message)
    raise ContractViolation(error_message, op=op)


def _absent(op: str) -> Maybe[Any]:
    config.get_logger().debug("step produced no value", op=op)
    return ABSENT


def _reject(error_message: str, op: str) -> Maybe[Any]:
    if error_message:
        _violate(error_message, op)
    return _absent(op)


def _fail_check(error_message: Optional[str], op: str) -> Maybe[Any]:
    # any message, even "", raises; only an omitted one means silent absence
    if error_message is None:
        return _absent(op)
    _violate(error_message, op)


def _settle(result: Any, error_message: str, op: str) -> Maybe[Any]:
    if result is None:
        return _reject(error_message, op)
    if not isinstance(result, Maybe):
        raise TypeError(f"{op} expects a function returning Maybe, got {type(result).__name__}; use map for plain values")
    if not result.has_value:
        return _reject(error_message, op)
    return result


def _settle_value(result: Any, error_message: str, op: str) -> Maybe[Any]:
    if result is None:
        return _reject(error_message, op)
    return Present(result)
