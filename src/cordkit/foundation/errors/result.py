"""Ok/Err results returned by REST calls and cache lookups.

A ``Result`` holds either the parsed entity or the ``RestError`` that
prevented it. Callers branch with ``is_ok``, ``match`` or structural
pattern matching on ``Result(value)``.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Result(Generic[T, E]):
    """Success (Ok) or failure (Err) of one operation.

    Examples:
        >>> channel = await rest.channels.get_channel(channel_id)
        >>> channel.map(lambda c: c.name).unwrap_or("unknown")
        'general'
        >>> match channel:
        ...     case Result(Channel() as c): print(c.name)
        ...     case Result(RestError() as e): print(e.code)
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─── Extraction ──────────────────────────────────────────────────

    def unwrap(self) -> T:
        """The Ok value; RuntimeError on Err (see ``unwrap_or_raise`` for a typed error)."""
        if not self._is_ok:
            raise RuntimeError(f"Called unwrap on {self!r}")
        return self._value  # type: ignore[return-value]

    def unwrap_err(self) -> E:
        if self._is_ok:
            raise RuntimeError(f"Called unwrap_err on {self!r}")
        return self._value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def ok(self) -> T | None:
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        return None if self._is_ok else self._value  # type: ignore[return-value]

    # ─── Transformation ──────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        if not self._is_ok:
            return self  # type: ignore[return-value]
        return Ok(f(self._value))  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        if self._is_ok:
            return self  # type: ignore[return-value]
        return Err(f(self._value))  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a call that itself returns a Result; an Err short-circuits."""
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok is other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, id(self._value)))


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    return Result(value, True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    return Result(error, False)


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect Ok values into one list, or return the first Err."""
    values: list[T] = []
    for result in results:
        if result.is_err():
            return result  # type: ignore[return-value]
        values.append(result.unwrap())
    return Ok(values)
