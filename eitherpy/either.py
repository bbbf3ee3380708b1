"""Either: a closed two-variant result type and its synchronous combinators.

``Left`` carries the error channel, ``Right`` the success channel. The two
variants are independent frozen dataclasses joined by the ``Either`` union, so
``isinstance`` checks and ``match`` statements over them are exhaustive.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, ClassVar, Generic, Literal, Optional, TypeGuard, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")
M = TypeVar("M")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Left(Generic[L]):
    value: L
    tag: ClassVar[Literal["Left"]] = "Left"


@dataclass(frozen=True)
class Right(Generic[R]):
    value: R
    tag: ClassVar[Literal["Right"]] = "Right"


Either = Union[Left[L], Right[R]]


def _expect(e: Any, variant: type) -> Any:
    if isinstance(e, variant):
        return e
    raise TypeError(f"expected Either, got {type(e).__name__}")


def left(value: L) -> Either[L, Any]:
    return Left(value)


def right(value: R) -> Either[Any, R]:
    return Right(value)


def is_left(e: Either[L, R]) -> TypeGuard[Left[L]]:
    return isinstance(e, Left)


def is_right(e: Either[L, R]) -> TypeGuard[Right[R]]:
    return isinstance(e, Right)


def map(e: Either[L, A], f: Callable[[A], B]) -> Either[L, B]:
    """Apply ``f`` to a Right payload; a Left is returned as is.

    ``f`` runs outside any fault boundary: if it raises, the exception reaches
    the caller. Use ``try_catch`` inside ``f`` to turn it into a Left.
    """
    if is_right(e):
        return Right(f(e.value))
    return _expect(e, Left)


def map_left(e: Either[L, R], f: Callable[[L], M]) -> Either[M, R]:
    if is_left(e):
        return Left(f(e.value))
    return _expect(e, Right)


def chain(e: Either[L, A], f: Callable[[A], Either[L, B]]) -> Either[L, B]:
    """Sequence a step that may itself fail.

    A Right feeds its payload to ``f`` and returns whatever ``f`` returns. A
    Left short-circuits: ``f`` is not called and the same Left comes back.
    """
    if is_right(e):
        return f(e.value)
    return _expect(e, Left)


def pipe(initial: Either[L, A], *fns: Callable[[Any], Either[L, Any]]) -> Either[L, Any]:
    """Chain ``fns`` left to right starting from ``initial``.

    ``pipe(e, f, g)`` is ``chain(chain(e, f), g)``. Steps after the first Left
    are never invoked. Intermediate payload types are not checked.
    """
    return reduce(chain, fns, initial)


def fold(e: Either[L, A], on_left: Callable[[L], B], on_right: Callable[[A], B]) -> B:
    if is_right(e):
        return on_right(e.value)
    return on_left(_expect(e, Left).value)


def from_nullable(value: Optional[A], error: L) -> Either[L, A]:
    return Left(error) if value is None else Right(value)


def get_or_else(e: Either[L, A], default: A) -> A:
    if is_right(e):
        return e.value
    _expect(e, Left)
    return default
