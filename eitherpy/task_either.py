"""Asynchronous counterparts of the Either combinators.

A ``TaskEither`` is any awaitable that settles with an ``Either``. The helpers
here await their input and then apply the synchronous combinator, so they
share its short-circuit rule and capture no faults.
"""
from __future__ import annotations
from typing import Any, Awaitable, Callable, TypeVar, Union

from .either import Either, Left, Right, chain, fold, get_or_else, map, map_left
from .fault import _settle

L = TypeVar("L"); R = TypeVar("R"); M = TypeVar("M"); A = TypeVar("A"); B = TypeVar("B")

TaskEither = Awaitable[Either[L, R]]
Step = Callable[[Any], Union[Either[L, Any], Awaitable[Either[L, Any]]]]


async def left_task(value: L) -> Either[L, Any]:
    return Left(value)


async def right_task(value: R) -> Either[Any, R]:
    return Right(value)


async def from_either(e: Either[L, R]) -> Either[L, R]:
    return e


async def map_task(te: TaskEither[L, A], f: Callable[[A], B]) -> Either[L, B]:
    return map(await te, f)


async def map_left_task(te: TaskEither[L, R], f: Callable[[L], M]) -> Either[M, R]:
    return map_left(await te, f)


async def chain_task(te: TaskEither[L, A], f: Callable[[A], TaskEither[L, B]]) -> Either[L, B]:
    # a Left comes back from chain() as a plain value, f is never called
    return await _settle(chain(await te, f))


async def pipe_task(initial: Union[Either[L, A], TaskEither[L, A]], *fns: Step[L]) -> Either[L, Any]:
    """Chain ``fns`` left to right; each step may return an Either or a TaskEither.

    Steps after the first Left are not invoked, sync or async alike.
    """
    e = await _settle(initial)
    for fn in fns:
        e = await _settle(chain(e, fn))
    return e


async def fold_task(te: TaskEither[L, A], on_left: Callable[[L], B], on_right: Callable[[A], B]) -> B:
    return fold(await te, on_left, on_right)


async def get_or_else_task(te: TaskEither[L, A], default: A) -> A:
    return get_or_else(await te, default)
