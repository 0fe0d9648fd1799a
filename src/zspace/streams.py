"""
Sequence-processing helpers over any iterable.

The free functions work on anything iterable and only ever iterate their source
once. :class:`Stream` chains them into a pipeline; intermediate steps are lazy
and make the stream single-pass.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)


def to_list(iterable: Iterable[T]) -> list[T]:
    """
    Materialize ``iterable`` in iteration order.
    """
    return list(iterable)


def for_each(iterable: Iterable[T], fn: Callable[[T], object]) -> None:
    """
    Call ``fn`` on each element in iteration order.
    """
    for x in iterable:
        fn(x)


def group_by(iterable: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Group elements by ``key``. Keys appear in first-seen order and each group
    keeps iteration order.
    """
    groups: dict[K, list[T]] = {}
    for x in iterable:
        groups.setdefault(key(x), []).append(x)
    return groups


@dataclass(frozen=True)
class Stream(Generic[T]):
    source: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return iter(self.source)

    def map(self, fn: Callable[[T], U]) -> Stream[U]:
        return Stream(map(fn, self.source))

    def filter(self, pred: Callable[[T], bool]) -> Stream[T]:
        return Stream(filter(pred, self.source))

    def to_list(self) -> list[T]:
        return to_list(self.source)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self.source)

    def for_each(self, fn: Callable[[T], object]) -> None:
        for_each(self.source, fn)

    def group_by(self, key: Callable[[T], K]) -> dict[K, list[T]]:
        return group_by(self.source, key)

    def count(self) -> int:
        return sum(1 for _ in self.source)


def stream(iterable: Iterable[T]) -> Stream[T]:
    return Stream(iterable)
