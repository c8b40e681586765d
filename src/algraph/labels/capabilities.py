from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar
import operator

T = TypeVar("T")


@dataclass(frozen=True)
class Eq(Generic[T]):
    """
    Equality capability for a vertex label type.

    `equals` must be reflexive, symmetric and transitive.

    `key` is optional. When given it must agree with `equals`
    (equal labels produce equal keys); collections then bucket labels
    by key. Without a key all labels share one bucket, which keeps
    unhashable labels usable at the cost of linear lookups.
    """

    equals: Callable[[T, T], bool]
    key: Optional[Callable[[T], Hashable]] = None

    def bucket(self, value: T) -> Hashable:
        if self.key is None:
            return None
        return self.key(value)

    def pair(self) -> "Eq[Tuple[T, T]]":
        """
        Componentwise equality on (source, target) pairs.
        """

        equals = self.equals
        key = self.key

        def pair_equals(x: Tuple[T, T], y: Tuple[T, T]) -> bool:
            return equals(x[0], y[0]) and equals(x[1], y[1])

        if key is None:
            return Eq(pair_equals)

        return Eq(pair_equals, lambda p: (key(p[0]), key(p[1])))


@dataclass(frozen=True)
class Ord(Generic[T]):
    """
    Total order capability.

    `compare` returns a negative, zero or positive integer and must be
    consistent with `eq`: compare(a, b) == 0 exactly when eq.equals(a, b).
    """

    compare: Callable[[T, T], int]
    eq: Eq[T]

    def sorted(self, values: Iterable[T]) -> List[T]:
        return sorted(values, key=cmp_to_key(self.compare))


# ---------------------------------------------------------------------
# Ready-made capabilities
# ---------------------------------------------------------------------


def _identity(value: Any) -> Any:
    return value


eq_strict: Eq[Any] = Eq(operator.eq, _identity)


def from_equals(equals: Callable[[T, T], bool]) -> Eq[T]:
    """
    Wrap a bare equality predicate. Lookups fall back to linear scans.
    """
    return Eq(equals)


def eq_by(key: Callable[[T], Hashable]) -> Eq[T]:
    """
    Labels are equal when their keys are equal.
    """
    return Eq(lambda a, b: key(a) == key(b), key)


def _natural_compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


ord_natural: Ord[Any] = Ord(_natural_compare, eq_strict)


def ord_by(key: Callable[[T], Any]) -> Ord[T]:
    """
    Order labels by a sort key. Labels with equal keys are equal.
    """
    return Ord(
        lambda a, b: _natural_compare(key(a), key(b)),
        eq_by(key),
    )
