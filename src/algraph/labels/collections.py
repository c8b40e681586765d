from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Tuple, TypeVar

from algraph.errors import AlgraphError
from algraph.labels.capabilities import Eq

T = TypeVar("T")


class LabelSet(Generic[T]):
    """
    Set of labels under a supplied equality capability.

    Labels are grouped in buckets by `eq.key`; membership only scans
    the bucket a label falls into.

    Folds build sets in place with `_absorb` and hand them out frozen.
    A frozen set rejects further additions.
    """

    __slots__ = ("eq", "_buckets", "_size", "_frozen")

    def __init__(self, eq: Eq[T], items: Iterable[T] = ()) -> None:
        self.eq = eq
        self._buckets: Dict[Hashable, List[T]] = {}
        self._size = 0
        self._frozen = False
        for item in items:
            self._add(item)

    # -------------------- Construction --------------------

    @classmethod
    def singleton(cls, eq: Eq[T], item: T) -> "LabelSet[T]":
        s = cls(eq)
        s._add(item)
        return s

    def _add(self, item: T) -> bool:
        if self._frozen:
            raise AlgraphError("cannot add to a frozen LabelSet")
        bucket = self._buckets.setdefault(self.eq.bucket(item), [])
        equals = self.eq.equals
        for existing in bucket:
            if equals(existing, item):
                return False
        bucket.append(item)
        self._size += 1
        return True

    def _absorb(self, other: "LabelSet[T]") -> "LabelSet[T]":
        """
        In-place union for fold intermediates.

        Adds the smaller operand into the larger one and returns the
        larger. An empty operand is never written to, so a shared empty
        seed stays empty. Both operands must not be used afterwards.
        """
        if not other:
            return self
        if not self:
            return other
        big, small = (self, other) if len(self) >= len(other) else (other, self)
        for item in small:
            big._add(item)
        return big

    def freeze(self) -> "LabelSet[T]":
        self._frozen = True
        return self

    # -------------------- Queries --------------------

    def __contains__(self, item: object) -> bool:
        bucket = self._buckets.get(self.eq.bucket(item))
        if not bucket:
            return False
        equals = self.eq.equals
        return any(equals(existing, item) for existing in bucket)

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets.values():
            yield from bucket

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LabelSet({list(self)!r})"

    def issubset(self, other: "LabelSet[T]") -> bool:
        if len(self) > len(other):
            return False
        return all(item in other for item in self)

    def same_as(self, other: "LabelSet[T]") -> bool:
        return len(self) == len(other) and self.issubset(other)


class AdjacencyMap(Generic[T]):
    """
    Mapping from vertex to the LabelSet of its direct successors.

    Every vertex of the graph is a key, isolated vertices and sinks
    included (with an empty successor set). Each key owns its
    successor set; no two keys share one.
    """

    __slots__ = ("eq", "_buckets", "_size", "_frozen")

    def __init__(self, eq: Eq[T]) -> None:
        self.eq = eq
        self._buckets: Dict[Hashable, List[Tuple[T, LabelSet[T]]]] = {}
        self._size = 0
        self._frozen = False

    @classmethod
    def singleton(cls, eq: Eq[T], vertex: T) -> "AdjacencyMap[T]":
        m = cls(eq)
        m._merge_entry(vertex, LabelSet(eq))
        return m

    # -------------------- Internals --------------------

    def _locate(self, vertex: object) -> int:
        bucket = self._buckets.get(self.eq.bucket(vertex), [])
        equals = self.eq.equals
        for index, (key, _) in enumerate(bucket):
            if equals(key, vertex):
                return index
        return -1

    def _merge_entry(self, vertex: T, successors: LabelSet[T]) -> None:
        if self._frozen:
            raise AlgraphError("cannot modify a frozen AdjacencyMap")
        bucket = self._buckets.setdefault(self.eq.bucket(vertex), [])
        index = self._locate(vertex)
        if index < 0:
            bucket.append((vertex, successors))
            self._size += 1
            return
        key, existing = bucket[index]
        bucket[index] = (key, existing._absorb(successors))

    # -------------------- Mapping protocol --------------------

    def __contains__(self, vertex: object) -> bool:
        return self._locate(vertex) >= 0

    def __getitem__(self, vertex: T) -> LabelSet[T]:
        index = self._locate(vertex)
        if index < 0:
            raise KeyError(vertex)
        return self._buckets[self.eq.bucket(vertex)][index][1]

    def get(self, vertex: T, default=None):
        try:
            return self[vertex]
        except KeyError:
            return default

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets.values():
            for key, _ in bucket:
                yield key

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {list(v)!r}" for k, v in self.items())
        return f"AdjacencyMap({{{body}}})"

    def items(self) -> Iterator[Tuple[T, LabelSet[T]]]:
        for bucket in self._buckets.values():
            yield from bucket

    # -------------------- Fold building --------------------

    def _absorb(self, other: "AdjacencyMap[T]") -> "AdjacencyMap[T]":
        """
        In-place merge for fold intermediates; successor sets of shared
        keys are united. Same ownership rules as LabelSet._absorb.
        """
        if not other:
            return self
        if not self:
            return other
        big, small = (self, other) if len(self) >= len(other) else (other, self)
        for vertex, successors in small.items():
            big._merge_entry(vertex, successors)
        return big

    def _cross(self, other: "AdjacencyMap[T]") -> "AdjacencyMap[T]":
        """
        New map sending every key of this map to its own copy of
        the key set of `other`.
        """
        targets = list(other)
        result = AdjacencyMap(self.eq)
        for vertex in self:
            result._merge_entry(vertex, LabelSet(self.eq, targets))
        return result

    def freeze(self) -> "AdjacencyMap[T]":
        self._frozen = True
        for _, successors in self.items():
            successors.freeze()
        return self
