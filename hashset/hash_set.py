from __future__ import annotations
from typing import *

class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...

T = TypeVar("T", bound=Hashable)
O = TypeVar("O", bound=SupportsLessThan)

class HashSet(Generic[T]):
    """An unordered collection of unique hashable elements.

    Elements live in a native set used purely as a membership table. Every
    algebra operation returns a freshly allocated set that shares no storage
    with its operands.

    A HashSet is not synchronized. Callers that share one between threads
    must lock around every access themselves. Mutating a set while it is
    being enumerated through range() or iter() is not allowed; the
    enumeration works on a snapshot and will not fail, but what the caller
    observes is undefined.
    """

    items: Set[T]
    def __init__(self, iterable: Optional[Iterable[T]] = None):
        if iterable is None:
            self.items = set()
        else:
            self.items = set(iterable)

    @classmethod
    def from_items(cls, *items: T) -> HashSet[T]:
        return cls(items)

    def insert(self, *items: T):
        for item in items:
            self.items.add(item)

    def remove(self, item: T) -> bool:
        """Remove item, returning whether it was a member."""
        if item in self.items:
            self.items.discard(item)
            return True
        return False

    def clear(self):
        self.items.clear()

    def contains(self, item: T) -> bool:
        return item in self.items

    def size(self) -> int:
        return len(self.items)

    def to_list(self) -> List[T]:
        return list(self.items)

    def range(self, callback: Callable[[T], bool]):
        """Call callback on each member until it returns a falsy value."""
        for item in tuple(self.items):
            if not callback(item):
                return

    def iter(self) -> Iterator[T]:
        # snapshot is taken on the first next(), each call is a new pass
        yield from tuple(self.items)

    def copy(self) -> HashSet[T]:
        result: HashSet[T] = HashSet()
        result.items = self.items.copy()
        return result

    def union(self, other: HashSet[T]) -> HashSet[T]:
        result = self.copy()
        result.items.update(other.items)
        return result

    def intersect(self, other: HashSet[T]) -> HashSet[T]:
        if len(self.items) > len(other.items):
            smaller, larger = other, self
        else:
            smaller, larger = self, other

        result: HashSet[T] = HashSet()
        for item in smaller.items:
            if item in larger.items:
                result.items.add(item)

        return result

    def difference(self, other: HashSet[T]) -> HashSet[T]:
        """Return the members of self that are not members of other."""
        if len(other.items) < len(self.items):
            # strike the smaller operand out of a copy of the larger one
            result = self.copy()
            for item in other.items:
                result.items.discard(item)
            return result

        result = HashSet()
        for item in self.items:
            if item not in other.items:
                result.items.add(item)

        return result

    def __copy__(self) -> HashSet[T]:
        return self.copy()

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return len(self.items) > 0

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.items == other.items

    __hash__ = None  # type: ignore[assignment]

    def __and__(self, other: HashSet[T]) -> HashSet[T]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.intersect(other)

    def __or__(self, other: HashSet[T]) -> HashSet[T]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: HashSet[T]) -> HashSet[T]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.difference(other)

    def __iand__(self, other: HashSet[T]) -> HashSet[T]:
        return self & other

    def __ior__(self, other: HashSet[T]) -> HashSet[T]:
        return self | other

    def __isub__(self, other: HashSet[T]) -> HashSet[T]:
        return self - other

    def __repr__(self) -> str:
        content = ", ".join(repr(item) for item in self.items)
        return f"HashSet({{{content}}})"

def sorted_items(s: HashSet[O]) -> List[O]:
    items = s.to_list()
    items.sort()
    return items
