from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator


def check_set(other, operation):
    if not isinstance(other, Set):
        raise TypeError(
            "Argument to %s must be a Set, not %s" % (operation, type(other).__name__)
        )


class Set(ABC):
    """Abstract base class for a collection of unique hashable elements.

    A subclass decides how elements are stored. The algebra and relation
    methods accept any other `Set`, so two realizations with different
    storage can be combined, as long as each only relies on the public
    methods of the other (`contains`, `len` and iteration).

    Mutating methods only ever change the receiver, and methods returning a
    set always return a fresh instance that shares no storage with the
    operands. The iteration order is unspecified.
    """

    # Mutable, so not hashable.
    __hash__ = None

    @abstractmethod
    def add(self, element: Hashable) -> None:
        """Insert element. Does nothing if it is already present."""
        pass

    @abstractmethod
    def remove(self, element: Hashable) -> None:
        """Delete element. Does nothing if it is not present."""
        pass

    @abstractmethod
    def contains(self, element: Hashable) -> bool:
        """Report whether element is in this set."""
        pass

    @abstractmethod
    def union(self, other: "Set") -> "Set":
        """Return a new set with the elements present in either set."""
        pass

    @abstractmethod
    def intersection(self, other: "Set") -> "Set":
        """Return a new set with the elements present in both sets."""
        pass

    @abstractmethod
    def difference(self, other: "Set") -> "Set":
        """Return a new set with the elements of this set that are not in other."""
        pass

    @abstractmethod
    def symmetric_difference(self, other: "Set") -> "Set":
        """Return a new set with the elements present in exactly one of the sets."""
        pass

    @abstractmethod
    def merge(self, other: "Set") -> None:
        """Add every element of other to this set (in-place union)."""
        pass

    @abstractmethod
    def retain(self, other: "Set") -> None:
        """Keep only the elements also present in other (in-place intersection)."""
        pass

    @abstractmethod
    def subtract(self, other: "Set") -> None:
        """Remove every element of other from this set (in-place difference)."""
        pass

    @abstractmethod
    def xor(self, other: "Set") -> None:
        """Keep the elements present in exactly one of the sets (in-place symmetric difference)."""
        pass

    @abstractmethod
    def equals(self, other: "Set") -> bool:
        """Report whether both sets hold the same elements."""
        pass

    @abstractmethod
    def is_superset(self, other: "Set") -> bool:
        """Report whether every element of other is in this set."""
        pass

    @abstractmethod
    def is_subset(self, other: "Set") -> bool:
        """Report whether every element of this set is in other."""
        pass

    @abstractmethod
    def elements(self) -> list:
        """Return a list of all elements, in no particular order."""
        pass

    @abstractmethod
    def all(self) -> Iterator:
        """Return a new iterator over the elements.

        Every call starts a fresh traversal. The order is unspecified and may
        change after the set is mutated.
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __str__(self) -> str:
        """Return the set in the form ``Set{e1, e2, ...}``."""
        pass

    def len(self) -> int:
        return len(self)

    def __contains__(self, element) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator:
        return self.all()

    def __repr__(self) -> str:
        return "<%s %s>" % (type(self).__name__, self)

    def isdisjoint(self, other: "Set") -> bool:
        """Report whether the sets have no element in common."""
        check_set(other, "isdisjoint")
        small, large = (self, other) if len(self) <= len(other) else (other, self)
        for element in small.all():
            if large.contains(element):
                return False
        return True

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.equals(other)

    def __le__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_subset(other)

    def __lt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) < len(other) and self.is_subset(other)

    def __ge__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_superset(other)

    def __gt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) > len(other) and self.is_superset(other)

    def __or__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.symmetric_difference(other)

    def __ior__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        self.merge(other)
        return self

    def __iand__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        self.retain(other)
        return self

    def __isub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        self.subtract(other)
        return self

    def __ixor__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        self.xor(other)
        return self
