import logging
from collections.abc import Hashable, Iterable, Iterator

from .set import Set, check_set

logger = logging.getLogger(__name__)


class HashSet(Set):
    def __init__(self, iterable: Iterable[Hashable] = ()):
        """
        A HashSet is a `Set` whose elements are the keys of a dict,
        giving expected O(1) add, remove and membership tests.

        In the complexities below n is the size of this set, m the size of
        other and c the cost of other's `contains`, which is O(1) when other
        is also a HashSet.

        Args:
          iterable: An iterable with which to initialise the set elements.
        """

        self._elements: dict[Hashable, None] = {}

        for element in iterable:
            self._elements[element] = None

    def copy(self) -> "HashSet":
        """Return a shallow copy of this set"""

        ret = type(self)()
        ret._elements = self._elements.copy()

        return ret

    def _source(self, other: Set, operation: str) -> Iterable[Hashable]:
        # Iterating our own dict while changing it is not allowed.
        if other is self:
            logger.debug("%s called with itself, iterating over a snapshot", operation)
            return self.elements()
        return other.all()

    def add(self, element: Hashable) -> None:
        """Add element to this set. O(1)."""

        self._elements[element] = None

    def remove(self, element: Hashable) -> None:
        """Remove element from this set if it is present. O(1)."""

        self._elements.pop(element, None)

    def contains(self, element: Hashable) -> bool:
        return element in self._elements

    def union(self, other: Set) -> "HashSet":
        """Return a new set with elements from this set and other. O(n + m)."""

        check_set(other, "union")
        ret = self.copy()

        for element in other.all():
            ret.add(element)

        return ret

    def intersection(self, other: Set) -> "HashSet":
        """Return a new set with elements common to this set and other.

        Only other is traversed, so this is O(m).
        """

        check_set(other, "intersection")
        ret = type(self)()

        for element in other.all():
            if self.contains(element):
                ret.add(element)

        return ret

    def difference(self, other: Set) -> "HashSet":
        """Return a new set with elements from this set that are not in other.

        O(n * c).
        """

        check_set(other, "difference")
        ret = type(self)()

        for element in self.all():
            if not other.contains(element):
                ret.add(element)

        return ret

    def symmetric_difference(self, other: Set) -> "HashSet":
        """Return a new set with elements either in this set or other,
        but not both. O(n + m).
        """

        check_set(other, "symmetric_difference")
        ret = self.copy()

        for element in other.all():
            ret._toggle(element)

        return ret

    def merge(self, other: Set) -> None:
        """Add all elements of other to this set. O(m)."""

        check_set(other, "merge")
        for element in self._source(other, "merge"):
            self.add(element)

    def retain(self, other: Set) -> None:
        """Remove the elements of this set that are not in other. O(n * c)."""

        check_set(other, "retain")
        for element in self.elements():
            if not other.contains(element):
                self.remove(element)

    def subtract(self, other: Set) -> None:
        """Remove the elements of this set that are in other. O(n * c)."""

        check_set(other, "subtract")
        if other is self:
            logger.debug("subtract called with itself, clearing")
        for element in self.elements():
            if other.contains(element):
                self.remove(element)

    def xor(self, other: Set) -> None:
        """Toggle the membership of every element of other. O(m).

        Applied to itself this empties the set, as the symmetric difference
        of a set with itself is empty.
        """

        check_set(other, "xor")
        for element in self._source(other, "xor"):
            self._toggle(element)

    def _toggle(self, element: Hashable) -> None:
        if element in self._elements:
            del self._elements[element]
        else:
            self._elements[element] = None

    def equals(self, other: Set) -> bool:
        """Return True if both sets hold the same elements.

        Sets of different sizes are rejected before any element is looked
        at. With equal sizes, this set being a subset of other is enough.
        """

        check_set(other, "equals")
        if len(self) != len(other):
            return False

        return self._all_in(other)

    def is_superset(self, other: Set) -> bool:
        """Return True if every element of other is in this set."""

        check_set(other, "is_superset")
        if len(self) < len(other):
            return False

        for element in other.all():
            if not self.contains(element):
                return False

        return True

    def is_subset(self, other: Set) -> bool:
        """Return True if every element of this set is in other."""

        check_set(other, "is_subset")
        if len(self) > len(other):
            return False

        return self._all_in(other)

    def _all_in(self, other: Set) -> bool:
        for element in self._elements:
            if not other.contains(element):
                return False

        return True

    def elements(self) -> list:
        return list(self._elements)

    def all(self) -> Iterator:
        return iter(self._elements.keys())

    def __len__(self) -> int:
        return len(self._elements)

    def __str__(self) -> str:
        return "Set{%s}" % ", ".join(str(element) for element in self._elements)
