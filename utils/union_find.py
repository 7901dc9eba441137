"""
Union-Find (Disjoint Set Union) data structure.

Efficient data structure for tracking disjoint sets with:
- find(x): Which set contains x? - O(α(n)) amortized
- union(x, y): Merge sets containing x and y - O(α(n)) amortized
- connected(x, y): Are x and y in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Elements live in an arena: each id is given a stable slot when the structure
is created, and parent/rank are plain lists indexed by slot. Kruskal's MST
builder is the main client.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

from errors import UnknownElementError

Element = TypeVar("Element")


class UnionFind(Generic[Element]):
    """
    Union-Find with path compression and union by rank.

    The element set is fixed at creation; every element starts as its own
    representative with rank 0.

    Example:
        >>> uf = UnionFind(["A", "B", "C", "D"])
        >>> uf.union("A", "B")
        True
        >>> uf.union("B", "A")
        False
        >>> uf.connected("A", "B")
        True
        >>> uf.connected("A", "D")
        False
    """

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._elements: list[Element] = []
        self._slot: dict[Element, int] = {}
        self._parent: list[int] = []
        self._rank: list[int] = []
        for element in elements:
            if element in self._slot:
                continue
            self._slot[element] = len(self._elements)
            self._parent.append(len(self._elements))
            self._rank.append(0)
            self._elements.append(element)

    @classmethod
    def create(cls, elements: Iterable[Element]) -> "UnionFind[Element]":
        return cls(elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._slot

    def _slot_of(self, element: Element) -> int:
        try:
            return self._slot[element]
        except KeyError:
            raise UnknownElementError(element) from None

    def _find_slot(self, slot: int) -> int:
        # Find root
        root = slot
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression: point all nodes to root
        current = slot
        while self._parent[current] != root:
            next_slot = self._parent[current]
            self._parent[current] = root
            current = next_slot

        return root

    def find(self, element: Element) -> Element:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: flattens the tree by pointing all nodes
        along the path directly to the root.

        Raises:
            UnknownElementError: If element was not given at creation.
        """
        return self._elements[self._find_slot(self._slot_of(element))]

    def union(self, x: Element, y: Element) -> bool:
        """
        Merge the sets containing x and y.

        Uses union by rank: attaches the shorter tree under the taller one.
        On equal ranks y's root goes under x's root, whose rank grows by one.

        Returns:
            True if two sets were merged, False if x and y were already
            together (nothing is changed then).
        """
        root_x = self._find_slot(self._slot_of(x))
        root_y = self._find_slot(self._slot_of(y))

        if root_x == root_y:
            return False

        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True

    def connected(self, x: Element, y: Element) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def parent_of(self, element: Element) -> Element:
        """Direct parent pointer, without compression."""
        return self._elements[self._parent[self._slot_of(element)]]

    def rank_of(self, element: Element) -> int:
        return self._rank[self._slot_of(element)]

    @property
    def component_count(self) -> int:
        return sum(1 for slot, parent in enumerate(self._parent) if slot == parent)

    def get_all_sets(self) -> dict[Element, set[Element]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[Element, set[Element]] = {}
        for element in self._elements:
            root = self.find(element)
            if root not in sets:
                sets[root] = set()
            sets[root].add(element)
        return sets
