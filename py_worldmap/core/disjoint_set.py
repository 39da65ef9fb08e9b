"""Disjoint-set (union-find) over point indices."""

from typing import List


class DisjointSet:
    """
    Union-find with path compression and union by size.

    ``parent[i]`` is negative when ``i`` is a root and then holds minus the
    size of its set, so a fresh structure is all ``-1``.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.parent: List[int] = [-1] * size
        self.component_count = size

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"index {x} out of range for {len(self.parent)} elements")

    def find(self, x: int) -> int:
        """Return the root representative of x's set."""
        self._check(x)

        root = x
        while self.parent[root] >= 0:
            root = self.parent[root]

        # Path compression
        while x != root:
            next_node = self.parent[x]
            self.parent[x] = root
            x = next_node

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Returns:
            True if two sets were merged, False if x and y were already joined
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        # Attach the smaller set under the larger one
        if self.parent[root_x] > self.parent[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_x] += self.parent[root_y]
        self.parent[root_y] = root_x
        self.component_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def set_size(self, x: int) -> int:
        """Number of elements in x's set."""
        return -self.parent[self.find(x)]
