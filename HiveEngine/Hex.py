from typing import NamedTuple, Optional

# Fixed order; validators iterate neighbors in exactly this order.
DIRECTIONS = [(1, 0), (1, -1), (0, -1),
              (-1, 0), (-1, 1), (0, 1)]


def hex_distance(q1, r1, q2, r2):
    x1, z1 = q1, r1
    y1 = -x1 - z1
    x2, z2 = q2, r2
    y2 = -x2 - z2
    return (abs(x1 - x2) + abs(y1 - y2) + abs(z1 - z2)) // 2


class Hex(NamedTuple):
    """
    Axial coordinate (q, r) of a cell on a pointy-top hex grid.

    Being a tuple, a Hex compares, hashes and unpacks like the plain
    (q, r) pairs the board code has always used.
    """
    q: int
    r: int

    def __str__(self):
        return f"{self.q},{self.r}"

    def neighbor(self, direction_index: int) -> "Hex":
        dq, dr = DIRECTIONS[direction_index]
        return Hex(self.q + dq, self.r + dr)

    def neighbors(self):
        """The six adjacent cells, always in DIRECTIONS order."""
        return [Hex(self.q + dq, self.r + dr) for dq, dr in DIRECTIONS]

    def distance(self, other) -> int:
        return hex_distance(self.q, self.r, other[0], other[1])

    def is_adjacent(self, other) -> bool:
        return self.distance(other) == 1

    def direction_to(self, other) -> Optional[int]:
        delta = (other[0] - self.q, other[1] - self.r)
        if delta in DIRECTIONS:
            return DIRECTIONS.index(delta)
        return None

    def common_neighbors(self, other):
        """
        The two cells touching both self and an adjacent `other` (the
        "gate" cells a sliding piece squeezes between). Empty tuple when
        the two cells are not adjacent.
        """
        i = self.direction_to(other)
        if i is None:
            return ()
        return (self.neighbor((i - 1) % 6), self.neighbor((i + 1) % 6))
