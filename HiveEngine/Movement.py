"""
Per-insect movement validators.

Every validator takes the board with the moving piece already lifted off
its origin, the origin and the requested target, and returns a MoveOutcome.
Validators never raise for an illegal move; a failed outcome carries the
best partial path towards the target so a UI can show how close it got.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from typing import Optional

from HiveEngine.HiveRules import HiveRules
from HiveEngine.Pieces import InsectKind


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    success: bool
    path: tuple = ()
    copied_kind: Optional[InsectKind] = None
    jumped_over: int = 0

    def __bool__(self):
        return self.success

    @property
    def destination(self):
        return self.path[-1] if self.path else None


def _ok(path, **extra):
    return MoveOutcome(True, tuple(path), **extra)


def _fail(path):
    return MoveOutcome(False, tuple(path))


class PathArena:
    """
    Search tree stored as flat lists with back-pointers, so a BFS frontier
    entry is just an index and paths are only materialised on demand.
    """

    __slots__ = ("cells", "parents", "depths")

    def __init__(self, root):
        self.cells = [root]
        self.parents = [-1]
        self.depths = [0]

    def __len__(self):
        return len(self.cells)

    def add(self, cell, parent):
        self.cells.append(cell)
        self.parents.append(parent)
        self.depths.append(self.depths[parent] + 1)
        return len(self.cells) - 1

    def path(self, index):
        cells = []
        while index != -1:
            cells.append(self.cells[index])
            index = self.parents[index]
        cells.reverse()
        return tuple(cells)

    def on_path(self, index, cell):
        while index != -1:
            if self.cells[index] == cell:
                return True
            index = self.parents[index]
        return False

    def closest_to(self, target):
        # Nearest by hex distance, then the longer path, then the earliest found.
        return min(range(len(self.cells)),
                   key=lambda i: (self.cells[i].distance(target), -self.depths[i]))


# ---------------------------------------------------------
# Single-step walkers
# ---------------------------------------------------------
def validate_queen(board, origin, target):
    if HiveRules.can_walk(board, origin, target):
        return _ok((origin, target))
    return _fail((origin,))


def validate_pillbug(board, origin, target):
    # The pillbug's own movement is the queen's; its throw lives in SpecialAbilities.
    return validate_queen(board, origin, target)


def validate_beetle(board, origin, target):
    if not origin.is_adjacent(target):
        return _fail((origin,))

    if board.is_occupied(origin):
        # Still on top of the hive: no gate, but one of the two cells it
        # crosses between must be occupied, whatever is on the target.
        if any(board.is_occupied(c) for c in origin.common_neighbors(target)):
            return _ok((origin, target))
        return _fail((origin,))

    if board.is_occupied(target):
        return _ok((origin, target))
    if HiveRules.can_walk(board, origin, target):
        return _ok((origin, target))
    return _fail((origin,))


# ---------------------------------------------------------
# Multi-step walkers
# ---------------------------------------------------------
def validate_ant(board, origin, target):
    """Breadth-first search over legal walking steps; the first path found is a shortest one."""
    arena = PathArena(origin)
    visited = {origin}
    frontier = deque([0])

    while frontier:
        index = frontier.popleft()
        cur = arena.cells[index]
        for neighbor in cur.neighbors():
            if neighbor in visited:
                continue
            if not HiveRules.can_walk(board, cur, neighbor):
                continue
            visited.add(neighbor)
            child = arena.add(neighbor, index)
            if neighbor == target:
                return _ok(arena.path(child))
            frontier.append(child)

    return _fail(arena.path(arena.closest_to(target)))


def validate_spider(board, origin, target):
    """Exactly three walking steps, never revisiting a cell of the same path."""
    arena = PathArena(origin)
    frontier = deque([0])

    while frontier:
        index = frontier.popleft()
        depth = arena.depths[index]
        if depth == 3:
            continue
        cur = arena.cells[index]
        for neighbor in cur.neighbors():
            if arena.on_path(index, neighbor):
                continue
            if not HiveRules.can_walk(board, cur, neighbor):
                continue
            child = arena.add(neighbor, index)
            if depth == 2 and neighbor == target:
                return _ok(arena.path(child))
            frontier.append(child)

    return _fail(arena.path(arena.closest_to(target)))


def validate_ladybug(board, origin, target):
    """
    Two steps across the top of the hive, then one step down:
      step 1 onto an occupied cell, step 2 onto a different occupied cell,
      step 3 onto an empty cell touching the hive.
    """
    arena = PathArena(origin)
    frontier = deque([0])

    while frontier:
        index = frontier.popleft()
        depth = arena.depths[index]
        if depth == 3:
            continue
        cur = arena.cells[index]
        for neighbor in cur.neighbors():
            if arena.on_path(index, neighbor):
                continue
            if depth < 2:
                if not board.is_occupied(neighbor):
                    continue
            elif board.is_occupied(neighbor) or not HiveRules.touches_hive(board, neighbor):
                continue
            child = arena.add(neighbor, index)
            if depth == 2 and neighbor == target:
                return _ok(arena.path(child))
            frontier.append(child)

    return _fail(arena.path(arena.closest_to(target)))


# ---------------------------------------------------------
# Jumper
# ---------------------------------------------------------
def validate_grasshopper(board, origin, target):
    best_line = None
    for direction in range(6):
        line = [origin]
        cur = origin.neighbor(direction)
        jumped = 0
        while board.is_occupied(cur):
            line.append(cur)
            jumped += 1
            cur = cur.neighbor(direction)
        if jumped == 0:
            continue
        line.append(cur)
        if cur == target:
            return _ok(line, jumped_over=jumped)
        if best_line is None or cur.distance(target) < best_line[-1].distance(target):
            best_line = line
    return _fail(best_line or (origin,))


# ---------------------------------------------------------
# Mosquito
# ---------------------------------------------------------
def mosquito_candidates(adjacent_kinds):
    """Kinds a mosquito may copy, in InsectKind order. Never the mosquito itself."""
    return [kind for kind in InsectKind
            if kind is not InsectKind.MOSQUITO and kind in adjacent_kinds]


def validate_mosquito(board, origin, target):
    if board.is_occupied(origin):
        # On top of the hive a mosquito can only move as a beetle.
        return replace(validate_beetle(board, origin, target), copied_kind=InsectKind.BEETLE)

    adjacent_kinds = {board.top_piece(n).kind for n in origin.neighbors() if board.is_occupied(n)}
    best = None
    for kind in mosquito_candidates(adjacent_kinds):
        outcome = VALIDATORS[kind](board, origin, target)
        if outcome:
            return replace(outcome, copied_kind=kind)
        if best is None or outcome.destination.distance(target) < best.destination.distance(target):
            best = outcome
    return best or _fail((origin,))


VALIDATORS = {
    InsectKind.QUEEN: validate_queen,
    InsectKind.ANT: validate_ant,
    InsectKind.BEETLE: validate_beetle,
    InsectKind.GRASSHOPPER: validate_grasshopper,
    InsectKind.SPIDER: validate_spider,
    InsectKind.MOSQUITO: validate_mosquito,
    InsectKind.LADYBUG: validate_ladybug,
    InsectKind.PILLBUG: validate_pillbug,
}


def validate_move(board, origin, target):
    """Check the top piece at origin moving to target under its own movement rule."""
    piece = board.top_piece(origin)
    if piece is None or target == origin:
        return _fail((origin,))
    lifted = board.without_top(origin)
    return VALIDATORS[piece.kind](lifted, origin, target)
