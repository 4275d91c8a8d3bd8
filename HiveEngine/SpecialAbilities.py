"""
Pillbug throws, and the dispatcher that tries every way a piece can reach a
target: its own movement first, then a throw by a friendly pillbug, then a
throw by a friendly mosquito standing next to a friendly pillbug.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from HiveEngine.HiveRules import HiveRules
from HiveEngine.Movement import MoveOutcome, validate_move
from HiveEngine.Pieces import InsectKind


class MoveType(Enum):
    NORMAL = "Normal"
    THROWN_BY_PILLBUG = "ThrownByPillbug"
    THROWN_BY_MOSQUITO = "ThrownByMosquitoAsPillbug"


@dataclass(frozen=True, slots=True)
class ResolvedMove:
    """Which movement type succeeded (None if none did), who acted, and the outcome."""
    move_type: Optional[MoveType]
    outcome: MoveOutcome
    actor: Optional[tuple] = None

    def __bool__(self):
        return self.move_type is not None


def validate_throw(board, actor, piece_coord, target):
    """
    The piece at `actor` lifts the adjacent piece at `piece_coord` over itself
    and sets it down on `target`, another empty cell next to the actor.
    """
    failed = MoveOutcome(False, (piece_coord,))
    if piece_coord == actor or target == piece_coord:
        return failed
    if not actor.is_adjacent(piece_coord) or not actor.is_adjacent(target):
        return failed
    if board.height(piece_coord) != 1:
        return failed
    if board.is_occupied(target):
        return failed
    if HiveRules.would_split_hive(board, piece_coord):
        return failed
    lifted = board.without_top(piece_coord)
    if not HiveRules.touches_hive(lifted, target):
        return failed
    return MoveOutcome(True, (piece_coord, actor, target))


def _is_friendly(board, coord, player, kind):
    piece = board.top_piece(coord)
    return piece is not None and piece.owner == player and piece.kind is kind


def _mosquito_can_throw(board, coord, player):
    # Acting as a pillbug needs the mosquito on the ground next to a friendly pillbug.
    if not _is_friendly(board, coord, player, InsectKind.MOSQUITO) or board.height(coord) != 1:
        return False
    return any(_is_friendly(board, n, player, InsectKind.PILLBUG) for n in coord.neighbors())


def movement_types(board, player, origin):
    """
    Ordered (MoveType, actor) pairs available for moving the top piece at
    origin on behalf of `player`. Actors are visited in neighbor order.
    """
    piece = board.top_piece(origin)
    if piece is None:
        return []

    types = []
    if piece.owner == player:
        types.append((MoveType.NORMAL, None))
    for neighbor in origin.neighbors():
        if _is_friendly(board, neighbor, player, InsectKind.PILLBUG):
            types.append((MoveType.THROWN_BY_PILLBUG, neighbor))
    for neighbor in origin.neighbors():
        if _mosquito_can_throw(board, neighbor, player):
            types.append((MoveType.THROWN_BY_MOSQUITO, neighbor))
    return types


def resolve_move(board, player, origin, target):
    """
    Try each movement type in precedence order and stop at the first that
    succeeds. On failure the outcome of the first attempt is kept for its
    partial path.
    """
    first_failure = None
    for move_type, actor in movement_types(board, player, origin):
        if move_type is MoveType.NORMAL:
            outcome = validate_move(board, origin, target)
        else:
            outcome = validate_throw(board, actor, origin, target)
        if outcome:
            return ResolvedMove(move_type, outcome, actor)
        if first_failure is None:
            first_failure = outcome
    return ResolvedMove(None, first_failure or MoveOutcome(False, (origin,)))
