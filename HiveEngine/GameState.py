from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from HiveEngine.Board import Board
from HiveEngine.Pieces import PLAYERS, build_hand


@dataclass(frozen=True, slots=True)
class GameOptions:
    enable_mosquito: bool = False
    enable_ladybug: bool = False
    enable_pillbug: bool = False
    tournament_rules: bool = False

    # Keys used by the setup screen's saved configuration.
    SETUP_KEYS = {
        "expansionMosquito": "enable_mosquito",
        "expansionLadybug": "enable_ladybug",
        "expansionPillbug": "enable_pillbug",
        "tournamentRules": "tournament_rules",
    }

    @classmethod
    def from_mapping(cls, config):
        """Build options from a setup dict; unknown keys are ignored."""
        names = {f.name for f in fields(cls)}
        values = {}
        for key, value in config.items():
            name = cls.SETUP_KEYS.get(key, key)
            if name in names:
                values[name] = bool(value)
        return cls(**values)

    @classmethod
    def full(cls, tournament_rules=False):
        return cls(True, True, True, tournament_rules)


class GameStatus(Enum):
    SETUP = "Setup"
    PLAYING = "Playing"
    GAME_OVER = "GameOver"


class GameState:
    def __init__(self, options=None, board=None, current_player="Player1", pieces_in_hand=None,
                 queen_placed=None, turn_count=None, move_number=0, status=GameStatus.SETUP,
                 winner=None, placed_serials=None):
        self.options = options if options is not None else GameOptions()
        self.board = board if board is not None else Board()
        self.current_player = current_player
        self.pieces_in_hand = pieces_in_hand if pieces_in_hand is not None else {
            player: build_hand(self.options) for player in PLAYERS
        }
        self.queen_placed = queen_placed if queen_placed is not None else {p: False for p in PLAYERS}
        # Completed turns per player (placements, moves and passes).
        self.turn_count = turn_count if turn_count is not None else {p: 0 for p in PLAYERS}
        self.move_number = move_number
        self.status = status
        self.winner = winner
        # (player, kind) -> how many of that kind the player has placed; feeds piece ids.
        self.placed_serials = placed_serials if placed_serials is not None else {}

    def copy(self):
        return GameState(
            options=self.options,
            board=self.board.copy(),
            current_player=self.current_player,
            pieces_in_hand={player: hand.copy() for player, hand in self.pieces_in_hand.items()},
            queen_placed=dict(self.queen_placed),
            turn_count=dict(self.turn_count),
            move_number=self.move_number,
            status=self.status,
            winner=self.winner,
            placed_serials=dict(self.placed_serials),
        )

    def snapshot(self):
        stacks = {coord: tuple(stack) for coord, stack in self.board.stacks.items()}
        hands = {player: MappingProxyType(dict(hand)) for player, hand in self.pieces_in_hand.items()}
        return HiveSnapshot(
            board=MappingProxyType(stacks),
            hands=MappingProxyType(hands),
            current_player=self.current_player,
            status=self.status,
            winner=self.winner,
            move_number=self.move_number,
            queen_placed=MappingProxyType(dict(self.queen_placed)),
        )


class HiveSnapshot(NamedTuple):
    """Read-only view of a game for rendering."""
    board: Mapping
    hands: Mapping
    current_player: str
    status: GameStatus
    winner: Optional[str]
    move_number: int
    queen_placed: Mapping

    def top_piece(self, coord):
        stack = self.board.get(coord)
        return stack[-1] if stack else None
