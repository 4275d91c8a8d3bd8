from enum import Enum


class PlacementError(Enum):
    GAME_OVER = "game is over"
    NOT_YOUR_TURN = "not this player's turn"
    NONE_IN_HAND = "no piece of that kind left in hand"
    OCCUPIED_HEX = "space already occupied"
    INVALID_ADJACENCY = "must touch only your own pieces"
    TOURNAMENT_FIRST_TURN_QUEEN_BAN = "queen cannot be placed on turn 1"
    QUEEN_DEADLINE_MISSED = "queen must be placed now"


class MoveError(Enum):
    GAME_OVER = "game is over"
    NOT_YOUR_TURN = "not this player's turn"
    UNKNOWN_PIECE = "piece is not on the board"
    PIECE_COVERED = "piece is covered by another piece"
    QUEEN_NOT_PLACED_YET = "place your queen first to move"
    TOURNAMENT_FIRST_TURN_QUEEN_MOVE_BAN = "queen cannot move on turn 1"
    NO_LEGAL_MOVEMENT_TYPE = "piece cannot reach that space"
    WOULD_SPLIT_HIVE = "move would split the hive"


class PassError(Enum):
    GAME_OVER = "game is over"
    NOT_YOUR_TURN = "not this player's turn"
    PASS_NOT_ALLOWED = "cannot pass before placing the queen"


class HiveRuleError(ValueError):
    """A requested action broke a rule. Nothing was changed."""

    def __init__(self, reason, detail=""):
        self.reason = reason
        message = reason.value if not detail else f"{reason.value}: {detail}"
        super().__init__(message)


class IllegalPlacement(HiveRuleError):
    pass


class IllegalMove(HiveRuleError):
    pass


class IllegalPass(HiveRuleError):
    pass
