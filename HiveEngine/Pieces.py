from enum import Enum
from typing import NamedTuple

PLAYERS = ("Player1", "Player2")


def get_opponent(player):
    return "Player2" if player == "Player1" else "Player1"


class InsectKind(Enum):
    """Closed set of insect kinds. Declaration order is the order a Mosquito tries copied abilities."""
    QUEEN = "Queen"
    ANT = "Ant"
    BEETLE = "Beetle"
    GRASSHOPPER = "Grasshopper"
    SPIDER = "Spider"
    MOSQUITO = "Mosquito"
    LADYBUG = "Ladybug"
    PILLBUG = "Pillbug"

    def __str__(self):
        return self.value


INITIAL_PIECES = {
    InsectKind.QUEEN: 1,
    InsectKind.ANT: 3,
    InsectKind.BEETLE: 2,
    InsectKind.GRASSHOPPER: 3,
    InsectKind.SPIDER: 2,
    InsectKind.MOSQUITO: 1,
    InsectKind.LADYBUG: 1,
    InsectKind.PILLBUG: 1,
}

EXPANSION_KINDS = (InsectKind.MOSQUITO, InsectKind.LADYBUG, InsectKind.PILLBUG)


class Piece(NamedTuple):
    owner: str
    kind: InsectKind
    piece_id: str

    def __str__(self):
        return self.piece_id


def make_piece_id(owner, kind, serial):
    return f"{owner}-{kind.value}-{serial}"


def build_hand(options):
    """
    Count of unplaced pieces per kind for one player. Disabled expansion
    kinds stay in the hand with a count of zero.
    """
    enabled = {
        InsectKind.MOSQUITO: options.enable_mosquito,
        InsectKind.LADYBUG: options.enable_ladybug,
        InsectKind.PILLBUG: options.enable_pillbug,
    }
    hand = {}
    for kind, count in INITIAL_PIECES.items():
        if kind in EXPANSION_KINDS and not enabled[kind]:
            hand[kind] = 0
        else:
            hand[kind] = count
    return hand
