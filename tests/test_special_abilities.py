import unittest

from HiveEngine.Board import Board
from HiveEngine.Hex import Hex
from HiveEngine.Pieces import InsectKind, Piece, make_piece_id
from HiveEngine.SpecialAbilities import (MoveType, movement_types, resolve_move,
                                         validate_throw)

QUEEN, ANT, BEETLE, GRASSHOPPER, SPIDER, MOSQUITO, LADYBUG, PILLBUG = list(InsectKind)


def build(layout):
    board = Board()
    serials = {}
    for coord, stack in layout.items():
        for owner, kind in stack:
            serials[(owner, kind)] = serials.get((owner, kind), 0) + 1
            board.place(coord, Piece(owner, kind, make_piece_id(owner, kind, serials[(owner, kind)])))
    return board


class TestPillbugThrow(unittest.TestCase):

    def setUp(self):
        self.board = build({(0, 0): [("Player1", PILLBUG)],
                            (-1, 0): [("Player1", QUEEN)],
                            (1, 0): [("Player2", ANT)]})

    def test_throw_to_other_side(self):
        outcome = validate_throw(self.board, Hex(0, 0), Hex(1, 0), Hex(0, 1))
        self.assertTrue(outcome)
        self.assertEqual(outcome.path, ((1, 0), (0, 0), (0, 1)))

    def test_destination_rules(self):
        # Back onto its own cell, onto a piece, and out of the pillbug's reach.
        self.assertFalse(validate_throw(self.board, Hex(0, 0), Hex(1, 0), Hex(1, 0)))
        self.assertFalse(validate_throw(self.board, Hex(0, 0), Hex(1, 0), Hex(-1, 0)))
        self.assertFalse(validate_throw(self.board, Hex(0, 0), Hex(1, 0), Hex(2, 0)))

    def test_never_throws_a_stacked_piece(self):
        self.board.place((1, 0), Piece("Player1", BEETLE, "Player1-Beetle-1"))
        self.assertFalse(validate_throw(self.board, Hex(0, 0), Hex(1, 0), Hex(0, 1)))

    def test_never_splits_the_hive(self):
        board = build({(0, 0): [("Player1", PILLBUG)],
                       (1, 0): [("Player2", ANT)],
                       (2, 0): [("Player2", QUEEN)]})
        self.assertFalse(validate_throw(board, Hex(0, 0), Hex(1, 0), Hex(0, 1)))

    def test_piece_must_be_next_to_pillbug(self):
        board = build({(0, 0): [("Player1", PILLBUG)],
                       (1, 0): [("Player2", ANT)],
                       (2, 0): [("Player2", QUEEN)]})
        self.assertFalse(validate_throw(board, Hex(0, 0), Hex(2, 0), Hex(0, 1)))


class TestResolveMove(unittest.TestCase):

    def test_opponent_piece_can_only_be_thrown(self):
        board = build({(0, 0): [("Player1", PILLBUG)],
                       (-1, 0): [("Player1", QUEEN)],
                       (1, 0): [("Player2", ANT)]})
        self.assertEqual(movement_types(board, "Player1", Hex(1, 0)),
                         [(MoveType.THROWN_BY_PILLBUG, (0, 0))])
        resolved = resolve_move(board, "Player1", Hex(1, 0), Hex(0, 1))
        self.assertIs(resolved.move_type, MoveType.THROWN_BY_PILLBUG)
        self.assertEqual(resolved.actor, (0, 0))

    def test_normal_movement_takes_precedence(self):
        board = build({(0, 0): [("Player1", PILLBUG)],
                       (-1, 0): [("Player1", QUEEN)],
                       (1, 0): [("Player2", ANT)]})
        resolved = resolve_move(board, "Player1", Hex(-1, 0), Hex(-1, 1))
        self.assertIs(resolved.move_type, MoveType.NORMAL)
        self.assertEqual(resolved.outcome.path, ((-1, 0), (-1, 1)))

    def test_throw_when_own_movement_fails(self):
        board = build({(0, 0): [("Player1", PILLBUG)],
                       (-1, 0): [("Player1", QUEEN)],
                       (1, 0): [("Player2", ANT)]})
        resolved = resolve_move(board, "Player1", Hex(-1, 0), Hex(1, -1))
        self.assertIs(resolved.move_type, MoveType.THROWN_BY_PILLBUG)

    def test_opponent_pillbug_does_not_help(self):
        board = build({(0, 0): [("Player2", PILLBUG)],
                       (-1, 0): [("Player2", QUEEN)],
                       (1, 0): [("Player1", ANT)]})
        self.assertEqual(movement_types(board, "Player1", Hex(1, 0)), [(MoveType.NORMAL, None)])

    def test_mosquito_next_to_pillbug_throws(self):
        board = build({(0, 0): [("Player1", MOSQUITO)],
                       (-1, 0): [("Player1", PILLBUG)],
                       (1, 0): [("Player2", ANT)]})
        resolved = resolve_move(board, "Player1", Hex(1, 0), Hex(1, -1))
        self.assertIs(resolved.move_type, MoveType.THROWN_BY_MOSQUITO)
        self.assertEqual(resolved.outcome.path, ((1, 0), (0, 0), (1, -1)))

    def test_mosquito_alone_cannot_throw(self):
        board = build({(0, 0): [("Player1", MOSQUITO)],
                       (-1, 0): [("Player1", QUEEN)],
                       (1, 0): [("Player2", ANT)]})
        resolved = resolve_move(board, "Player1", Hex(1, 0), Hex(1, -1))
        self.assertFalse(resolved)
        self.assertIsNone(resolved.move_type)

    def test_failure_keeps_partial_path(self):
        board = build({(0, 0): [("Player1", QUEEN)], (1, 0): [("Player2", QUEEN)]})
        resolved = resolve_move(board, "Player1", Hex(0, 0), Hex(5, 5))
        self.assertFalse(resolved)
        self.assertEqual(resolved.outcome.path, ((0, 0),))


if __name__ == "__main__":
    unittest.main()
