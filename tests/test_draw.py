import importlib.util
import math
import unittest

from HiveEngine.AsciiDraw import cell_label, render_ascii
from HiveEngine.HiveGame import HiveGame
from HiveEngine.Pieces import InsectKind, Piece

HAS_PYGAME = importlib.util.find_spec("pygame") is not None


class TestAsciiDraw(unittest.TestCase):

    def test_cell_label(self):
        queen = Piece("Player1", InsectKind.QUEEN, "Player1-Queen-1")
        beetle = Piece("Player2", InsectKind.BEETLE, "Player2-Beetle-1")
        self.assertEqual(cell_label([queen]), "1Q")
        self.assertEqual(cell_label([queen, beetle]), "2B^2")

    def test_empty_board(self):
        self.assertEqual(render_ascii({}), "")

    def test_rows_and_highlights(self):
        board = {(0, 0): [Piece("Player1", InsectKind.ANT, "Player1-Ant-1")]}
        lines = render_ascii(board, highlights=[(1, 0), (0, 1)]).splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("r=  0 | 1A"))
        self.assertIn("**", lines[0])
        self.assertIn("**", lines[1])
        self.assertTrue(lines[1].startswith("r=  1 |   "))

    def test_game_format_state(self):
        game = HiveGame()
        game.submit_placement("Player1", InsectKind.SPIDER, (0, 0))
        text = game.format_state()
        self.assertIn("Current Player: Player2", text)
        self.assertIn("1S", text)
        self.assertIn("Spider: 1", text)


@unittest.skipUnless(HAS_PYGAME, "pygame not installed")
class TestDrawGame(unittest.TestCase):

    def setUp(self):
        from HiveEngine import DrawGame
        self.draw = DrawGame

    def test_axial_to_pixel(self):
        self.assertEqual(self.draw.axial_to_pixel(0, 0, 10), (0.0, 0.0))
        x, y = self.draw.axial_to_pixel(0, 1, 10)
        self.assertAlmostEqual(x, 10 * math.sqrt(3) / 2)
        self.assertAlmostEqual(y, 15.0)

    def test_hex_corners_are_on_circle(self):
        corners = self.draw.hex_corners(5, 5, 10)
        self.assertEqual(len(corners), 6)
        for cx, cy in corners:
            self.assertAlmostEqual(math.hypot(cx - 5, cy - 5), 10)

    def test_bounds_and_size(self):
        self.assertEqual(self.draw.get_board_bounds([]), (0, 0, 0, 0))
        self.assertEqual(self.draw.get_board_bounds([(0, 0), (2, -1), (-1, 3)]), (-1, 2, -1, 3))
        width, height = self.draw.surface_size([(0, 0)], hex_size=10, window_padding=5)
        self.assertEqual(width, int(1.5 * math.sqrt(3) * 10 + 10))
        self.assertEqual(height, 25)

    def test_render_board_colors(self):
        import pygame

        game = HiveGame()
        game.submit_placement("Player1", InsectKind.QUEEN, (0, 0))
        game.submit_placement("Player2", InsectKind.QUEEN, (1, 0))
        snapshot = game.snapshot()
        highlights = [(0, 1)]
        cells = list(snapshot.board) + highlights
        surface = pygame.Surface(self.draw.surface_size(cells))
        self.draw.render_board(surface, snapshot, highlights)

        bounds = self.draw.get_board_bounds(cells)
        expected = {
            (0, 0): self.draw.PLAYER_COLORS["Player1"],
            (1, 0): self.draw.PLAYER_COLORS["Player2"],
            (0, 1): self.draw.HIGHLIGHT_COLOR,
        }
        for (q, r), color in expected.items():
            x, y = self.draw.cell_center(q, r, bounds, 40, 50)
            self.assertEqual(tuple(surface.get_at((int(x), int(y))))[:3], color)


if __name__ == "__main__":
    unittest.main()
