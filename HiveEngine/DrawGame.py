import math

import pygame

from HiveEngine.AsciiDraw import cell_label

PLAYER_COLORS = {
    "Player1": (240, 230, 200),
    "Player2": (60, 60, 60),
}
LABEL_COLORS = {
    "Player1": (0, 0, 0),
    "Player2": (255, 255, 255),
}
HIGHLIGHT_COLOR = (120, 200, 120)
OUTLINE_COLOR = (0, 0, 0)
BACKGROUND_COLOR = (255, 255, 255)


def axial_to_pixel(q, r, hex_size):
    """
    Convert axial coords (q,r) to pixel (x,y).
    This version uses a pointy-top layout:

         / \
        |   |
         \ /

    For a hex of size `hex_size`.
    """
    x = hex_size * math.sqrt(3) * (q + r/2.0)
    y = hex_size * (3.0/2.0) * r
    return (x, y)


def hex_corners(x, y, size):
    """
    Return the six corners of a regular hex
    with center at (x, y) and 'radius' = size.
    Pointy-top hex. The corners go around in a circle.
    """
    corners = []
    for i in range(6):
        angle_deg = 60 * i - 30  # -30° to make the top corner pointy
        angle_rad = math.radians(angle_deg)
        cx = x + size * math.cos(angle_rad)
        cy = y + size * math.sin(angle_rad)
        corners.append((cx, cy))
    return corners


def get_board_bounds(cells):
    """
    Given an iterable of (q, r) cells,
    return minQ, maxQ, minR, maxR to help us know how large the grid is.
    """
    cells = list(cells)
    if not cells:
        return (0, 0, 0, 0)

    all_q = [q for (q, r) in cells]
    all_r = [r for (q, r) in cells]
    return min(all_q), max(all_q), min(all_r), max(all_r)


def surface_size(cells, hex_size=40, window_padding=50):
    minQ, maxQ, minR, maxR = get_board_bounds(cells)
    width_range = maxQ - minQ + 1
    height_range = maxR - minR + 1
    # Each row is shifted half a hex right of the one above.
    width = int((width_range + height_range / 2.0) * math.sqrt(3) * hex_size + 2 * window_padding)
    height = int(height_range * 1.5 * hex_size + 2 * window_padding)
    return width, height


def cell_center(q, r, bounds, hex_size, window_padding):
    minQ, _, minR, _ = bounds
    px, py = axial_to_pixel(q - minQ, r - minR, hex_size)
    return px + window_padding, py + window_padding


def draw_hex(surface, x, y, size, color=(200, 200, 200), width=2):
    """
    Draw a hex outline (or filled hex) on surface.
    `width=0` => filled hex. Nonzero => just outline.
    """
    corners = hex_corners(x, y, size)
    pygame.draw.polygon(surface, color, corners, width)


def draw_piece_label(surface, x, y, label, font, color=(0, 0, 0)):
    label_surf = font.render(label, True, color)
    label_rect = label_surf.get_rect(center=(x, y))
    surface.blit(label_surf, label_rect)


def render_board(surface, snapshot, highlights=(), hex_size=40, window_padding=50, font=None):
    """
    Draw every stack of `snapshot.board` and every highlighted cell onto
    `surface`. Labels are only drawn when a font is given.
    """
    board = snapshot.board
    bounds = get_board_bounds(list(board) + list(highlights))
    surface.fill(BACKGROUND_COLOR)

    for (q, r) in highlights:
        px, py = cell_center(q, r, bounds, hex_size, window_padding)
        draw_hex(surface, px, py, hex_size, color=HIGHLIGHT_COLOR, width=0)
        draw_hex(surface, px, py, hex_size, color=OUTLINE_COLOR, width=1)

    for (q, r), stack in board.items():
        px, py = cell_center(q, r, bounds, hex_size, window_padding)
        owner = stack[-1].owner
        draw_hex(surface, px, py, hex_size, color=PLAYER_COLORS[owner], width=0)
        draw_hex(surface, px, py, hex_size, color=OUTLINE_COLOR, width=2)
        if font is not None:
            draw_piece_label(surface, px, py, cell_label(stack), font, LABEL_COLORS[owner])


def draw_snapshot_pygame(snapshot, highlights=(), hex_size=40, window_padding=50):
    """
    Opens a pygame window and draws the board in 2D.
    Closes when you press the window's close button.
    """
    cells = list(snapshot.board) + list(highlights)

    pygame.init()
    screen = pygame.display.set_mode(surface_size(cells, hex_size, window_padding))
    pygame.display.set_caption(f"Hive - move {snapshot.move_number}, {snapshot.current_player} to play")

    font = pygame.font.SysFont(None, 20)
    render_board(screen, snapshot, highlights, hex_size, window_padding, font)
    pygame.display.flip()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

    pygame.quit()


# -------------- Example usage: --------------
if __name__ == "__main__":
    import random

    from HiveEngine.HiveGame import HiveGame

    game = HiveGame()

    # A few random placements so there's something to see.
    for _ in range(6):
        place_actions = [a for a in game.get_legal_actions() if a[0] == "PLACE"]
        if not place_actions:
            break
        game.apply_action(random.choice(place_actions))

    draw_snapshot_pygame(game.snapshot(), highlights=game.query_legal_placements("Ant"))
