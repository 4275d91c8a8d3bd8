CELL_WIDTH = 5
EMPTY_CELL = ".."


def cell_label(stack):
    """E.g. "1Q" for a Player1 Queen, "2B^2" for a Player2 Beetle on a stack of two."""
    owner, kind = stack[-1].owner, stack[-1].kind
    label = f"{owner[-1]}{kind.value[0]}"
    if len(stack) > 1:
        label += f"^{len(stack)}"
    return label


def render_ascii(board, highlights=()):
    """
    Text picture of a board mapping {(q, r): stack}. Rows are r, columns
    are q; each row is shifted half a cell right of the one above so
    neighbors line up. Highlighted empty cells are drawn as "**".
    """
    cells = list(board) + list(highlights)
    if not cells:
        return ""

    # 1) Find bounding box
    qs = [q for (q, r) in cells]
    rs = [r for (q, r) in cells]
    min_q, max_q = min(qs), max(qs)
    min_r, max_r = min(rs), max(rs)

    highlights = set(highlights)
    rows = []
    for row_r in range(min_r, max_r + 1):
        indent = " " * ((row_r - min_r) * CELL_WIDTH // 2)
        row_str = ""
        for col_q in range(min_q, max_q + 1):
            stack = board.get((col_q, row_r))
            if stack:
                label = cell_label(stack)
            elif (col_q, row_r) in highlights:
                label = "**"
            else:
                label = EMPTY_CELL
            row_str += f"{label:{CELL_WIDTH}s}"
        rows.append(f"r={row_r:3d} | {indent}{row_str.rstrip()}")
    return "\n".join(rows)
