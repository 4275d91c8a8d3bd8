from collections import deque

from HiveEngine.Pieces import InsectKind


class HiveRules:
    """Board-level rules shared by every movement validator and the game."""

    @staticmethod
    def reachable_cells(board, start, skip=None):
        """Occupied cells reachable from `start` over occupied neighbors, never entering `skip`."""
        visited = {start}
        frontier = deque([start])
        while frontier:
            cur = frontier.popleft()
            for neighbor in cur.neighbors():
                if neighbor in visited or neighbor == skip or not board.is_occupied(neighbor):
                    continue
                visited.add(neighbor)
                frontier.append(neighbor)
        return visited

    @staticmethod
    def is_board_connected(board):
        """One-Hive rule: every occupied cell belongs to a single group."""
        cells = board.occupied_cells()
        if not cells:
            return True
        return len(HiveRules.reachable_cells(board, cells[0])) == len(cells)

    @staticmethod
    def would_split_hive(board, candidate):
        """
        True if lifting the top piece at `candidate` leaves the hive in more
        than one group. The cell only goes empty when it held a single piece.
        """
        vacated = board.height(candidate) == 1
        remaining = [cell for cell in board.occupied_cells()
                     if not (vacated and cell == candidate)]
        if len(remaining) <= 1:
            return False
        skip = candidate if vacated else None
        return len(HiveRules.reachable_cells(board, remaining[0], skip)) < len(remaining)

    @staticmethod
    def touches_hive(board, coord, ignore=None):
        """True if some neighbor of coord (other than `ignore`) is occupied."""
        return any(board.is_occupied(adj) for adj in coord.neighbors() if adj != ignore)

    @staticmethod
    def can_slide(board, from_coord, to_coord):
        """
        True if the gap between two adjacent cells is wide enough: of the two
        cells touching both, at least one must be empty.
        """
        common = from_coord.common_neighbors(to_coord)
        if not common:
            return False
        return not all(board.is_occupied(c) for c in common)

    @staticmethod
    def can_walk(board, from_coord, to_coord):
        """
        A single ground step onto an empty adjacent cell. `board` must already
        have the moving piece lifted off `from_coord`.
        """
        if board.is_occupied(to_coord):
            return False
        if len(board) > 0 and not HiveRules.touches_hive(board, to_coord, ignore=from_coord):
            return False
        return HiveRules.can_slide(board, from_coord, to_coord)

    @staticmethod
    def find_queen_positions(board):
        """(coord, owner) for every queen on the board, including buried ones."""
        return [(coord, piece.owner) for coord, piece in board.pieces()
                if piece.kind is InsectKind.QUEEN]

    @staticmethod
    def is_queen_surrounded(board, coord):
        return all(board.is_occupied(neighbor) for neighbor in coord.neighbors())
