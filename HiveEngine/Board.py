from HiveEngine.Hex import Hex


class Board:
    """
    Sparse Hive board:
      stacks: a dict Hex -> list of Piece, bottom to top.

    A cell whose stack becomes empty is deleted straight away, so every
    key of `stacks` is an occupied cell. Only the top of a stack is active.
    """

    __slots__ = ("stacks",)

    def __init__(self, stacks=None):
        self.stacks = {}
        if stacks:
            for coord, stack in stacks.items():
                if stack:
                    self.stacks[Hex(*coord)] = list(stack)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return False
        return self.board_key() == other.board_key()

    def __len__(self):
        return len(self.stacks)

    def __contains__(self, coord):
        return coord in self.stacks

    def __repr__(self):
        return f"Board({self.board_key()})"

    def copy(self):
        new_board = Board()
        new_board.stacks = {coord: stack[:] for coord, stack in self.stacks.items()}
        return new_board

    def board_key(self):
        """Immutable, canonical representation of the board."""
        return tuple(sorted((coord, tuple(stack)) for coord, stack in self.stacks.items()))

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------
    def is_occupied(self, coord):
        return coord in self.stacks

    def stack_at(self, coord):
        """The stack at coord as a tuple (bottom first), or () if empty."""
        return tuple(self.stacks.get(coord, ()))

    def height(self, coord):
        return len(self.stacks.get(coord, ()))

    def top_piece(self, coord):
        stack = self.stacks.get(coord)
        return stack[-1] if stack else None

    def occupied_cells(self):
        return list(self.stacks)

    def pieces(self):
        """(coord, piece) for every piece on the board, buried ones included."""
        for coord, stack in self.stacks.items():
            for piece in stack:
                yield coord, piece

    def find_piece(self, piece_id):
        """Return the cell holding piece_id, or None if it is not on the board."""
        for coord, piece in self.pieces():
            if piece.piece_id == piece_id:
                return coord
        return None

    def count_pieces(self, player):
        return sum(1 for _, piece in self.pieces() if piece.owner == player)

    # ---------------------------------------------------------
    # Mutation
    # ---------------------------------------------------------
    def place(self, coord, piece):
        self.stacks.setdefault(Hex(*coord), []).append(piece)

    def remove_top(self, coord):
        stack = self.stacks.get(coord)
        if not stack:
            raise ValueError(f"No piece at {coord} to remove.")
        piece = stack.pop()
        if not stack:
            del self.stacks[coord]
        return piece

    def move_top(self, from_coord, to_coord):
        piece = self.remove_top(from_coord)
        self.place(to_coord, piece)
        return piece

    def without_top(self, coord):
        """A copy of the board with the top piece at coord lifted off."""
        lifted = self.copy()
        lifted.remove_top(coord)
        return lifted
