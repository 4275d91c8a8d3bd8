import logging

from HiveEngine.AsciiDraw import render_ascii
from HiveEngine.Errors import (IllegalMove, IllegalPass, IllegalPlacement, MoveError,
                               PassError, PlacementError)
from HiveEngine.GameState import GameState, GameStatus
from HiveEngine.Hex import Hex
from HiveEngine.HiveRules import HiveRules
from HiveEngine.Pieces import InsectKind, Piece, get_opponent, make_piece_id
from HiveEngine.SpecialAbilities import resolve_move

logger = logging.getLogger(__name__)


class HiveGame:
    """
    Turn-by-turn Hive rules engine.

    Every request is checked in full before anything changes: either the
    placement/move/pass is legal and the board, hands and turn are updated
    together, or an IllegalPlacement/IllegalMove/IllegalPass is raised and
    the state is untouched.
    """

    def __init__(self, options=None, state=None):
        if state is not None and not HiveRules.is_board_connected(state.board):
            raise ValueError(f"Board is not a single hive: {state.board}")
        self.state = state if state is not None else GameState(options)

    @property
    def options(self):
        return self.state.options

    @property
    def board(self):
        return self.state.board

    # ---------------------------------------------------------
    # 1. Placement
    # ---------------------------------------------------------
    def placement_error(self, player, kind, coord):
        """The first rule a placement breaks, or None if it is legal."""
        coord = Hex(*coord)
        state = self.state
        board = state.board
        if state.status is GameStatus.GAME_OVER:
            return PlacementError.GAME_OVER
        if player != state.current_player:
            return PlacementError.NOT_YOUR_TURN
        if state.pieces_in_hand[player].get(kind, 0) <= 0:
            return PlacementError.NONE_IN_HAND
        if board.is_occupied(coord):
            return PlacementError.OCCUPIED_HEX
        if len(board) > 0 and not self._placement_touches_correctly(player, coord):
            return PlacementError.INVALID_ADJACENCY

        turns = state.turn_count[player]
        if self.options.tournament_rules and kind is InsectKind.QUEEN and turns == 0:
            return PlacementError.TOURNAMENT_FIRST_TURN_QUEEN_BAN
        if not state.queen_placed[player] and turns >= 3 and kind is not InsectKind.QUEEN:
            return PlacementError.QUEEN_DEADLINE_MISSED
        return None

    def _placement_touches_correctly(self, player, coord):
        board = self.board
        opponent = get_opponent(player)
        neighbor_owners = {board.top_piece(n).owner for n in coord.neighbors() if board.is_occupied(n)}

        if board.count_pieces(player) == 0:
            if board.count_pieces(opponent) == 0:
                return True
            # Answering the very first piece: must touch it.
            return opponent in neighbor_owners
        return player in neighbor_owners and opponent not in neighbor_owners

    def submit_placement(self, player, kind, coord):
        kind = InsectKind(kind)
        coord = Hex(*coord)
        error = self.placement_error(player, kind, coord)
        if error is not None:
            logger.debug(f"Rejected placement of {kind} at {coord} by {player}: {error.name}")
            raise IllegalPlacement(error, f"{kind} at {coord}")

        state = self.state
        serial = state.placed_serials.get((player, kind), 0) + 1
        piece = Piece(player, kind, make_piece_id(player, kind, serial))
        state.board.place(coord, piece)
        state.placed_serials[(player, kind)] = serial
        state.pieces_in_hand[player][kind] -= 1
        if kind is InsectKind.QUEEN:
            state.queen_placed[player] = True

        logger.info(f"{player} placed {piece.piece_id} at {coord}")
        self._finish_action()
        return piece

    # ---------------------------------------------------------
    # 2. Movement
    # ---------------------------------------------------------
    def _check_move(self, player, piece_id, target):
        """Return (error, origin, resolved move); error is None when the move is legal."""
        state = self.state
        board = state.board
        if state.status is GameStatus.GAME_OVER:
            return MoveError.GAME_OVER, None, None
        if player != state.current_player:
            return MoveError.NOT_YOUR_TURN, None, None

        origin = board.find_piece(piece_id)
        if origin is None:
            return MoveError.UNKNOWN_PIECE, None, None
        piece = board.top_piece(origin)
        if piece.piece_id != piece_id:
            return MoveError.PIECE_COVERED, origin, None

        if not state.queen_placed[player]:
            return MoveError.QUEEN_NOT_PLACED_YET, origin, None
        if (self.options.tournament_rules and piece.kind is InsectKind.QUEEN
                and state.turn_count[player] == 0):
            return MoveError.TOURNAMENT_FIRST_TURN_QUEEN_MOVE_BAN, origin, None

        resolved = resolve_move(board, player, origin, target)
        if not resolved:
            return MoveError.NO_LEGAL_MOVEMENT_TYPE, origin, resolved
        if HiveRules.would_split_hive(board, origin):
            return MoveError.WOULD_SPLIT_HIVE, origin, resolved
        return None, origin, resolved

    def move_error(self, player, piece_id, target):
        return self._check_move(player, piece_id, Hex(*target))[0]

    def submit_move(self, player, piece_id, target):
        target = Hex(*target)
        error, origin, resolved = self._check_move(player, piece_id, target)
        if error is not None:
            logger.debug(f"Rejected move of {piece_id} to {target} by {player}: {error.name}")
            raise IllegalMove(error, f"{piece_id} to {target}")

        self.state.board.move_top(origin, target)
        logger.info(f"{player} moved {piece_id} {origin} -> {target} ({resolved.move_type.value})")
        self._finish_action()
        return resolved

    # ---------------------------------------------------------
    # 3. Turn sequencing & outcome
    # ---------------------------------------------------------
    def can_pass(self, player=None):
        state = self.state
        player = player or state.current_player
        return state.queen_placed[player] or state.turn_count[player] >= 2

    def end_turn(self, player=None):
        """Voluntarily pass the turn."""
        state = self.state
        player = player or state.current_player
        if state.status is GameStatus.GAME_OVER:
            raise IllegalPass(PassError.GAME_OVER)
        if player != state.current_player:
            raise IllegalPass(PassError.NOT_YOUR_TURN)
        if not self.can_pass(player):
            logger.debug(f"Rejected pass by {player}")
            raise IllegalPass(PassError.PASS_NOT_ALLOWED)

        logger.info(f"{player} passed")
        state.move_number += 1
        self._advance_turn()

    def _finish_action(self):
        state = self.state
        if state.status is GameStatus.SETUP:
            state.status = GameStatus.PLAYING
        state.move_number += 1
        self._check_win_condition()
        self._advance_turn()

    def _advance_turn(self):
        state = self.state
        state.turn_count[state.current_player] += 1
        state.current_player = get_opponent(state.current_player)

    def _check_win_condition(self):
        board = self.board
        losers = {owner for coord, owner in HiveRules.find_queen_positions(board)
                  if HiveRules.is_queen_surrounded(board, coord)}
        if not losers:
            return
        state = self.state
        state.status = GameStatus.GAME_OVER
        if len(losers) == 1:
            state.winner = get_opponent(losers.pop())
            logger.info(f"Game over, {state.winner} wins")
        else:
            state.winner = None
            logger.info("Game over, both queens surrounded: draw")

    def is_terminal(self):
        return self.state.status is GameStatus.GAME_OVER

    def get_game_outcome(self):
        if not self.is_terminal():
            return None
        return self.state.winner or "Draw"

    # ---------------------------------------------------------
    # 4. Queries for the presentation layer
    # ---------------------------------------------------------
    def _frontier(self):
        """Every occupied cell plus every cell touching one."""
        cells = set()
        for coord in self.board.occupied_cells():
            cells.add(coord)
            cells.update(coord.neighbors())
        return cells

    def query_legal_destinations(self, piece_id):
        """Cells the current player could move piece_id to right now."""
        origin = self.board.find_piece(piece_id)
        if origin is None or self.is_terminal():
            return set()
        player = self.state.current_player
        return {coord for coord in self._frontier() - {origin}
                if self._check_move(player, piece_id, coord)[0] is None}

    def query_legal_placements(self, kind):
        """Cells where the current player could place `kind` right now."""
        kind = InsectKind(kind)
        board = self.board
        if len(board) == 0:
            candidates = {Hex(0, 0)}
        else:
            candidates = {coord for coord in self._frontier() if not board.is_occupied(coord)}
        player = self.state.current_player
        return {coord for coord in candidates if self.placement_error(player, kind, coord) is None}

    def get_legal_actions(self):
        if self.is_terminal():
            return []
        state = self.state
        actions = []
        for kind in InsectKind:
            for coord in sorted(self.query_legal_placements(kind)):
                actions.append(("PLACE", kind, coord))

        if state.queen_placed[state.current_player]:
            for coord in sorted(self.board.occupied_cells()):
                piece_id = self.board.top_piece(coord).piece_id
                for target in sorted(self.query_legal_destinations(piece_id)):
                    actions.append(("MOVE", piece_id, target))

        if not actions and self.can_pass():
            return [("PASS",)]
        return actions

    def apply_action(self, action):
        player = self.state.current_player
        if action[0] == "PLACE":
            _, kind, coord = action
            return self.submit_placement(player, kind, coord)
        if action[0] == "MOVE":
            _, piece_id, target = action
            return self.submit_move(player, piece_id, target)
        if action[0] == "PASS":
            return self.end_turn(player)
        raise ValueError(f"Unexpected action format: {action}")

    def snapshot(self):
        return self.state.snapshot()

    # ---------------------------------------------------------
    # 5. Print / Debug
    # ---------------------------------------------------------
    def format_state(self):
        state = self.state
        lines = [f"Move#: {state.move_number}, Current Player: {state.current_player}, Status: {state.status.value}"]
        if len(state.board) == 0:
            lines.append("Board is empty.")
        else:
            lines.append(render_ascii(state.board.stacks))
        lines.append("Pieces in hand:")
        for player, hand in state.pieces_in_hand.items():
            counts = ", ".join(f"{kind.value}: {count}" for kind, count in hand.items() if count)
            lines.append(f"  {player}: {counts}")
        return "\n".join(lines)

    def print_state(self):
        print(self.format_state())
        print("-" * 50)
