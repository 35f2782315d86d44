"""
Unit Tests for Search Module

Tests for move generation and minimax search. Exact-score assertions use
deterministic stub evaluators; the random placeholder is only used where
the outcome is forced by a win.
"""

import logging

import pytest
from connect_four.board import Board, MoveLabel, NodeKind, build_root_board, empty_board
from connect_four.config import BOARD_HEIGHT, BOARD_WIDTH
from connect_four.evaluation import WIN_SCORE, Evaluator, RandomEvaluator
from connect_four.search import children, find_best_move, minimax, next_moves, play
from connect_four.utils.testing import TACTICAL_POSITIONS, count_nodes, run_tactics


class ConstantEvaluator(Evaluator):
    """Win sentinels, otherwise a fixed score."""

    def __init__(self, value=0):
        self.value = value
        self.calls = 0

    def evaluate(self, board):
        self.calls += 1
        terminal_score = self.evaluate_terminal(board)
        if terminal_score is not None:
            return terminal_score
        return self.value


class ColumnEvaluator(Evaluator):
    """Sum of column indices of player 0 marks minus those of player 1."""

    def evaluate(self, board):
        terminal_score = self.evaluate_terminal(board)
        if terminal_score is not None:
            return terminal_score
        score = 0
        for column, stack in enumerate(board.columns):
            score += column * (stack.count(0) - stack.count(1))
        return score


def full_board():
    """A full board with no recorded winner."""
    return Board(
        columns=((0, 0, 1, 1, 0, 0),) * BOARD_WIDTH,
        current_player=1,
        next_player=0,
        kind=NodeKind.MAX,
    )


def vertical_threat_board():
    """Player 1 holds column 3 rows 0-2 and is to move."""
    return build_root_board([
        (0, 0, 0), (1, 3, 0), (0, 1, 0), (1, 3, 1),
        (0, 5, 0), (1, 3, 2), (0, 6, 0),
    ])


class TestMoveGenerator:
    """Tests for children()."""

    def test_empty_board_has_one_child_per_column(self):
        result = children(empty_board())

        assert len(result) == BOARD_WIDTH
        assert [child.last_move for child in result] == [
            MoveLabel(0, column, 0) for column in range(BOARD_WIDTH)
        ]

    def test_child_swaps_players_and_flips_kind(self):
        board = empty_board()

        child = children(board)[0]

        assert child.current_player == board.next_player
        assert child.next_player == board.current_player
        assert child.kind is NodeKind.MIN

    def test_child_appends_one_mark(self):
        board = build_root_board([(0, 2, 0), (1, 2, 1)])

        child = children(board)[2]

        assert child.columns[2] == (0, 1, 0)
        assert child.last_move == MoveLabel(0, 2, 2)
        for column in range(BOARD_WIDTH):
            if column != 2:
                assert child.columns[column] == board.columns[column]

    def test_parent_not_mutated(self):
        board = build_root_board([(0, 2, 0)])
        before = board.columns

        children(board)

        assert board.columns == before
        assert board.columns[2] == (0,)

    def test_full_column_skipped(self):
        board = build_root_board([
            (0, 0, 0), (1, 0, 1), (0, 0, 2), (1, 0, 3), (0, 0, 4), (1, 0, 5),
        ])

        result = children(board)

        assert len(result) == BOARD_WIDTH - 1
        assert all(child.last_move.column != 0 for child in result)

    def test_full_board_has_no_children(self):
        assert children(full_board()) == []

    def test_winning_child_records_winner(self):
        """Dropping player 1's mark on its vertical three wins."""
        board = vertical_threat_board()

        child = children(board)[3]

        assert child.last_move == MoveLabel(1, 3, 3)
        assert child.winner == 1
        assert RandomEvaluator().evaluate(child) == -WIN_SCORE

    def test_non_winning_children_have_no_winner(self):
        board = vertical_threat_board()

        winners = [child.winner for child in children(board)]

        assert winners == [None, None, None, 1, None, None, None]

    def test_invariants_along_playouts(self):
        """Play many games by rotating through children; invariants hold at every ply."""
        for offset in range(BOARD_WIDTH):
            board = empty_board()
            ply = 0
            while True:
                result = children(board)
                if not result:
                    break
                for child in result:
                    assert child.current_player + child.next_player == 1
                    assert all(len(stack) <= BOARD_HEIGHT for stack in child.columns)
                    assert len(board.columns[child.last_move.column]) < BOARD_HEIGHT
                board = result[(offset + ply) % len(result)]
                ply += 1

            assert ply == BOARD_WIDTH * BOARD_HEIGHT
            assert board.is_full()

    def test_play_matches_children(self):
        board = build_root_board([(0, 1, 0)])

        assert play(board, 4) == children(board)[4]


class TestMinimax:
    """Tests for minimax()."""

    def test_depth_zero_evaluates(self):
        evaluator = ConstantEvaluator(42)

        assert minimax(empty_board(), 0, evaluator) == 42
        assert evaluator.calls == 1

    def test_winner_is_terminal(self):
        child = children(vertical_threat_board())[3]
        nodes = [0]

        score = minimax(child, 5, ConstantEvaluator(), nodes)

        assert score == -WIN_SCORE
        assert nodes[0] == 1, "Won boards must not be expanded"

    def test_full_board_is_terminal(self):
        evaluator = ConstantEvaluator(7)

        assert minimax(full_board(), 3, evaluator) == 7
        assert evaluator.calls == 1

    def test_max_node_keeps_highest(self):
        """Player 0 to move, depth 1: best drop is the rightmost column."""
        assert minimax(empty_board(), 1, ColumnEvaluator()) == BOARD_WIDTH - 1

    def test_min_node_keeps_lowest(self):
        board = build_root_board([(0, 0, 0)])

        assert board.kind is NodeKind.MIN
        assert minimax(board, 1, ColumnEvaluator()) == -(BOARD_WIDTH - 1)

    def test_alternating_depth_two(self):
        """Player 0 takes column 6, player 1 answers in column 6."""
        assert minimax(empty_board(), 2, ColumnEvaluator()) == 0

    def test_nodes_counted(self):
        nodes = [0]

        minimax(empty_board(), 2, ConstantEvaluator(), nodes)

        assert nodes[0] == 1 + 7 + 49

    def test_unknown_node_kind_is_fatal(self):
        board = Board(
            columns=((),) * BOARD_WIDTH,
            current_player=1,
            next_player=0,
            kind="sideways",
        )

        with pytest.raises(AssertionError):
            minimax(board, 1, ConstantEvaluator())

    def test_negative_depth_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            minimax(empty_board(), -1, ConstantEvaluator())


class TestNextMoves:
    """Tests for next_moves()."""

    def test_empty_board_depth_one(self):
        scores = next_moves(empty_board(), depth=1)

        assert list(scores) == [MoveLabel(0, column, 0) for column in range(BOARD_WIDTH)]
        assert all(0 <= score < 100 for score in scores.values())

    def test_exact_scores_with_stub(self):
        scores = next_moves(empty_board(), depth=1, evaluator=ColumnEvaluator())

        assert list(scores.values()) == [column - (BOARD_WIDTH - 1) for column in range(BOARD_WIDTH)]

    def test_depth_zero_scores_children_directly(self):
        scores = next_moves(empty_board(), depth=0, evaluator=ColumnEvaluator())

        assert list(scores.values()) == list(range(BOARD_WIDTH))

    def test_same_tree_on_repeated_calls(self):
        board = build_root_board([(0, 3, 0), (1, 3, 1)])
        nodes_a, nodes_b = [0], [0]

        first = next_moves(board, 2, RandomEvaluator(), nodes_a)
        second = next_moves(board, 2, RandomEvaluator(), nodes_b)

        assert list(first) == list(second)
        assert nodes_a == nodes_b

    def test_seeded_evaluator_reproducible(self):
        board = build_root_board([(0, 3, 0)])

        first = next_moves(board, 2, RandomEvaluator(seed=11))
        second = next_moves(board, 2, RandomEvaluator(seed=11))

        assert first == second

    def test_nodes_match_tree_size(self):
        board = build_root_board([(0, 3, 0), (1, 2, 0)])
        nodes = [0]

        next_moves(board, 2, ConstantEvaluator(), nodes)

        assert nodes[0] == sum(count_nodes(child, 2) for child in children(board))

    def test_full_board_has_no_moves(self):
        assert next_moves(full_board(), 3, ConstantEvaluator()) == {}

    def test_immediate_win_scores_sentinel(self):
        scores = next_moves(vertical_threat_board(), depth=2)

        assert scores[MoveLabel(1, 3, 3)] == -WIN_SCORE

    def test_negative_depth_rejected(self):
        evaluator = ConstantEvaluator()

        with pytest.raises(ValueError, match="non-negative"):
            next_moves(empty_board(), -1, evaluator)
        assert evaluator.calls == 0

    def test_summary_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="connect_four.search.minimax")

        next_moves(empty_board(), 1, ConstantEvaluator())

        assert "Scored 7 moves at depth 1, nodes visited: 56" in caplog.text


class TestFindBestMove:
    """Tests for find_best_move()."""

    def test_max_root_picks_highest(self):
        move, score, nodes = find_best_move(empty_board(), 0, ColumnEvaluator())

        assert move == MoveLabel(0, BOARD_WIDTH - 1, 0)
        assert score == BOARD_WIDTH - 1
        assert nodes == BOARD_WIDTH

    def test_min_root_picks_lowest(self):
        board = build_root_board([(0, 0, 0)])

        move, score, nodes = find_best_move(board, 0, ColumnEvaluator())

        assert move == MoveLabel(1, BOARD_WIDTH - 1, 0)
        assert score == -(BOARD_WIDTH - 1)

    def test_first_move_wins_ties(self):
        move, score, nodes = find_best_move(empty_board(), 1, ConstantEvaluator(5))

        assert move == MoveLabel(0, 0, 0)
        assert score == 5

    def test_no_legal_moves_raises_error(self):
        with pytest.raises(ValueError):
            find_best_move(full_board(), 2, ConstantEvaluator())

    def test_negative_depth_raises_error(self):
        with pytest.raises(ValueError):
            find_best_move(empty_board(), -2, ConstantEvaluator())

    def test_takes_immediate_win(self):
        move, score, nodes = find_best_move(vertical_threat_board(), 1, RandomEvaluator(seed=3))

        assert move == MoveLabel(1, 3, 3)
        assert score == -WIN_SCORE


class TestSearchUtilities:
    """Tests for count_nodes() and the tactical suite."""

    @pytest.mark.parametrize("depth, expected", [(0, 1), (1, 8), (2, 57), (3, 400)])
    def test_count_nodes_empty_board(self, depth, expected):
        assert count_nodes(empty_board(), depth) == expected

    def test_count_nodes_stops_at_winner(self):
        child = children(vertical_threat_board())[3]

        assert count_nodes(child, 4) == 1

    @pytest.mark.parametrize("depth", [1, 2])
    def test_tactical_suite(self, depth):
        result = run_tactics(RandomEvaluator(seed=0), depth=depth)

        assert result['total'] == len(TACTICAL_POSITIONS)
        assert result['score'] == result['total'], [
            (r.position.id, r.found_move) for r in result['results'] if not r.correct
        ]
        assert result['percentage'] == 100.0
