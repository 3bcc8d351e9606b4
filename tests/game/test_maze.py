"""Tests for the point-collection maze."""

from __future__ import annotations

import numpy as np
import pytest

from mazebeam.game.maze import Coord, Direction, MazeState
from mazebeam.search.state import SearchableState


@pytest.fixture
def small_maze() -> MazeState:
    """2x3 maze, character in the top-left corner.

    @ 3 1
    5 . 2
    """
    points = np.array([[0, 3, 1], [5, 0, 2]])
    return MazeState(points, Coord(0, 0), end_turn=3)


class TestGenerate:
    """Random maze construction."""

    def test_same_seed_same_maze(self) -> None:
        a = MazeState.generate(5, 7, end_turn=10, rng=42)
        b = MazeState.generate(5, 7, end_turn=10, rng=42)

        np.testing.assert_array_equal(a.points, b.points)
        assert a.character == b.character

    def test_accepts_generator(self) -> None:
        rng = np.random.default_rng(0)
        maze = MazeState.generate(4, 4, end_turn=5, rng=rng)
        assert maze.points.shape == (4, 4)

    def test_layout_invariants(self) -> None:
        maze = MazeState.generate(30, 30, end_turn=100, rng=1)

        assert maze.height == 30
        assert maze.width == 30
        assert maze.points[maze.character.y, maze.character.x] == 0
        assert maze.points.min() >= 0
        assert maze.points.max() <= 9
        assert maze.turn == 0
        assert maze.game_score == 0
        assert maze.first_action is None

    def test_runtime_board_size(self) -> None:
        maze = MazeState.generate(3, 4, end_turn=4, rng=0)
        assert (maze.height, maze.width) == (3, 4)


class TestMoves:
    """Legal actions and transitions."""

    def test_corner_legal_actions(self, small_maze: MazeState) -> None:
        assert small_maze.legal_actions() == [Direction.RIGHT, Direction.DOWN]

    def test_center_has_all_actions(self) -> None:
        maze = MazeState(np.zeros((3, 3), dtype=np.int64), Coord(1, 1), end_turn=1)
        assert maze.legal_actions() == list(Direction)

    def test_advance_collects_points(self, small_maze: MazeState) -> None:
        small_maze.advance(Direction.RIGHT)

        assert small_maze.character == Coord(0, 1)
        assert small_maze.game_score == 3
        assert small_maze.points[0, 1] == 0
        assert small_maze.turn == 1

    def test_points_collected_once(self, small_maze: MazeState) -> None:
        small_maze.advance(Direction.RIGHT)
        small_maze.advance(Direction.LEFT)
        small_maze.advance(Direction.RIGHT)
        assert small_maze.game_score == 3

    def test_advance_accepts_int(self, small_maze: MazeState) -> None:
        small_maze.advance(2)
        assert small_maze.character == Coord(1, 0)
        assert small_maze.game_score == 5

    def test_illegal_move_raises(self, small_maze: MazeState) -> None:
        with pytest.raises(ValueError, match="illegal action"):
            small_maze.advance(Direction.UP)

    def test_terminal_after_end_turn(self, small_maze: MazeState) -> None:
        for action in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN):
            assert not small_maze.is_terminal()
            small_maze.advance(action)

        assert small_maze.is_terminal()
        assert small_maze.game_score == 6

    def test_non_terminal_states_have_moves(self) -> None:
        """Every reachable non-terminal state offers a legal action."""
        frontier = [MazeState.generate(3, 4, end_turn=3, rng=9)]
        while frontier:
            state = frontier.pop()
            if state.is_terminal():
                continue
            actions = state.legal_actions()
            assert actions
            frontier.extend(state.apply(action) for action in actions)


class TestSearchContract:
    """Behaviour the search engines rely on."""

    def test_is_searchable_state(self, small_maze: MazeState) -> None:
        assert isinstance(small_maze, SearchableState)

    def test_apply_leaves_parent_untouched(self, small_maze: MazeState) -> None:
        child = small_maze.apply(Direction.RIGHT)

        assert child.game_score == 3
        assert small_maze.game_score == 0
        assert small_maze.points[0, 1] == 3
        assert small_maze.turn == 0

    def test_siblings_do_not_share_grid(self, small_maze: MazeState) -> None:
        right = small_maze.apply(Direction.RIGHT)
        down = small_maze.apply(Direction.DOWN)
        right.advance(Direction.RIGHT)

        assert down.points[0, 2] == 1
        assert right.points is not down.points

    def test_apply_carries_first_action(self, small_maze: MazeState) -> None:
        child = small_maze.apply(Direction.RIGHT)
        child.first_action = Direction.RIGHT
        grandchild = child.apply(Direction.DOWN)
        assert grandchild.first_action == Direction.RIGHT

    def test_evaluate_caches_game_score(self, small_maze: MazeState) -> None:
        child = small_maze.apply(Direction.DOWN)
        assert child.evaluate() == 5
        assert child.evaluated_score == 5


class TestRendering:
    """Text dump of the board."""

    def test_to_string(self, small_maze: MazeState) -> None:
        assert small_maze.to_string() == "turn:\t0\nscore:\t0\n@31\n5.2\n"

    def test_to_string_after_move(self, small_maze: MazeState) -> None:
        small_maze.advance(Direction.RIGHT)
        assert str(small_maze) == "turn:\t1\nscore:\t3\n.@1\n5.2\n"


class TestValidation:
    """Constructor guards."""

    def test_rejects_character_off_board(self) -> None:
        with pytest.raises(ValueError, match="outside"):
            MazeState(np.zeros((2, 2), dtype=np.int64), Coord(2, 0), end_turn=1)

    def test_rejects_non_grid(self) -> None:
        with pytest.raises(ValueError, match="2-D"):
            MazeState(np.zeros(4, dtype=np.int64), Coord(0, 0), end_turn=1)

    def test_rejects_single_cell_board(self) -> None:
        with pytest.raises(ValueError, match="no moves"):
            MazeState.generate(1, 1, end_turn=3, rng=0)

    def test_single_cell_board_allowed_when_already_over(self) -> None:
        maze = MazeState(np.zeros((1, 1), dtype=np.int64), Coord(0, 0), end_turn=0)
        assert maze.is_terminal()
