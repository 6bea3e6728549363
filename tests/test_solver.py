import itertools

import pytest

from slider.domains.board import Board
from slider.search.bfs import bfs
from slider.search.errors import InvalidArgumentError
from slider.search.node import SearchNode
from slider.search.queue import NodeOrder
from slider.search.solver import Solver, successors


def assert_legal_path(path, initial):
    assert path[0] == initial
    assert path[-1].is_goal()
    for a, b in zip(path, path[1:]):
        assert b in a.neighbors()


def test_none_initial_board_rejected():
    with pytest.raises(InvalidArgumentError):
        Solver(None)


def test_already_solved(goal3):
    s = Solver(goal3)
    assert s.is_solvable()
    assert s.moves() == 0
    assert s.solution() == [goal3]


def test_four_move_puzzle(four_moves):
    s = Solver(four_moves)
    assert s.is_solvable()
    assert s.moves() == 4
    assert_legal_path(s.solution(), four_moves)


def test_example_matches_bfs(example3):
    s = Solver(example3)
    ref = bfs(example3)
    assert s.is_solvable()
    assert s.moves() == ref["g"]
    assert len(s.solution()) == ref["g"] + 1
    assert_legal_path(s.solution(), example3)


def test_twin_of_solvable_board_is_infeasible(four_moves):
    s = Solver(four_moves.twin())
    assert not s.is_solvable()
    assert s.moves() == -1
    assert s.solution() is None


@pytest.mark.parametrize("depth,seed", [(4, 1), (8, 2), (12, 3), (16, 4), (18, 5)])
def test_optimal_against_bfs(depth, seed):
    b = Board.scramble(3, depth, seed)
    s = Solver(b)
    assert s.moves() == bfs(b)["g"]
    assert s.moves() <= depth
    assert_legal_path(s.solution(), b)


@pytest.mark.parametrize("depth,seed", [(6, 11), (10, 12), (14, 13)])
def test_board_and_twin_disagree(depth, seed):
    b = Board.scramble(3, depth, seed)
    assert Solver(b).is_solvable() != Solver(b.twin()).is_solvable()


def test_every_2x2_layout_matches_parity_and_bfs():
    for p in itertools.permutations(range(4)):
        b = Board(p, 2)
        s = Solver(b)
        assert s.is_solvable() == b.is_solvable()
        if s.is_solvable():
            assert s.moves() == bfs(b)["g"]
        else:
            assert bfs(b)["termination"] == "exhausted"


def test_four_by_four():
    b = Board.scramble(4, 12, seed=3)
    s = Solver(b)
    assert s.is_solvable()
    assert s.moves() <= 12
    assert_legal_path(s.solution(), b)


def test_rerun_is_deterministic(example3):
    first, second = Solver(example3), Solver(example3)
    assert first.moves() == second.moves()
    assert first.solution() == second.solution()
    assert first.expanded == second.expanded


def test_solution_is_a_copy(four_moves):
    s = Solver(four_moves)
    s.solution().clear()
    assert len(s.solution()) == 5


def test_counters(four_moves):
    s = Solver(four_moves)
    assert s.expanded >= s.moves()
    assert s.generated >= s.expanded
    assert s.peak_open >= 2
    assert s.elapsed >= 0.0


def test_order_strategy_is_used(four_moves):
    seen = []

    class Recording(NodeOrder):
        def key(self, node):
            seen.append(node)
            return super().key(node)

    Solver(four_moves, order=Recording())
    assert seen[0].board == four_moves and not seen[0].twin
    assert seen[1].board == four_moves.twin() and seen[1].twin
    for node in seen[2:]:
        assert node.g == node.parent.g + 1
        assert node.twin == node.parent.twin
        # the undo move is never generated
        if node.parent.parent is not None:
            assert node.board != node.parent.parent.board


def test_successors_skip_only_the_direct_parent(goal3):
    # blank circles the lower-right 2x2 square three times (12 moves)
    # and returns to the start; only the undo move is filtered, so the
    # start board is generated again as a successor of the 11th node
    path = [5, 4, 7, 8] * 3
    node = SearchNode.root(goal3)
    for target in path[:11]:
        nb = next(b for b in node.board.neighbors() if b.tiles.index(0) == target)
        node = node.child(nb)
    kids = [c.board for c in successors(node)]
    assert node.parent.board not in kids
    assert goal3 in kids
    assert len(kids) == len(node.board.neighbors()) - 1
