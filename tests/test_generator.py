import dataclasses
from pathlib import Path
import sys

import pytest

# Ensure the project root is on the Python path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import generator
from generator import COMPLETE, GENERATING, ConfigError, MazeConfig, MazeGenerator, generate_maze
import render_maze
from tester import check_perfect_maze


class ScriptedSource:
    """Random source returning preset indices in order."""

    def __init__(self, values):
        self.values = list(values)
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.values.pop(0)


@pytest.mark.parametrize("size", [1, 2, 3, 7, 20])
def test_generated_maze_is_a_spanning_tree(size):
    result = generate_maze(size, seed=size)
    check_perfect_maze(result)
    assert len(result.open_walls) == size * size - 1


def test_every_cell_connected_after_generation():
    gen = MazeGenerator(MazeConfig(size=6, seed=42))
    gen.generate()
    assert gen.state == COMPLETE
    assert gen.cells.count == 1
    for p in range(36):
        for q in range(36):
            assert gen.cells.is_connected(p, q)


def test_size_one_needs_no_draws():
    source = ScriptedSource([])
    result = MazeGenerator(MazeConfig(size=1), source).generate()
    assert result.walls == ()
    assert result.draws == 0
    assert source.stops == []


def test_two_by_two_scripted_draws():
    # catalog is (0,1), (0,2), (1,3), (2,3); the draws pick (0,1), then (0,2), then (1,3)
    source = ScriptedSource([0, 1, 1])
    gen = MazeGenerator(MazeConfig(size=2), source)
    result = gen.generate()

    assert source.stops == [4, 3, 2]
    assert result.draws == 3
    assert result.open_pairs() == {(0, 1), (0, 2), (1, 3)}
    assert not gen.catalog.lookup(2, 3).is_open
    assert [w.cells for w in gen.pool] == [(2, 3)]


def test_connected_wall_stays_closed():
    # draws (0,1), (0,3), (1,4) and then (3,4), which would close a cycle
    source = ScriptedSource([0, 2, 3, 5])
    gen = MazeGenerator(MazeConfig(size=3), source)

    assert [gen.step() for _ in range(4)] == [True, True, True, False]
    assert not gen.catalog.lookup(3, 4).is_open
    assert gen.components_remaining == 6
    assert gen.state == GENERATING
    assert len(gen.pool) == 8
    assert source.stops == [12, 11, 10, 9]


def test_one_draw_per_step_and_bounded():
    gen = MazeGenerator(MazeConfig(size=10, seed=5))
    result = gen.generate()
    assert 99 <= result.draws <= 180
    assert len(gen.pool) == 180 - result.draws


def test_fixed_seed_is_reproducible():
    first = generate_maze(12, seed=2024)
    second = generate_maze(12, seed=2024)
    assert first.open_pairs() == second.open_pairs()
    assert render_maze.render(12, first.walls) == render_maze.render(12, second.walls)


def test_result_does_not_change_after_generation():
    gen = MazeGenerator(MazeConfig(size=3, seed=1))
    result = gen.generate()
    opened = result.open_pairs()

    closed = next(w for w in result.walls if not w.is_open)
    with pytest.raises(dataclasses.FrozenInstanceError):
        closed.is_open = True

    gen.catalog.lookup(*closed.cells).open()
    assert result.open_pairs() == opened
    assert len(result.open_walls) == 8
    check_perfect_maze(result)


def test_generate_twice_is_an_error():
    gen = MazeGenerator(MazeConfig(size=2, seed=1))
    gen.generate()
    with pytest.raises(RuntimeError):
        gen.generate()


@pytest.mark.parametrize("size", [0, -3, "4", 2.5, True])
def test_invalid_config(size):
    with pytest.raises(ConfigError):
        MazeConfig(size=size)


def test_main_prints_rendered_maze(capsys):
    assert generator.main(["4", "--seed", "7"]) == 0
    out, err = capsys.readouterr()

    expected = generate_maze(4, seed=7)
    assert out == render_maze.render(4, expected.walls) + "\n"
    assert err == ""


def test_main_verbose_logs_to_stderr(capsys):
    generator.main(["3", "--seed", "1", "--verbose", "--openings"])
    out, err = capsys.readouterr()
    assert out.startswith("+  +--+--+")
    assert "maze complete" in err


@pytest.mark.parametrize("arg", ["0", "-3", "abc", "2.5"])
def test_main_rejects_bad_size_before_generating(arg, capsys, monkeypatch):
    def fail(self):
        raise AssertionError("generation must not start")

    monkeypatch.setattr(MazeGenerator, "generate", fail)
    with pytest.raises(SystemExit) as excinfo:
        generator.main([arg])
    assert excinfo.value.code != 0
    out, err = capsys.readouterr()
    assert out == ""
    assert "invalid maze size" in err


def test_main_requires_size(capsys):
    with pytest.raises(SystemExit) as excinfo:
        generator.main([])
    assert excinfo.value.code != 0
