import io
import random

from frostlearn.agent import QLearningAgent
from frostlearn.cli import format_lake, format_policy, main, train
from frostlearn.frozen_lake import FrozenLake


def test_format_policy_letters():
    assert format_policy([0, 1, 2, 3], 2, 2) == "L D \nR U \n"


def test_format_policy_unknown_action_defaults_to_left():
    assert format_policy([7], 1, 1) == "L \n"


def test_format_lake_open_grid():
    lake = FrozenLake(2, 2, 0.0, 0.0, random.Random(1))
    assert format_lake(lake) == "S F \nF G \n"


def test_train_on_open_lake_always_succeeds():
    rng = random.Random(4)
    lake = FrozenLake(2, 2, 0.0, 0.0, rng)
    agent = QLearningAgent(lake.state_count, lake.action_count, 0.1, 0.9, 1.0, rng)
    out = io.StringIO()
    stats = train(lake, agent, 5, out)

    lines = out.getvalue().splitlines()
    assert len(lines) == 5
    for index, line in enumerate(lines):
        assert line.startswith(f"Episode {index} - Success Rate: 1 - Avg Reward: ")
    assert stats.episode_success == [True] * 5
    assert all(steps >= 2 for steps in stats.episode_lengths)
    assert agent.epsilon < 1.0


def test_main_prints_report(capsys):
    code = main(["--rows", "2", "--cols", "2", "--episodes", "3", "--seed", "7"])
    output = capsys.readouterr().out
    assert code == 0
    assert "Episode 2 - Success Rate: " in output
    assert "\n=== Success Rate Over Time ===\n" in output
    assert "Lake:\nS " in output
    assert "Policy:\n" in output


def test_main_rejects_impossible_lake(capsys):
    code = main(["--rows", "3", "--cols", "3", "--holes", "1.0", "--episodes", "1"])
    assert code == 1
    assert "frostlearn:" in capsys.readouterr().err