"""Train a Q-learning agent on a generated frozen lake and report the result."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Sequence, TextIO

from frostlearn.agent import QLearningAgent
from frostlearn.frozen_lake import GOAL, FrozenLake
from frostlearn.stats import TrainingStats

_POLICY_LETTERS = {0: "L", 1: "D", 2: "R", 3: "U"}


def train(
    lake: FrozenLake,
    agent: QLearningAgent,
    episodes: int,
    out: TextIO | None = None,
) -> TrainingStats:
    """Run the given number of episodes, writing a progress line after each one."""
    out = sys.stdout if out is None else out
    stats = TrainingStats()
    for episode in range(episodes):
        state = lake.reset()
        steps = 0
        success = False
        total_reward = 0.0
        while not lake.is_done():
            action = agent.choose_action(state)
            next_state, reward, done = lake.step(action)
            total_reward += reward
            agent.update_q_value(state, action, reward, next_state)
            state = next_state
            steps += 1
            if done:
                success = lake.tile(state) == GOAL
        agent.decay_epsilon()
        stats.add_episode(total_reward, steps, success)
        out.write(
            f"Episode {episode} - Success Rate: {stats.success_rate():g}"
            f" - Avg Reward: {stats.avg_reward():g}\n"
        )
    return stats


def format_policy(policy: Sequence[int], rows: int, cols: int) -> str:
    """The greedy policy as a grid of L/D/R/U letters."""
    return "".join(
        "".join(f"{_POLICY_LETTERS.get(policy[row * cols + col], 'L')} " for col in range(cols))
        + "\n"
        for row in range(rows)
    )


def format_lake(lake: FrozenLake) -> str:
    """The lake's tiles as a grid of characters."""
    return "".join("".join(f"{tile} " for tile in row) + "\n" for row in lake.grid)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frostlearn", description=__doc__)
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--cols", type=int, default=8)
    parser.add_argument("--slip", type=float, default=0.15, help="slip probability")
    parser.add_argument("--holes", type=float, default=0.25, help="fraction of holes")
    parser.add_argument("--episodes", type=int, default=1000)
    parser.add_argument("--learning-rate", type=float, default=0.1)
    parser.add_argument("--discount", type=float, default=0.9)
    parser.add_argument("--epsilon", type=float, default=0.15)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)
    rng = random.Random(args.seed)
    out = sys.stdout

    try:
        lake = FrozenLake(args.rows, args.cols, args.slip, args.holes, rng)
    except ValueError as error:
        print(f"frostlearn: {error}", file=sys.stderr)
        return 1

    agent = QLearningAgent(
        lake.state_count,
        lake.action_count,
        args.learning_rate,
        args.discount,
        args.epsilon,
        rng,
    )
    stats = train(lake, agent, args.episodes, out)

    out.write(stats.plot_success_rate_ascii())
    out.write(stats.plot_avg_reward_ascii())
    out.write("Lake:\n")
    out.write(format_lake(lake))
    out.write("Policy:\n")
    out.write(format_policy(agent.policy(), args.rows, args.cols))
    return 0


if __name__ == "__main__":
    sys.exit(main())