"""Tabular Q-learning agent with an epsilon-greedy policy."""

from __future__ import annotations

import random
from typing import Sequence


def _argmax(values: Sequence[float]) -> int:
    """Index of the first largest value."""
    return max(range(len(values)), key=values.__getitem__)


class QLearningAgent:
    """Learns Q-values for a discrete state/action space."""

    def __init__(
        self,
        state_count: int,
        action_count: int,
        learning_rate: float,
        discount_factor: float,
        epsilon: float,
        rng: random.Random | None = None,
    ) -> None:
        self.state_count = state_count
        self.action_count = action_count
        self.learning_rate = learning_rate
        self.discount_factor = discount_factor
        self.epsilon = epsilon
        self._rng = rng if rng is not None else random.Random()
        self.q_table = [[0.0] * action_count for _ in range(state_count)]

    def choose_action(self, state: int) -> int:
        """Explore with probability epsilon, otherwise take the best known action."""
        if self._rng.random() < self.epsilon:
            return self._rng.randrange(self.action_count)
        return _argmax(self.q_table[state])

    def update_q_value(self, state: int, action: int, reward: float, next_state: int) -> None:
        """Apply the Q-learning update for one transition."""
        old = self.q_table[state][action]
        best_future = max(self.q_table[next_state])
        self.q_table[state][action] = old + self.learning_rate * (
            reward + self.discount_factor * best_future - old
        )

    def decay_epsilon(self) -> None:
        """Shrink the exploration rate, never below 0.01."""
        self.epsilon = max(0.01, self.epsilon * 0.995)

    def policy(self) -> list[int]:
        """The greedy action for every state."""
        return [_argmax(row) for row in self.q_table]