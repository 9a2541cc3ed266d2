"""Per-episode training statistics and ASCII plots of their rolling averages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

_ROLLING_WINDOW = 100
_ROLLING_STRIDE = 10


def _rolling_means(values: Sequence[float]) -> list[float]:
    return [
        sum(values[end - _ROLLING_WINDOW:end]) / _ROLLING_WINDOW
        for end in range(_ROLLING_WINDOW, len(values) + 1, _ROLLING_STRIDE)
    ]


def _plot(title: str, values: Sequence[float], width: int, height: int) -> str:
    if not values:
        return ""
    parts = [f"\n=== {title} ===\n"]
    points = _rolling_means(values)
    if not points:
        return parts[0]
    if height < 2:
        raise ValueError("plot height must be at least 2")

    for row in range(height - 1, -1, -1):
        y_value = row / (height - 1)
        if row == height - 1:
            label = "1.0|"
        elif row == 0:
            label = "0.0|"
        else:
            label = "   |"
        cells = "".join(
            "*" if abs(points[col * len(points) // width] - y_value) < 0.05 else " "
            for col in range(min(width, len(points)))
        )
        parts.append(label + cells + "\n")

    parts.append("   +" + "-" * width + "\n")
    parts.append(f"   Episodes: 0 -> {len(values)}\n\n")
    return "".join(parts)


@dataclass
class TrainingStats:
    """Rewards, lengths and outcomes of the episodes run so far."""

    episode_rewards: list[float] = field(default_factory=list)
    episode_lengths: list[int] = field(default_factory=list)
    episode_success: list[bool] = field(default_factory=list)

    def add_episode(self, reward: float, steps: int, success: bool) -> None:
        """Record one finished episode."""
        self.episode_rewards.append(reward)
        self.episode_lengths.append(steps)
        self.episode_success.append(success)

    def _window_size(self, window: int) -> int:
        if window < 1:
            raise ValueError("window must be positive")
        size = min(window, len(self.episode_success))
        if size == 0:
            raise ValueError("no episodes recorded")
        return size

    def success_rate(self, window: int = 50) -> float:
        """Fraction of successes among the last `window` episodes."""
        size = self._window_size(window)
        return sum(self.episode_success[-size:]) / size

    def avg_reward(self, window: int = 50) -> float:
        """Mean reward over the last `window` episodes."""
        size = self._window_size(window)
        return sum(self.episode_rewards[-size:]) / size

    def success_rate_at_episode(self, episode: int, window: int = 50) -> float:
        """Success fraction over the window ending just before `episode`."""
        size = self._window_size(window)
        if not size <= episode <= len(self.episode_success):
            raise ValueError(f"episode {episode} has no full window of {size} before it")
        return sum(self.episode_success[episode - size:episode]) / size

    def plot_success_rate_ascii(self, width: int = 50, height: int = 20) -> str:
        """ASCII chart of the rolling success rate."""
        return _plot("Success Rate Over Time", self.episode_success, width, height)

    def plot_avg_reward_ascii(self, width: int = 50, height: int = 20) -> str:
        """ASCII chart of the rolling average reward."""
        return _plot("Average Reward Over Time", self.episode_rewards, width, height)