"""Frozen-lake grid world with slippery ice and randomly placed holes."""

from __future__ import annotations

import logging
import random
from collections import deque
from enum import IntEnum
from typing import NamedTuple, Sequence

logger = logging.getLogger(__name__)

START = "S"
FROZEN = "F"
HOLE = "H"
GOAL = "G"


class Action(IntEnum):
    """Moves available to the agent."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 3


class StepResult(NamedTuple):
    """Outcome of one move: the new state, its reward and whether the episode ended."""

    state: int
    reward: float
    done: bool


def path_exists(grid: Sequence[Sequence[str]], cols: int, start: int, goal: int) -> bool:
    """Breadth-first search over flat indices, treating holes as walls.

    Neighbours are index offsets (-1, +cols, +1, -cols) bounded only by the
    total cell count, so a horizontal step may wrap onto the adjacent row.
    """
    total = len(grid) * cols
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            return True
        for offset in (-1, cols, 1, -cols):
            candidate = current + offset
            if (
                0 <= candidate < total
                and candidate not in visited
                and grid[candidate // cols][candidate % cols] != HOLE
            ):
                visited.add(candidate)
                queue.append(candidate)
    return False


class FrozenLake:
    """A rows x cols lake; the agent starts top-left and must reach the bottom-right goal."""

    def __init__(
        self,
        rows: int,
        cols: int,
        slip_probability: float,
        hole_percentage: float,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("the lake needs at least one row and one column")
        if hole_percentage < 0:
            raise ValueError("hole percentage must not be negative")
        self.rows = rows
        self.cols = cols
        self.slip_probability = slip_probability
        self.hole_percentage = hole_percentage
        self._rng = rng if rng is not None else random.Random()
        self.grid = self._generate()
        self.current_state = 0

    def _generate(self) -> list[list[str]]:
        total = self.rows * self.cols
        template = [[HOLE] * self.cols for _ in range(self.rows)]
        template[0][0] = START
        template[-1][-1] = GOAL
        target = total * self.hole_percentage
        goal = total - 1

        if total - 2 <= target and not path_exists(template, self.cols, 0, goal):
            raise ValueError("hole percentage leaves no path from start to goal")

        logger.info("Generating grid...")
        grid = [row[:] for row in template]
        attempts = 0
        while not path_exists(grid, self.cols, 0, goal):
            grid = [row[:] for row in template]
            attempts += 1
            logger.info("Attempt %d...", attempts)
            holes = total - 2
            while holes > target:
                row, col = divmod(self._rng.randint(0, total - 1), self.cols)
                if grid[row][col] == HOLE:
                    grid[row][col] = FROZEN
                    holes -= 1
        logger.info("Grid generated in %d attempts", attempts)
        return grid

    @property
    def state_count(self) -> int:
        """Number of cells in the lake."""
        return self.rows * self.cols

    @property
    def action_count(self) -> int:
        """Number of moves: left, down, right, up."""
        return len(Action)

    def reset(self) -> int:
        """Put the agent back on the start cell and return that state."""
        self.current_state = 0
        return self.current_state

    def step(self, action: int) -> StepResult:
        """Move the agent; with the slip probability the move is replaced by a random one."""
        try:
            move = Action(action)
        except ValueError:
            raise ValueError(f"Invalid action: {action}") from None

        if self._rng.random() < self.slip_probability:
            move = Action(self._rng.randint(0, 3))

        state = self.current_state
        row, col = divmod(state, self.cols)
        if move is Action.LEFT:
            next_state = state if col == 0 else state - 1
        elif move is Action.DOWN:
            next_state = state if row == self.rows - 1 else state + self.cols
        elif move is Action.RIGHT:
            next_state = state if col == self.cols - 1 else state + 1
        else:
            next_state = state if row == 0 else state - self.cols

        reward, done = -0.01, False
        tile = self.tile(next_state)
        if tile == HOLE:
            reward, done = -1.0, True
        elif tile == GOAL:
            reward, done = 1.0, True

        self.current_state = next_state
        return StepResult(next_state, reward, done)

    def render(self) -> str:
        """The grid as text, with 'A' marking the agent's cell."""
        agent_row, agent_col = divmod(self.current_state, self.cols)
        lines = []
        for i, row in enumerate(self.grid):
            cells = []
            for j, tile in enumerate(row):
                cell = tile + " "
                if (i, j) == (agent_row, agent_col):
                    cell += "A"
                cells.append(cell)
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def is_done(self) -> bool:
        """Whether the agent stands on the goal or in a hole."""
        return self.tile(self.current_state) in (GOAL, HOLE)

    def tile(self, state: int) -> str:
        """The tile character at a flat state index."""
        row, col = divmod(state, self.cols)
        return self.grid[row][col]