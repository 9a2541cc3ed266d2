# frostlearn

A small reinforcement-learning playground. A tabular Q-learning agent learns to cross a randomly generated, slippery Frozen Lake grid.

## The lake

The grid is made of four kinds of tile:

- `S` is the start, at the top-left corner.
- `F` is frozen ice, which is safe to stand on.
- `H` is a hole. Stepping into one ends the episode with a reward of -1.
- `G` is the goal, at the bottom-right corner. Reaching it ends the episode with a reward of +1.

Every other step costs -0.01.

The holes are placed at random. A layout is only accepted if a breadth-first search finds a path from the start to the goal. A move slips with the slip probability, and the agent then goes in a random direction instead of the one it chose. A move into the edge of the grid leaves the agent where it is.

There are four actions, also available as `frostlearn.frozen_lake.Action`:

| Action | Meaning |
|--------|---------|
| 0 | left |
| 1 | down |
| 2 | right |
| 3 | up |

## Installing

```
pip install .
```

## Running

```
frostlearn
```

By default this runs 1000 training episodes on an 8×8 lake, with a slip probability of 0.15 and 25% holes. While the lake is being generated it logs each attempt. After every episode it prints the success rate and the average reward over the last 50 episodes. When training ends it prints:

- ASCII plots of the rolling success rate and the rolling average reward,
- the lake,
- the learned greedy policy, written as `L`, `D`, `R` and `U` for each tile.

The options are:

| Option | Default | Meaning |
|--------|---------|---------|
| `--rows` | 8 | rows of the lake |
| `--cols` | 8 | columns of the lake |
| `--slip` | 0.15 | slip probability |
| `--holes` | 0.25 | fraction of holes |
| `--episodes` | 1000 | training episodes |
| `--learning-rate` | 0.1 | Q-learning step size |
| `--discount` | 0.9 | discount factor |
| `--epsilon` | 0.15 | initial exploration rate |
| `--seed` | none | seed for the random generator, for repeatable runs |

If the hole fraction leaves no possible path to the goal, or the lake has no rows or no columns, the command prints an error and exits with status 1.

## Using it as a library

```python
import random

from frostlearn.agent import QLearningAgent
from frostlearn.cli import format_lake, format_policy, train
from frostlearn.frozen_lake import FrozenLake

rng = random.Random(42)
lake = FrozenLake(8, 8, 0.15, 0.25, rng)
agent = QLearningAgent(lake.state_count, lake.action_count, 0.1, 0.9, 0.15, rng)

stats = train(lake, agent, 500)
print(stats.success_rate(50), stats.avg_reward(50))
print(format_lake(lake))
print(format_policy(agent.policy(), 8, 8))
```

`train` writes one progress line per episode to `out`, which defaults to standard output, and returns the `TrainingStats`.

### `frostlearn.frozen_lake`

- `FrozenLake(rows, cols, slip_probability, hole_percentage, rng=None)` generates the lake. It raises `ValueError` for an empty grid, for a negative hole percentage, or when the hole percentage leaves no path.
- `state_count` and `action_count` are properties.
- `reset()` puts the agent on the start cell and returns state 0.
- `step(action)` returns a `StepResult(state, reward, done)` named tuple. It raises `ValueError` for an action outside 0–3.
- `tile(state)` gives the character at a state. `is_done()` says whether the agent is on the goal or in a hole.
- `render()` returns the grid as text, with `A` after the agent's tile.
- `path_exists(grid, cols, start, goal)` is the breadth-first search used to check layouts.

### `frostlearn.agent`

- `QLearningAgent.choose_action(state)` picks an action epsilon-greedily. Ties go to the lowest action.
- `update_q_value(state, action, reward, next_state)` applies the Q-learning update.
- `decay_epsilon()` multiplies epsilon by 0.995, down to a floor of 0.01.
- `policy()` returns the greedy action for every state.
- The Q-values are in `q_table`.

### `frostlearn.stats`

`TrainingStats` records the reward, length and success of each episode.

- `success_rate(window=50)` and `avg_reward(window=50)` average over the last `window` episodes.
- `success_rate_at_episode(episode, window=50)` averages over the window ending just before `episode`.
- These methods raise `ValueError` when no episodes are recorded or the window does not fit.
- `plot_success_rate_ascii(width=50, height=20)` and `plot_avg_reward_ascii(width=50, height=20)` return the ASCII charts as strings. The charts show 100-episode rolling means, taken every 10 episodes.

## What it does not do

Everything is text on standard output. There are no graphical plots, and learned Q-tables are not saved to disk.