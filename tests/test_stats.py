import pytest

from frostlearn.stats import TrainingStats


def sample_stats():
    stats = TrainingStats()
    for reward, steps, success in [
        (1.0, 4, True),
        (-1.0, 2, False),
        (1.0, 6, True),
        (1.0, 5, True),
    ]:
        stats.add_episode(reward, steps, success)
    return stats


def test_add_episode_records_everything():
    stats = sample_stats()
    assert stats.episode_rewards == [1.0, -1.0, 1.0, 1.0]
    assert stats.episode_lengths == [4, 2, 6, 5]
    assert stats.episode_success == [True, False, True, True]


def test_success_rate_over_all_and_window():
    stats = sample_stats()
    assert stats.success_rate() == 0.75
    assert stats.success_rate(2) == 1.0


def test_avg_reward_over_all_and_window():
    stats = sample_stats()
    assert stats.avg_reward() == 0.5
    assert stats.avg_reward(2) == 1.0


def test_success_rate_at_episode():
    stats = sample_stats()
    assert stats.success_rate_at_episode(2, 2) == 0.5
    assert stats.success_rate_at_episode(4, 2) == 1.0


def test_success_rate_at_episode_out_of_range():
    stats = sample_stats()
    with pytest.raises(ValueError):
        stats.success_rate_at_episode(1, 2)
    with pytest.raises(ValueError):
        stats.success_rate_at_episode(5, 2)


def test_empty_stats_raise():
    stats = TrainingStats()
    with pytest.raises(ValueError):
        stats.success_rate()
    with pytest.raises(ValueError):
        stats.avg_reward()


def test_plots_empty_without_episodes():
    stats = TrainingStats()
    assert stats.plot_success_rate_ascii() == ""
    assert stats.plot_avg_reward_ascii() == ""


def test_plot_with_too_few_episodes_is_only_header():
    stats = sample_stats()
    assert stats.plot_success_rate_ascii() == "\n=== Success Rate Over Time ===\n"
    assert stats.plot_avg_reward_ascii() == "\n=== Average Reward Over Time ===\n"


def test_plot_success_rate_full_output():
    stats = TrainingStats()
    for _ in range(100):
        stats.add_episode(1.0, 3, True)
    expected = (
        "\n=== Success Rate Over Time ===\n"
        "1.0|*\n"
        "   | \n"
        "   | \n"
        "   | \n"
        "0.0| \n"
        "   +----------\n"
        "   Episodes: 0 -> 100\n\n"
    )
    assert stats.plot_success_rate_ascii(10, 5) == expected


def test_plot_avg_reward_zero_sits_on_bottom_row():
    stats = TrainingStats()
    for _ in range(120):
        stats.add_episode(0.0, 3, False)
    plot = stats.plot_avg_reward_ascii(10, 5)
    assert "0.0|***\n" in plot
    assert "1.0|   \n" in plot
    assert plot.endswith("   Episodes: 0 -> 120\n\n")