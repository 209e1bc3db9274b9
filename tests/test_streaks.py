import pytest

from bduo.model import StreakStats
from bduo.streaks import (
    compute_streaks,
    motivational_message,
    streak_marker,
    summarize_progress,
    widget_summary,
)


def test_no_completions():
    assert compute_streaks(set(), {}) == StreakStats(0, 0, 0)


def test_consecutive_days():
    stats = compute_streaks(
        {1, 2, 3},
        {1: "2024-01-01", 2: "2024-01-02", 3: "2024-01-03"},
    )
    assert stats == StreakStats(current_streak=3, longest_streak=3, total_completed=3)


def test_gap_resets_current_streak():
    stats = compute_streaks(
        {1, 2, 5},
        {1: "2024-01-01", 2: "2024-01-02", 5: "2024-01-10"},
    )
    assert stats.current_streak == 1
    assert stats.longest_streak == 2
    assert stats.total_completed == 3


def test_streak_in_the_past_keeps_its_length():
    stats = compute_streaks(
        {1, 2},
        {1: "2020-05-01", 2: "2020-05-02"},
        today="2024-06-01",
    )
    assert stats.current_streak == 2


def test_streak_across_month_and_leap_day():
    dates = {1: "2024-02-28", 2: "2024-02-29", 3: "2024-03-01", 4: "2024-03-02"}
    stats = compute_streaks(set(dates), dates)
    assert stats.current_streak == 4
    assert stats.longest_streak == 4


def test_streak_across_year_end():
    dates = {1: "2023-12-30", 2: "2023-12-31", 3: "2024-01-01"}
    assert compute_streaks(set(dates), dates).current_streak == 3


def test_same_day_completions_count_once():
    dates = {
        1: "2024-01-01",
        2: "2024-01-02",
        3: "2024-01-02",
        4: "2024-01-03",
    }
    stats = compute_streaks(set(dates), dates)
    assert stats.current_streak == 3
    assert stats.longest_streak == 3
    assert stats.total_completed == 4


def test_missing_date_counts_as_today():
    stats = compute_streaks(
        {1, 2, 3},
        {1: "2024-03-09", 2: "2024-03-10"},
        today="2024-03-11",
    )
    assert stats.current_streak == 3
    assert stats.longest_streak == 3


def test_missing_date_with_old_history():
    stats = compute_streaks({1, 2, 3}, {1: "2024-01-01", 2: "2024-01-02"}, today="2024-02-01")
    assert stats.current_streak == 1
    assert stats.longest_streak == 2


def test_longest_run_in_the_middle():
    dates = {
        1: "2024-01-01",
        2: "2024-01-03",
        3: "2024-01-04",
        4: "2024-01-05",
        5: "2024-01-06",
        6: "2024-01-09",
        7: "2024-01-10",
    }
    stats = compute_streaks(set(dates), dates)
    assert stats.current_streak == 2
    assert stats.longest_streak == 4


def test_invalid_date_is_ignored(capsys):
    dates = {1: "2024-01-01", 2: "yesterday", 3: "2024-01-02"}
    stats = compute_streaks(set(dates), dates)
    assert stats.current_streak == 2
    assert stats.total_completed == 3
    assert "invalid completion date" in capsys.readouterr().out


def test_inputs_are_not_mutated_and_results_repeat():
    days = {1, 2, 5}
    dates = {1: "2024-01-01", 2: "2024-01-02"}
    first = compute_streaks(days, dates, today="2024-01-10")
    second = compute_streaks(days, dates, today="2024-01-10")
    assert first == second
    assert days == {1, 2, 5}
    assert dates == {1: "2024-01-01", 2: "2024-01-02"}


def test_summarize_progress():
    dates = {1: "2024-01-01", 2: "2024-01-02", 3: "2024-01-03"}
    summary = summarize_progress(set(dates), dates, current_day=4, total_days=365)
    assert summary.completed == 3
    assert summary.completion_rate == 75
    assert summary.progress_percent == 1
    assert summary.days_remaining == 361
    assert summary.streaks.current_streak == 3


@pytest.mark.parametrize("current_day, total_days, rate, progress", [
    (8, 8, 13, 100),   # 1/8 = 12.5% rounds up
    (0, 10, 0, 0),
    (1, 0, 100, 0),
])
def test_summarize_progress_edges(current_day, total_days, rate, progress):
    summary = summarize_progress({1}, {1: "2024-01-01"}, current_day, total_days)
    assert summary.completion_rate == rate
    assert summary.progress_percent == progress
    assert summary.days_remaining == max(total_days - current_day, 0)


@pytest.mark.parametrize("streak, message", [
    (0, "Start your journey today! 📖"),
    (1, "Great start! Keep going! 🌟"),
    (2, "Building momentum! 💪"),
    (6, "Building momentum! 💪"),
    (7, "Amazing dedication! 🔥"),
    (29, "Amazing dedication! 🔥"),
    (30, "Unstoppable! 🚀"),
    (99, "Unstoppable! 🚀"),
    (100, "Legendary! You're incredible! 👑"),
])
def test_motivational_message_tiers(streak, message):
    assert motivational_message(streak) == message


@pytest.mark.parametrize("streak, marker", [
    (0, "📚"),
    (1, "🌟"),
    (2, "🌟"),
    (3, "🔥"),
    (7, "⚡"),
    (30, "🚀"),
    (100, "👑"),
    (365, "👑"),
])
def test_streak_marker_tiers(streak, marker):
    assert streak_marker(streak) == marker


def test_widget_uses_completed_over_plan_length():
    dates = {1: "2024-01-01", 2: "2024-01-02", 9: "2024-01-03"}
    widget = widget_summary(set(dates), dates, total_days=8)
    assert widget.plan_percent == 38   # 3/8 = 37.5% rounds up
    assert widget.streaks.current_streak == 3
    assert widget.marker == "🔥"
    assert widget.message == "Building momentum! 💪"


def test_widget_with_nothing_done():
    widget = widget_summary(set(), {}, total_days=0)
    assert widget.plan_percent == 0
    assert widget.message == "Start your journey today! 📖"
