"""
Schedule statistics.

Pure aggregation over Schedule values. Absent `sets` count as 0.
"""

from domain.models import DayPlan, DayStats, Schedule, WeekProgress, WeekStats

# Goals behind the summary progress bars
WEEKLY_MINUTES_GOAL = 420
WEEKLY_SETS_GOAL = 80
DAILY_MINUTES_GOAL = 90

DAYS_PER_WEEK = 7


def _ratio(value: int, goal: int) -> float:
    return min(1.0, max(0.0, value / goal))


def day_stats(day: DayPlan) -> DayStats:
    """Sum planned minutes and sets for one day."""
    return DayStats(
        total_duration=sum(plan.duration for plan in day.workouts),
        total_sets=sum(plan.sets or 0 for plan in day.workouts),
    )


def week_stats(schedule: Schedule) -> WeekStats:
    """Sum day totals across the week and count planned sessions."""
    minutes = sets = sessions = 0
    for day in schedule.days:
        stats = day_stats(day)
        minutes += stats.total_duration
        sets += stats.total_sets
        sessions += day.session_count
    return WeekStats(minutes=minutes, sets=sets, sessions=sessions)


def week_progress(stats: WeekStats) -> WeekProgress:
    """
    Express week totals against the weekly goals.

    recovery_days is the number of days left without a session, never
    reported below 1.
    """
    return WeekProgress(
        minutes_ratio=_ratio(stats.minutes, WEEKLY_MINUTES_GOAL),
        sets_ratio=_ratio(stats.sets, WEEKLY_SETS_GOAL),
        recovery_days=min(DAYS_PER_WEEK, max(1, DAYS_PER_WEEK - stats.sessions)),
    )


def day_load(day: DayPlan) -> float:
    """Planned minutes of the day over the daily goal, clamped to [0, 1]."""
    return _ratio(day_stats(day).total_duration, DAILY_MINUTES_GOAL)
