"""Progress module - coaching hints and achievements derived from log history.

This module provides:
- Progressive-overload suggestions
- Personal-record detection
- The badge catalog and its evaluation engine
- Streak, weekly activity and volume views
"""

from fitgenius.progress.achievements import (
    ACHIEVEMENT_CATALOG,
    ACHIEVEMENT_IDS,
    Achievement,
    AchievementRule,
    evaluate_achievements,
)
from fitgenius.progress.activity import daily_volume, group_logs_by_date
from fitgenius.progress.overload import OverloadSuggestion, history_for_exercise, suggest_overload
from fitgenius.progress.records import PersonalRecordResult, best_weight, detect_personal_record
from fitgenius.progress.streaks import current_streak, log_streak, weekly_activity

__all__ = [
    "ACHIEVEMENT_CATALOG",
    "ACHIEVEMENT_IDS",
    "Achievement",
    "AchievementRule",
    "OverloadSuggestion",
    "PersonalRecordResult",
    "best_weight",
    "current_streak",
    "daily_volume",
    "detect_personal_record",
    "evaluate_achievements",
    "group_logs_by_date",
    "history_for_exercise",
    "log_streak",
    "suggest_overload",
    "weekly_activity",
]
