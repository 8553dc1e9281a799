"""Achievement engine.

Badges are a fixed, ordered catalog of predicates over the whole exercise-log
history. Evaluation is always a full recomputation; the only memory between
runs is the set of ids already unlocked, which are skipped without running
their predicate. Badges are only ever granted, never revoked.

Titles, descriptions and icons belong to the presentation layer and are keyed
by badge id there.
"""

import re
from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from loguru import logger
from pydantic import BaseModel, ConfigDict

from fitgenius.progress.streaks import log_streak
from fitgenius.utils.timezone import local_date, local_hour, to_local
from fitgenius.workouts.types import ExerciseLog

CENTURION_LOG_COUNT = 100
EARLY_BIRD_HOURS = range(5, 8)
NIGHT_OWL_START_HOUR = 22
NIGHT_OWL_END_HOUR = 2
MARATHON_DAILY_MINUTES = 90
SQUAT_MASTER_REPS = 1000
IRON_CHEST_REPS = 500
TON_CLUB_VOLUME_KG = 10000
CONSISTENCY_STREAK_DAYS = 7

SQUAT_PATTERN = re.compile(r"squat|leg press|lunge")
CHEST_PATTERN = re.compile(r"bench|press|push[- ]?up|fly|pec")


class Achievement(BaseModel):
    """An unlocked badge."""

    model_config = ConfigDict(frozen=True)

    id: str
    unlocked_at: datetime


@dataclass(frozen=True)
class EvaluationContext:
    now: datetime
    tz: ZoneInfo

    @property
    def today(self) -> date:
        return local_date(self.now, self.tz)


@dataclass(frozen=True)
class AchievementRule:
    """Catalog entry: badge id and the predicate that unlocks it."""

    id: str
    predicate: Callable[[Sequence[ExerciseLog], EvaluationContext], bool]


def _total_reps(logs: Iterable[ExerciseLog], pattern: re.Pattern[str]) -> int:
    return sum(log.sets * log.reps for log in logs if pattern.search(log.exercise_name.lower()))


def _has_first_step(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    return len(logs) > 0


def _is_centurion(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    return len(logs) >= CENTURION_LOG_COUNT


def _is_early_bird(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    return any(local_hour(log.timestamp, ctx.tz) in EARLY_BIRD_HOURS for log in logs)


def _is_night_owl(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    for log in logs:
        hour = local_hour(log.timestamp, ctx.tz)
        if hour >= NIGHT_OWL_START_HOUR or hour < NIGHT_OWL_END_HOUR:
            return True
    return False


def _is_marathon(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    minutes_by_date: dict[date, float] = defaultdict(float)
    for log in logs:
        minutes_by_date[log.calendar_date] += log.duration_minutes
    return any(total >= MARATHON_DAILY_MINUTES for total in minutes_by_date.values())


def _is_squat_master(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    return _total_reps(logs, SQUAT_PATTERN) >= SQUAT_MASTER_REPS


def _is_iron_chest(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    return _total_reps(logs, CHEST_PATTERN) >= IRON_CHEST_REPS


def _is_ton_club(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    return sum(log.sets * log.reps * log.weight for log in logs) >= TON_CLUB_VOLUME_KG


def _is_consistency_king(logs: Sequence[ExerciseLog], ctx: EvaluationContext) -> bool:
    return log_streak(logs, ctx.today) >= CONSISTENCY_STREAK_DAYS


ACHIEVEMENT_CATALOG: tuple[AchievementRule, ...] = (
    AchievementRule("first_step", _has_first_step),
    AchievementRule("centurion", _is_centurion),
    AchievementRule("early_bird", _is_early_bird),
    AchievementRule("night_owl", _is_night_owl),
    AchievementRule("marathon", _is_marathon),
    AchievementRule("squat_master", _is_squat_master),
    AchievementRule("iron_chest", _is_iron_chest),
    AchievementRule("ton_club", _is_ton_club),
    AchievementRule("consistency_king", _is_consistency_king),
)

ACHIEVEMENT_IDS: tuple[str, ...] = tuple(rule.id for rule in ACHIEVEMENT_CATALOG)


def evaluate_achievements(
    history: Iterable[ExerciseLog],
    unlocked_ids: Iterable[str],
    *,
    now: datetime | None = None,
    tz: ZoneInfo | None = None,
) -> list[Achievement]:
    """Return badges that newly qualify against the full history.

    Args:
        history: Every stored exercise log, in any order
        unlocked_ids: Ids already unlocked; their predicates are not evaluated
        now: Evaluation time, stamped on every returned badge
        tz: Zone for hour-of-day and "today"; defaults to the zone of `now`, else UTC

    Returns:
        Newly unlocked achievements in catalog order
    """
    logs = list(history)
    if not logs:
        return []

    if tz is None:
        tz = now.tzinfo if now is not None and isinstance(now.tzinfo, ZoneInfo) else ZoneInfo("UTC")
    now = to_local(now, tz) if now is not None else datetime.now(tz)
    ctx = EvaluationContext(now=now, tz=tz)
    already = set(unlocked_ids)

    unlocked: list[Achievement] = []
    for rule in ACHIEVEMENT_CATALOG:
        if rule.id in already:
            continue
        if rule.predicate(logs, ctx):
            unlocked.append(Achievement(id=rule.id, unlocked_at=now))

    if unlocked:
        logger.info(
            "[ACHIEVEMENTS] Unlocked badges",
            badge_ids=[achievement.id for achievement in unlocked],
            log_count=len(logs),
        )
    return unlocked
