"""In-process stores.

Used by tests and by hosts that persist state themselves after each call.
"""

from loguru import logger

from fitgenius.errors import DuplicateLogError
from fitgenius.progress.achievements import Achievement
from fitgenius.workouts.types import ExerciseLog


class InMemoryLogStore:
    def __init__(self, logs: list[ExerciseLog] | None = None) -> None:
        self._logs: list[ExerciseLog] = []
        for log in logs or []:
            self.append_log(log)

    def append_log(self, log: ExerciseLog) -> None:
        if any(existing.id == log.id for existing in self._logs):
            raise DuplicateLogError(log.id)
        self._logs.append(log)
        logger.debug("[LOG_STORE] Appended log", log_id=log.id, exercise=log.exercise_name)

    def read_all_logs(self) -> list[ExerciseLog]:
        return list(self._logs)

    def delete_log(self, log_id: str) -> bool:
        before = len(self._logs)
        self._logs = [log for log in self._logs if log.id != log_id]
        deleted = len(self._logs) < before
        if deleted:
            logger.info("[LOG_STORE] Deleted log", log_id=log_id)
        return deleted


class InMemoryAchievementStore:
    def __init__(self, achievements: list[Achievement] | None = None) -> None:
        self._achievements: dict[str, Achievement] = {}
        for achievement in achievements or []:
            self.persist_unlocked_badge(achievement)

    def unlocked_badge_ids(self) -> set[str]:
        return set(self._achievements)

    def persist_unlocked_badge(self, achievement: Achievement) -> None:
        # First unlock wins; a badge is never re-stamped
        if achievement.id in self._achievements:
            return
        self._achievements[achievement.id] = achievement

    def read_all(self) -> list[Achievement]:
        return list(self._achievements.values())
