from __future__ import annotations

from typing import Protocol

from fitgenius.progress.achievements import Achievement
from fitgenius.workouts.types import ExerciseLog

# -------------------------------------------------------------------
# Store Interfaces (Contract)
# -------------------------------------------------------------------


class LogStore(Protocol):
    """Append-only collection of completed-exercise logs."""

    def append_log(self, log: ExerciseLog) -> None: ...

    def read_all_logs(self) -> list[ExerciseLog]: ...

    def delete_log(self, log_id: str) -> bool: ...


class AchievementStore(Protocol):
    """Unlocked badges. Entries are only ever added."""

    def unlocked_badge_ids(self) -> set[str]: ...

    def persist_unlocked_badge(self, achievement: Achievement) -> None: ...

    def read_all(self) -> list[Achievement]: ...


class KeyValueStore(Protocol):
    """String key-value storage provided by the host (e.g. browser local storage)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...
