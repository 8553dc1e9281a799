"""Stores backed by a host key-value storage.

Each collection lives under one key as a JSON list, mirroring how the
application keeps its state in local storage:
- Logs under LOGS_KEY
- Unlocked achievements under ACHIEVEMENTS_KEY

Every mutation rewrites the whole list; reads decode it fresh so that other
writers of the same storage are picked up.
"""

from pydantic import TypeAdapter, ValidationError

from fitgenius.errors import DuplicateLogError, StoreCorruptedError
from fitgenius.progress.achievements import Achievement
from fitgenius.stores.interfaces import KeyValueStore
from fitgenius.workouts.types import ExerciseLog

LOGS_KEY = "fitgenius_logs"
ACHIEVEMENTS_KEY = "fitgenius_achievements"

_logs_adapter = TypeAdapter(list[ExerciseLog])
_achievements_adapter = TypeAdapter(list[Achievement])


class DictKeyValueStore:
    """Key-value storage held in a plain dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


def _decode(storage: KeyValueStore, key: str, adapter: TypeAdapter) -> list:
    raw = storage.get(key)
    if not raw:
        return []
    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        raise StoreCorruptedError(key, e) from e


class KeyValueLogStore:
    def __init__(self, storage: KeyValueStore, key: str = LOGS_KEY) -> None:
        self._storage = storage
        self._key = key

    def _write(self, logs: list[ExerciseLog]) -> None:
        self._storage.set(self._key, _logs_adapter.dump_json(logs).decode())

    def append_log(self, log: ExerciseLog) -> None:
        logs = self.read_all_logs()
        if any(existing.id == log.id for existing in logs):
            raise DuplicateLogError(log.id)
        logs.append(log)
        self._write(logs)

    def read_all_logs(self) -> list[ExerciseLog]:
        return _decode(self._storage, self._key, _logs_adapter)

    def delete_log(self, log_id: str) -> bool:
        logs = self.read_all_logs()
        remaining = [log for log in logs if log.id != log_id]
        if len(remaining) == len(logs):
            return False
        self._write(remaining)
        return True


class KeyValueAchievementStore:
    def __init__(self, storage: KeyValueStore, key: str = ACHIEVEMENTS_KEY) -> None:
        self._storage = storage
        self._key = key

    def unlocked_badge_ids(self) -> set[str]:
        return {achievement.id for achievement in self.read_all()}

    def persist_unlocked_badge(self, achievement: Achievement) -> None:
        achievements = self.read_all()
        if any(existing.id == achievement.id for existing in achievements):
            return
        achievements.append(achievement)
        self._storage.set(self._key, _achievements_adapter.dump_json(achievements).decode())

    def read_all(self) -> list[Achievement]:
        return _decode(self._storage, self._key, _achievements_adapter)
