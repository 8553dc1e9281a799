from fitgenius.stores.interfaces import AchievementStore, KeyValueStore, LogStore
from fitgenius.stores.keyvalue import (
    ACHIEVEMENTS_KEY,
    LOGS_KEY,
    DictKeyValueStore,
    KeyValueAchievementStore,
    KeyValueLogStore,
)
from fitgenius.stores.memory import InMemoryAchievementStore, InMemoryLogStore

__all__ = [
    "ACHIEVEMENTS_KEY",
    "LOGS_KEY",
    "AchievementStore",
    "DictKeyValueStore",
    "InMemoryAchievementStore",
    "InMemoryLogStore",
    "KeyValueAchievementStore",
    "KeyValueLogStore",
    "KeyValueStore",
    "LogStore",
]
