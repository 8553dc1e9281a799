"""Localized user-facing phrases.

Announcements and coaching messages in every supported language. Templates
use str.format placeholders.
"""

from loguru import logger

from fitgenius.config.settings import Language

PHRASES: dict[str, dict[str, str]] = {
    "get_ready": {
        "en": "Get ready for {exercise}",
        "zh-TW": "準備開始：{exercise}",
    },
    "start": {
        "en": "Start {exercise}",
        "zh-TW": "開始：{exercise}",
    },
    "rest": {
        "en": "Rest",
        "zh-TW": "休息",
    },
    "rest_next_exercise": {
        "en": "Rest. Next exercise coming up.",
        "zh-TW": "休息。準備下一個動作",
    },
    "set_number": {
        "en": "Set {number}",
        "zh-TW": "第 {number} 組",
    },
    "workout_complete": {
        "en": "Workout complete! Great job.",
        "zh-TW": "訓練完成！太棒了",
    },
    "rest_complete": {
        "en": "Rest complete. Get ready.",
        "zh-TW": "休息結束，準備開始",
    },
    "overload": {
        "en": "Last time you lifted {weight}kg for {reps} reps. Try {newWeight}kg today!",
        "zh-TW": "上次你完成了 {weight}kg x {reps} 下，今天試試 {newWeight}kg！",
    },
    "personal_record": {
        "en": "New personal record for {exercise}!",
        "zh-TW": "{exercise} 創下個人新紀錄！",
    },
}


def phrase(key: str, language: Language = "en", **values: object) -> str:
    """Render a phrase in the given language.

    Unknown languages fall back to English.

    Raises:
        KeyError: If the phrase key does not exist
    """
    templates = PHRASES[key]
    template = templates.get(language)
    if template is None:
        logger.debug(f"No '{language}' phrase for '{key}', using English")
        template = templates["en"]
    return template.format(**values)
