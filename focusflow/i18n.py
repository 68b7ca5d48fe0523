"""Message catalogs and translator lookup.

Keys are dotted paths (``phases.practice``). A translator falls back to
the English catalog and then to the key itself, so a missing entry shows
up as its key instead of failing.
"""

from collections.abc import Callable
from typing import Literal

Language = Literal["en", "zh"]

DEFAULT_LANGUAGE: Language = "en"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "phases.knowledge": "Knowledge",
        "phases.practice": "Practice",
        "phases.application": "Application",
        "phases.reflection": "Reflection",
        "phases.output": "Output",
        "phases.review": "Review",
        "difficulty.easy": "Easy",
        "difficulty.medium": "Medium",
        "difficulty.hard": "Hard",
        "addTask.error": "Error",
        "addTask.invalidDuration": "Please enter a valid duration in minutes",
        "addTask.deleteSubtask": "Delete Subtask",
        "addTask.deleteSubtaskConfirm": "Are you sure you want to delete this subtask?",
        "common.cancel": "Cancel",
        "common.delete": "Delete",
        "common.minutes": "minutes",
    },
    "zh": {
        "phases.knowledge": "知識",
        "phases.practice": "練習",
        "phases.application": "應用",
        "phases.reflection": "反思",
        "phases.output": "輸出",
        "phases.review": "複習",
        "difficulty.easy": "簡單",
        "difficulty.medium": "中等",
        "difficulty.hard": "困難",
        "addTask.error": "錯誤",
        "addTask.invalidDuration": "請輸入有效的時長（分鐘）",
        "addTask.deleteSubtask": "刪除子任務",
        "addTask.deleteSubtaskConfirm": "確定要刪除這個子任務嗎？",
        "common.cancel": "取消",
        "common.delete": "刪除",
        "common.minutes": "分鐘",
    },
}


def get_translator(language: str = DEFAULT_LANGUAGE) -> Callable[[str], str]:
    """Build a ``key -> text`` lookup for a language.

    Unknown languages use the English catalog.
    """
    primary = CATALOGS.get(language, CATALOGS[DEFAULT_LANGUAGE])
    fallback = CATALOGS[DEFAULT_LANGUAGE]

    def translate(key: str) -> str:
        if key in primary:
            return primary[key]
        return fallback.get(key, key)

    return translate
