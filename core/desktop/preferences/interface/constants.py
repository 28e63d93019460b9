"""Interface-level constants for the preferences CLI/TUI."""

from typing import Dict

from core.desktop.preferences.application.editor_session import MESSAGES as EDITOR_MESSAGES
from core.desktop.preferences.application.host_loop import MESSAGES as HOST_MESSAGES

APP_TITLE = "Preferences"
ENV_TTIMEOUTLEN = "PREFS_EDITOR_TUI_TTIMEOUTLEN"

LANG_PACK: Dict[str, Dict[str, str]] = {
    "en": {
        # Well-known sections/entries
        "Preferences": "Preferences",
        "Preferences.General": "General",
        "Preferences.General.Theme": "Theme",
        "Preferences.General.Language": "Language",
        "Preferences.HotKeys": "Hot Keys",
        "Preferences.HotKeys.Exit": "Exit application",
        "Preferences.HotKeys.OpenPreferences": "Open preferences",
        "Preferences.HotKeys.ShowHotKeys": "Show hot keys",
        # Editor and hotkey overview strings live with the code that shows them
        **EDITOR_MESSAGES,
        **HOST_MESSAGES,
        "HOTKEYS_DUPLICATE": "{chord} is bound to several entries: {names}",
        # Screen
        "SCREEN_TITLE": "Preferences Sample Application",
        "SCREEN_READY": "Ready",
        "SCREEN_HINT": "Press {chord} to {action}",
        "SCREEN_NO_HOTKEYS": "No hot keys configured. Press Ctrl+C to quit.",
        "SCREEN_STATUS": "Sample application for the preferences library",
        "PROMPT_PRESS_ANY_KEY": "Press any key to return...",
        "CHOICE_HINT": "↑/↓ move · Enter select · Esc back",
        # CLI
        "CLI_SAVED": "Saved {entry} = {value} to {path}",
        "CLI_UNCHANGED": "{entry} already set to {value}",
        "CLI_UNKNOWN_SECTION": "Unknown section: {section}",
        "CLI_UNKNOWN_ENTRY": "Unknown entry: {entry}",
        "CLI_INVALID_VALUE": "'{value}' is not allowed for {entry}; choose one of: {options}",
        "CLI_LANG_SET": "Language set to {language}",
        "CLI_LANG_UNKNOWN": "Unknown language '{language}'; available: {available}",
    },
    "ru": {
        "Preferences": "Настройки",
        "Preferences.General": "Общие",
        "Preferences.General.Theme": "Тема",
        "Preferences.General.Language": "Язык",
        "Preferences.HotKeys": "Горячие клавиши",
        "Preferences.HotKeys.Exit": "Выход из приложения",
        "Preferences.HotKeys.OpenPreferences": "Открыть настройки",
        "Preferences.HotKeys.ShowHotKeys": "Показать горячие клавиши",
        "EDITOR_TITLE": "Редактор настроек",
        "EDITOR_SECTION_TITLE": "Редактор настроек - {section}",
        "EDITOR_SELECT_SECTION_HINT": "Выберите раздел",
        "EDITOR_SECTION_PROMPT": "Раздел настроек:",
        "EDITOR_SAVE_AND_EXIT": "💾 Сохранить и выйти",
        "EDITOR_CANCEL_DISCARD": "❌ Отмена (сбросить изменения)",
        "EDITOR_EXIT": "← Выход",
        "EDITOR_SELECT_ENTRY_HINT": "Выберите параметр",
        "EDITOR_ENTRY_PROMPT": "Параметр для изменения:",
        "EDITOR_BACK": "← Назад к разделам",
        "EDITOR_EDITING": "Изменение: {entry}",
        "EDITOR_CURRENT_VALUE": "Текущее значение: {value}",
        "EDITOR_AVAILABLE_OPTIONS": "Допустимые значения: {options}",
        "EDITOR_SELECT_VALUE": "Новое значение для '{entry}':",
        "EDITOR_ENTER_VALUE": "Введите значение для '{entry}':",
        "EDITOR_CANCEL": "← Отмена",
        "EDITOR_UPDATED": "'{entry}': '{old}' → '{new}'",
        "EDITOR_NO_CHANGES": "Без изменений.",
        "EDITOR_SAVED": "Изменения сохранены.",
        "EDITOR_SAVE_FAILED": "Не удалось сохранить настройки: {error}",
        "EDITOR_DISCARDED": "Изменения отменены.",
        "EDITOR_NO_SECTIONS": "Разделы настроек не найдены.",
        "EDITOR_NO_ENTRIES": "В разделе нет параметров.",
        "EDITOR_UNSAVED": "Есть несохранённые изменения: сохраните или отмените их.",
        "EDITOR_PROMPT_FAILED": "Ошибка ввода: {error}",
        "EDITOR_INPUT_LOST": "Ввод недоступен, редактор закрыт без сохранения.",
        "TABLE_SETTING": "Параметр",
        "TABLE_VALUE": "Значение",
        "TABLE_OPTIONS": "Варианты",
        "TABLE_ANY_VALUE": "[любое значение]",
        "HOTKEYS_TITLE": "Горячие клавиши",
        "HOTKEYS_SHORTCUT": "Сочетание",
        "HOTKEYS_ACTION": "Действие",
        "HOTKEYS_NONE": "Горячие клавиши не настроены",
        "HOTKEYS_DUPLICATE": "{chord} назначено нескольким параметрам: {names}",
        "SCREEN_READY": "Готово",
        "SCREEN_HINT": "{chord} — {action}",
        "SCREEN_NO_HOTKEYS": "Горячие клавиши не настроены. Ctrl+C — выход.",
        "PROMPT_PRESS_ANY_KEY": "Нажмите любую клавишу...",
        "CHOICE_HINT": "↑/↓ выбор · Enter подтвердить · Esc назад",
        "CLI_SAVED": "{entry} = {value} сохранено в {path}",
        "CLI_UNCHANGED": "{entry} уже равно {value}",
        "CLI_UNKNOWN_SECTION": "Неизвестный раздел: {section}",
        "CLI_UNKNOWN_ENTRY": "Неизвестный параметр: {entry}",
        "CLI_INVALID_VALUE": "'{value}' недопустимо для {entry}; варианты: {options}",
        "CLI_LANG_SET": "Язык: {language}",
        "CLI_LANG_UNKNOWN": "Неизвестный язык '{language}'; доступны: {available}",
    },
}
