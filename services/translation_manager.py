# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from typing import Callable, List
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"


class TranslationManager:
    """Singleton Translation Manager (English / Simplified Chinese)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = DEFAULT_LANGUAGE
            cls._instance._translations = {}
            cls._instance._listeners: List[Callable] = []
            cls._instance._load_translations()
        return cls._instance

    def _load_translations(self):
        from services.translations.en import EN_TRANSLATIONS
        from services.translations.zh import ZH_TRANSLATIONS
        self._translations = {
            "en": EN_TRANSLATIONS,
            "zh": ZH_TRANSLATIONS,
        }

        from app.config import Config
        if Config.UI_LANGUAGE in self._translations:
            self._current_language = Config.UI_LANGUAGE

    def on_language_changed(self, callback: Callable):
        self._listeners.append(callback)

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"Unknown language '{lang_code}', falling back to {DEFAULT_LANGUAGE}")
            lang_code = DEFAULT_LANGUAGE
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")
            for callback in self._listeners:
                callback(lang_code)

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            translation = self._translations.get(DEFAULT_LANGUAGE, {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format translation '{key}' with {kwargs}")
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def on_language_changed(callback: Callable):
    _translator.on_language_changed(callback)
