"""Static quiz configuration: question definitions and the category list.

A ``QuizConfig`` is built once by the app factory and handed to whatever
needs it. Each document lives at an override path or, when that file does
not exist, at a default path. A document that cannot be loaded leaves the
configuration empty instead of failing the app.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, List, Optional


DEFAULT_QUESTION_CONFIG = {
    'allowUserPoints': True,
    'defaultPoints': 0,
    'allowChangePoints': True,
}


def resolve_path(override_path: Optional[str], default_path: Optional[str]) -> Optional[str]:
    if override_path and os.path.exists(override_path):
        return override_path
    return default_path


def _read_json(path, logger):
    if not path:
        return None
    try:
        with open(path, encoding='utf-8') as fh:
            return json.load(fh)
    except (OSError, ValueError) as exc:
        logger.error(f"[config] failed to load {path}: {exc}")
        return None


def _normalize_categories(data) -> List[Dict[str, str]]:
    if isinstance(data, dict):
        data = data.get('categories')
    if not isinstance(data, list):
        return []
    categories = []
    for item in data:
        if not isinstance(item, dict):
            continue
        label = item.get('label')
        icon = item.get('icon')
        categories.append({
            'label': label if isinstance(label, str) else '',
            'icon': icon if isinstance(icon, str) else '',
        })
    return categories


class QuizConfig:

    def __init__(self, questions: Optional[Dict[str, Any]] = None, categories=None,
                 questions_paths=(None, None), categories_paths=(None, None), logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.questions_paths = questions_paths
        self.categories_paths = categories_paths
        self._data: Dict[str, Any] = {'questions': questions} if questions is not None else {}
        self._categories = _normalize_categories(categories)

    @classmethod
    def from_app_config(cls, config, logger=None) -> 'QuizConfig':
        quiz_config = cls(
            questions_paths=(config.get('QUESTIONS_CONFIG_PATH'), config.get('QUESTIONS_CONFIG_DEFAULT_PATH')),
            categories_paths=(config.get('CATEGORIES_CONFIG_PATH'), config.get('CATEGORIES_CONFIG_DEFAULT_PATH')),
            logger=logger,
        )
        quiz_config.reload()
        return quiz_config

    def reload(self) -> None:
        """Re-read both documents from disk. The only place config changes."""
        questions_path = resolve_path(*self.questions_paths)
        data = _read_json(questions_path, self.logger)
        self._data = data if isinstance(data, dict) else {}
        if questions_path:
            self.logger.info(f"[config] loaded {self.max_questions} questions from {questions_path}")

        categories_path = resolve_path(*self.categories_paths)
        self._categories = _normalize_categories(_read_json(categories_path, self.logger))

    @property
    def questions(self) -> Dict[str, Any]:
        questions = self._data.get('questions')
        return questions if isinstance(questions, dict) else {}

    @property
    def max_questions(self) -> int:
        return len(self.questions)

    @property
    def categories(self) -> List[Dict[str, str]]:
        return [dict(item) for item in self._categories]

    def question(self, number) -> Dict[str, Any]:
        entry = self.questions.get(str(number))
        if not isinstance(entry, dict):
            return dict(DEFAULT_QUESTION_CONFIG)
        return copy.deepcopy(entry)

    def allowed_points(self, number) -> List[float]:
        allowed = self.question(number).get('allowedPoints')
        if not isinstance(allowed, list):
            return []
        return [p for p in allowed if isinstance(p, (int, float)) and not isinstance(p, bool)]

    def round_of(self, number) -> Optional[int]:
        value = self.question(number).get('round')
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value

    def questions_in_round(self, round_number) -> List[int]:
        numbers = []
        for key in self.questions:
            try:
                number = int(key)
            except ValueError:
                continue
            if self.round_of(number) == round_number:
                numbers.append(number)
        return sorted(numbers)
