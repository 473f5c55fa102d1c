from typing import Any, Dict

from flask import current_app

from trivia import db
from trivia.models import QuestionCategory
from trivia.quiz_config import QuizConfig


def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ''


def get_question_category(number: int, quiz_config: QuizConfig) -> Dict[str, str]:
    """Category and icon for a question; a stored override beats the config file."""
    override = db.session.get(QuestionCategory, number)
    if override:
        return {'category': override.category or '', 'icon': override.icon or ''}
    cfg = quiz_config.question(number)
    return {'category': _clean(cfg.get('category')), 'icon': _clean(cfg.get('icon'))}


def question_details(number: int, quiz_config: QuizConfig) -> Dict[str, Any]:
    details = quiz_config.question(number)
    category = get_question_category(number, quiz_config)
    if category['category'] or category['icon']:
        details.update(category)
    return details


def set_question_category(number: int, category, icon) -> None:
    category = _clean(category)
    icon = _clean(icon)
    row = db.session.get(QuestionCategory, number)
    try:
        if not category and not icon:
            if row:
                db.session.delete(row)
        elif row:
            row.category = category
            row.icon = icon
        else:
            db.session.add(QuestionCategory(question_number=number, category=category, icon=icon))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(f"[category] question={number} category={category!r} icon={icon!r}")
