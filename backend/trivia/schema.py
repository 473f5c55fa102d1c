"""Startup schema bootstrap.

Creates missing tables and brings an older ``answer`` table up to date.
Safe to run on every start: columns are only added when absent, and the
legacy ``points`` value is copied into ``chosen_points`` only in the run
that adds that column.
"""

import sqlalchemy as sa
from flask import current_app

from trivia import db


ANSWER_COLUMNS = (
    ('bonus_answer', 'TEXT', None),
    ('chosen_points', 'FLOAT', '0'),
    ('awarded_points', 'FLOAT', '0'),
)


def upgrade_answer_table() -> None:
    insp = sa.inspect(db.engine)
    if 'answer' not in insp.get_table_names():
        return
    cols = {c['name'] for c in insp.get_columns('answer')}
    with db.engine.begin() as conn:
        for name, type_, default in ANSWER_COLUMNS:
            if name in cols:
                continue
            ddl = f"ALTER TABLE answer ADD COLUMN {name} {type_}"
            if default is not None:
                ddl += f" DEFAULT {default}"
            conn.execute(sa.text(ddl))
            current_app.logger.info(f"[schema] added answer.{name}")
            if name == 'chosen_points' and 'points' in cols:
                conn.execute(sa.text("UPDATE answer SET chosen_points = COALESCE(points, 0)"))
                current_app.logger.info("[schema] copied legacy answer.points into chosen_points")


def init_schema() -> None:
    """Create tables and apply column upgrades. Must run in an app context."""
    import trivia.models  # noqa: F401
    db.create_all()
    upgrade_answer_table()
