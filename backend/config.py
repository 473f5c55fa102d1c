import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
SHARED_DIR = os.path.join(BASE_DIR, 'shared')


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///' + os.path.join(BASE_DIR, 'quiz.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Passcode of the game created on first startup
    DEFAULT_PASSCODE = os.environ.get('DEFAULT_PASSCODE', '0000')
    # Question definitions and category list: override file wins when it exists
    QUESTIONS_CONFIG_PATH = os.environ.get('QUESTIONS_CONFIG_PATH') or os.path.join(SHARED_DIR, 'config.json')
    QUESTIONS_CONFIG_DEFAULT_PATH = os.path.join(SHARED_DIR, 'config.default.json')
    CATEGORIES_CONFIG_PATH = os.environ.get('CATEGORIES_CONFIG_PATH') or os.path.join(SHARED_DIR, 'categories.json')
    CATEGORIES_CONFIG_DEFAULT_PATH = os.path.join(SHARED_DIR, 'categories.default.json')
    # Comma-separated list, '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Create/upgrade tables and seed the first game when the app is built
    INIT_DB_ON_STARTUP = _env_flag('INIT_DB_ON_STARTUP', True)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
