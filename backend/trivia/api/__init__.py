from flask import current_app, request


def get_json_body():
    """Request JSON as a dict; anything else counts as an empty body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def get_quiz_config():
    return current_app.extensions['quiz_config']
