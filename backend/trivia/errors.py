"""Domain errors raised by the services and mapped to HTTP responses.

Views never build error responses for these by hand: the app factory
registers a single handler that turns any ``TriviaError`` into
``{"error": message}`` with the matching status code.
"""


class TriviaError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(TriviaError):
    status_code = 400


class AuthError(TriviaError):
    status_code = 401


class ConflictError(TriviaError):
    status_code = 409
