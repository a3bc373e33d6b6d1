"""Decorators for the auth blueprint."""

from functools import wraps

from flask import jsonify, session


def login_required(f=None):
    """Reject the request with a 401 if the user is not logged in.

    Usage:
    @login_required
    def protected_view():
        ...
    """

    def decorator(func):
        @wraps(func)
        def decorated_function(*args, **kwargs):
            if "user_id" not in session:
                return (
                    jsonify({"status": "error", "message": "Please log in first."}),
                    401,
                )
            return func(*args, **kwargs)

        return decorated_function

    if f:
        return decorator(f)
    return decorator
