from functools import wraps
from flask import request

STUDENT = "stud"


def with_user_type(fn):
    """
    Reads the `user-type` header and exposes the caller's view on the request:
    request.user_type holds the raw value, request.is_student is True only
    for the student sentinel.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user_type = request.headers.get("user-type", "").strip()
        request.user_type = user_type
        request.is_student = user_type == STUDENT
        return fn(*args, **kwargs)
    return wrapper
