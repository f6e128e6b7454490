from functools import wraps
from flask_jwt_extended import verify_jwt_in_request, get_jwt
from flask import current_app

from movie_rental.utils.responses import json_error

def role_required(*roles):
    """
    JWT must be present; its "role" claim must be one of `roles`.
    With REQUIRES_AUTH off only the token is checked.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            if not current_app.config.get("REQUIRES_AUTH", True):
                return fn(*args, **kwargs)
            role = get_jwt().get("role")
            if role not in roles:
                current_app.logger.warning(f"[auth] role={role} denied, needs one of {roles}")
                return json_error(
                    "Access Denied. You do not have permission to perform this operation.",
                    403,
                    kind="FORBIDDEN",
                )
            return fn(*args, **kwargs)
        return wrapper
    return decorator
