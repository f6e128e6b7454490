from flask import Blueprint, request
from movie_rental.services.auth_service import AuthService
from movie_rental.utils.responses import json_ok, json_error
from movie_rental.utils.validation import require_object

auth_bp = Blueprint("auth", __name__)

@auth_bp.post("/", endpoint="auth_login")
def login():
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        token, user = AuthService.login(data)
        return json_ok({
            "message": "Logged in successfully",
            "access_token": token,
            "user": {"id": user.id, "name": user.name, "role": user.role}
        })
    except ValueError as e:
        return json_error(str(e), 400)
