from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from movie_rental.repositories.user_repo import UserRepo
from movie_rental.services.auth_service import AuthService
from movie_rental.utils.responses import json_ok, json_error
from movie_rental.utils.validation import require_object
from movie_rental.utils.serializers import user_to_dict

user_bp = Blueprint("users", __name__)

@user_bp.post("/", endpoint="user_register")
def register():
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        # role is never taken from the request body
        user = AuthService.register(data, is_admin=False)
        return json_ok(user_to_dict(user), 201)
    except ValueError as e:
        return json_error(str(e), 400)


@user_bp.get("/me", endpoint="user_me")
@jwt_required()
def me():
    user = UserRepo.get_by_id(int(get_jwt_identity()))
    if not user:
        return json_error("User not found.", 404, kind="RESOURCE_NOT_FOUND")
    return json_ok(user_to_dict(user))
