from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from movie_rental.services.genre_service import GenreService
from movie_rental.utils.decorators import role_required
from movie_rental.utils.responses import json_ok, json_from_exception
from movie_rental.utils.validation import require_object
from movie_rental.utils.serializers import genre_to_dict

genre_bp = Blueprint("genres", __name__)


@genre_bp.get("/")
def list_genres():
    return json_ok([genre_to_dict(g) for g in GenreService.list_genres()])


@genre_bp.get("/<int:genre_id>")
def get_genre(genre_id: int):
    try:
        return json_ok(genre_to_dict(GenreService.get_genre(genre_id)))
    except ValueError as e:
        return json_from_exception(e)


@genre_bp.post("/")
@jwt_required()
def create_genre():
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        return json_ok(genre_to_dict(GenreService.create_genre(data)), 201)
    except ValueError as e:
        return json_from_exception(e)


@genre_bp.patch("/<int:genre_id>")
@jwt_required()
def update_genre(genre_id: int):
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        return json_ok(genre_to_dict(GenreService.update_genre(genre_id, data)))
    except ValueError as e:
        return json_from_exception(e)


@genre_bp.delete("/<int:genre_id>")
@jwt_required()
@role_required("admin")
def delete_genre(genre_id: int):
    try:
        return json_ok(genre_to_dict(GenreService.delete_genre(genre_id)))
    except ValueError as e:
        return json_from_exception(e)
