from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from movie_rental.services.movie_service import MovieService
from movie_rental.utils.decorators import role_required
from movie_rental.utils.responses import json_ok, json_from_exception
from movie_rental.utils.validation import require_object
from movie_rental.utils.serializers import movie_to_dict

movie_bp = Blueprint("movies", __name__)


@movie_bp.get("/")
def list_movies():
    return json_ok([movie_to_dict(m) for m in MovieService.list_movies()])


@movie_bp.get("/<int:movie_id>")
def get_movie(movie_id: int):
    try:
        return json_ok(movie_to_dict(MovieService.get_movie(movie_id)))
    except ValueError as e:
        return json_from_exception(e)


@movie_bp.post("/")
@jwt_required()
def create_movie():
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        return json_ok(movie_to_dict(MovieService.create_movie(data)), 201)
    except ValueError as e:
        return json_from_exception(e)


@movie_bp.put("/<int:movie_id>")
@jwt_required()
def update_movie(movie_id: int):
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        return json_ok(movie_to_dict(MovieService.update_movie(movie_id, data)))
    except ValueError as e:
        return json_from_exception(e)


@movie_bp.delete("/<int:movie_id>")
@jwt_required()
@role_required("admin")
def delete_movie(movie_id: int):
    try:
        return json_ok(movie_to_dict(MovieService.delete_movie(movie_id)))
    except ValueError as e:
        return json_from_exception(e)
