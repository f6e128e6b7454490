from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from movie_rental.services.rental_service import RentalService
from movie_rental.utils.responses import json_ok, json_from_exception
from movie_rental.utils.serializers import rental_to_dict
from movie_rental.utils.validation import require_int, require_object

rental_bp = Blueprint("rentals", __name__)


@rental_bp.get("/")
def list_rentals():
    rentals = RentalService.list_rentals()
    return json_ok([rental_to_dict(r) for r in rentals])


@rental_bp.get("/<int:rental_id>")
def get_rental(rental_id: int):
    try:
        return json_ok(rental_to_dict(RentalService.get_rental(rental_id)))
    except ValueError as e:
        return json_from_exception(e)


@rental_bp.post("/")
@jwt_required()
def create_rental():
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        customer_id = require_int(data, "customer_id", 1)
        movie_id = require_int(data, "movie_id", 1)
        rental = RentalService.create_rental(customer_id, movie_id)
        return json_ok(rental_to_dict(rental), 201)
    except ValueError as e:
        return json_from_exception(e)
