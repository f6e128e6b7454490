from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from movie_rental.services.rental_service import RentalService
from movie_rental.utils.responses import json_ok, json_from_exception
from movie_rental.utils.serializers import rental_to_dict
from movie_rental.utils.validation import require_int, require_object

return_bp = Blueprint("returns", __name__)


@return_bp.post("/")
@jwt_required()
def return_rental():
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        customer_id = require_int(data, "customer_id", 1)
        movie_id = require_int(data, "movie_id", 1)
        rental = RentalService.return_rental(customer_id, movie_id)
        return json_ok(rental_to_dict(rental))
    except ValueError as e:
        return json_from_exception(e)
