from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from movie_rental.services.customer_service import CustomerService
from movie_rental.utils.decorators import role_required
from movie_rental.utils.responses import json_ok, json_from_exception
from movie_rental.utils.validation import require_object
from movie_rental.utils.serializers import customer_to_dict

customer_bp = Blueprint("customers", __name__)


@customer_bp.get("/")
def list_customers():
    return json_ok([customer_to_dict(c) for c in CustomerService.list_customers()])


@customer_bp.get("/<int:customer_id>")
def get_customer(customer_id: int):
    try:
        return json_ok(customer_to_dict(CustomerService.get_customer(customer_id)))
    except ValueError as e:
        return json_from_exception(e)


@customer_bp.post("/")
@jwt_required()
def create_customer():
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        return json_ok(customer_to_dict(CustomerService.create_customer(data)), 201)
    except ValueError as e:
        return json_from_exception(e)


@customer_bp.patch("/<int:customer_id>")
@jwt_required()
def update_customer(customer_id: int):
    data = request.get_json(silent=True) or {}
    try:
        require_object(data)
        return json_ok(customer_to_dict(CustomerService.update_customer(customer_id, data)))
    except ValueError as e:
        return json_from_exception(e)


@customer_bp.delete("/<int:customer_id>")
@jwt_required()
@role_required("admin")
def delete_customer(customer_id: int):
    try:
        return json_ok(customer_to_dict(CustomerService.delete_customer(customer_id)))
    except ValueError as e:
        return json_from_exception(e)
