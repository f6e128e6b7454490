from flask import jsonify

from movie_rental.errors import RentalError


def json_ok(data, code=200):
    return jsonify({"success": True, "data": data}), code


def json_error(message, code=400, *, kind="BAD_REQUEST"):
    return jsonify({"success": False, "code": kind, "message": message}), code


def json_from_exception(e: Exception):
    if isinstance(e, RentalError):
        return json_error(str(e), e.status_code, kind=e.code)
    return json_error(str(e), 400)
