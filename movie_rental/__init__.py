from flask import Flask, jsonify, request
from movie_rental.config import Config
from movie_rental.extensions import db, migrate, jwt
from movie_rental.errors import RentalError
from movie_rental.utils.responses import json_error, json_from_exception


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # 1) db init first (db.session needs it)
    db.init_app(app)

    # 2) models must be imported before create_all / migrations see them
    from movie_rental.models import genre, movie, customer, user, rental  # noqa: F401

    # 3) other extensions
    migrate.init_app(app, db)
    jwt.init_app(app)
    _register_jwt_errors()

    # 4) API blueprints
    from movie_rental.controllers.auth_controller import auth_bp
    from movie_rental.controllers.user_controller import user_bp
    from movie_rental.controllers.genre_controller import genre_bp
    from movie_rental.controllers.movie_controller import movie_bp
    from movie_rental.controllers.customer_controller import customer_bp
    from movie_rental.controllers.rental_controller import rental_bp
    from movie_rental.controllers.return_controller import return_bp

    prefix = app.config.get("API_PREFIX", "/api/v1").rstrip("/")
    app.register_blueprint(auth_bp, url_prefix=f"{prefix}/auth")
    app.register_blueprint(user_bp, url_prefix=f"{prefix}/users")
    app.register_blueprint(genre_bp, url_prefix=f"{prefix}/genres")
    app.register_blueprint(movie_bp, url_prefix=f"{prefix}/movies")
    app.register_blueprint(customer_bp, url_prefix=f"{prefix}/customers")
    app.register_blueprint(rental_bp, url_prefix=f"{prefix}/rentals")
    app.register_blueprint(return_bp, url_prefix=f"{prefix}/returns")

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    @app.before_request
    def _log_request():
        app.logger.debug(f"[request] {request.method} {request.path}")

    @app.errorhandler(404)
    def _route_not_found(_e):
        return json_error("Route does not exist", 404, kind="ROUTE_NOT_FOUND")

    @app.errorhandler(RentalError)
    def _rental_error(e):
        # TransactionFailure (and anything a controller did not map) ends up here
        if e.status_code >= 500:
            app.logger.error(f"[app] {e.code}: {e}")
        return json_from_exception(e)

    return app


def _register_jwt_errors():
    # same envelope as every other error instead of the library's {"msg": ...}
    @jwt.unauthorized_loader
    def _missing_token(reason):
        return json_error("Access denied. No token provided.", 401, kind="UNAUTHORIZED")

    @jwt.invalid_token_loader
    def _invalid_token(reason):
        return json_error("Invalid token.", 400, kind="INVALID_TOKEN")

    @jwt.expired_token_loader
    def _expired_token(jwt_header, jwt_payload):
        return json_error("Invalid token.", 400, kind="INVALID_TOKEN")
