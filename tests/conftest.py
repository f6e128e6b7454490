"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite schema. The app context stays pushed
for the whole test, so requests made through the test client share the
test's db.session.
"""
from decimal import Decimal

import pytest
from flask_jwt_extended import create_access_token

from movie_rental import create_app
from movie_rental.config import TestConfig
from movie_rental.extensions import db
from movie_rental.models.customer import Customer
from movie_rental.models.genre import Genre
from movie_rental.models.movie import Movie


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _headers(role):
    token = create_access_token(identity="1", additional_claims={"role": role, "name": "tester"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(app):
    return _headers("user")


@pytest.fixture
def admin_headers(app):
    return _headers("admin")


@pytest.fixture
def make_genre(app):
    def _make(name="action movies"):
        genre = Genre(name=name)
        db.session.add(genre)
        db.session.commit()
        return genre
    return _make


@pytest.fixture
def make_movie(app, make_genre):
    def _make(title="king kong", number_in_stock=2, daily_rental_rate=5, genre=None):
        genre = genre or make_genre()
        movie = Movie(
            title=title,
            genre_id=genre.id,
            genre_name=genre.name,
            number_in_stock=number_in_stock,
            daily_rental_rate=Decimal(str(daily_rental_rate)),
        )
        db.session.add(movie)
        db.session.commit()
        return movie
    return _make


@pytest.fixture
def make_customer(app):
    def _make(name="Mickey Mouse", phone="1234567891", is_gold=False):
        customer = Customer(name=name, phone=phone, is_gold=is_gold)
        db.session.add(customer)
        db.session.commit()
        return customer
    return _make


@pytest.fixture
def reload(app):
    """Fetch a row again, bypassing whatever the session already holds."""
    def _reload(model, pk):
        db.session.expire_all()
        return db.session.get(model, pk)
    return _reload
