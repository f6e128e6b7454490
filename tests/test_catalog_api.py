import pytest
from sqlalchemy.orm.attributes import set_committed_value

from movie_rental.errors import InvalidState
from movie_rental.extensions import db
from movie_rental.models.customer import Customer
from movie_rental.models.genre import Genre
from movie_rental.models.movie import Movie
from movie_rental.services.movie_service import MovieService
from movie_rental.services.rental_service import RentalService

API = "/api/v1"


# -----------------------------
# Genres
# -----------------------------
def test_genres_listed_by_name(client, make_genre):
    make_genre("thriller")
    make_genre("action movies")

    res = client.get(f"{API}/genres/")

    assert res.status_code == 200
    assert [g["name"] for g in res.get_json()["data"]] == ["action movies", "thriller"]


def test_create_genre_validates_name_length(client, auth_headers):
    res = client.post(f"{API}/genres/", json={"name": "abc"}, headers=auth_headers)

    assert res.status_code == 400
    assert "at least 5" in res.get_json()["message"]


def test_create_update_delete_genre(client, auth_headers, admin_headers, reload):
    created = client.post(f"{API}/genres/", json={"name": "  comedy  "}, headers=auth_headers)
    assert created.status_code == 201
    genre_id = created.get_json()["data"]["id"]
    assert created.get_json()["data"]["name"] == "comedy"

    updated = client.patch(f"{API}/genres/{genre_id}", json={"name": "romcom"}, headers=auth_headers)
    assert updated.status_code == 200
    assert reload(Genre, genre_id).name == "romcom"

    deleted = client.delete(f"{API}/genres/{genre_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert reload(Genre, genre_id) is None


def test_get_unknown_genre_is_404(client):
    res = client.get(f"{API}/genres/404")

    assert res.status_code == 404
    assert res.get_json()["message"] == "Genre not found."


def test_delete_requires_admin_role(client, auth_headers, make_genre):
    genre = make_genre()

    res = client.delete(f"{API}/genres/{genre.id}", headers=auth_headers)

    assert res.status_code == 403
    assert res.get_json()["code"] == "FORBIDDEN"


def test_delete_allowed_for_any_user_when_auth_not_required(app, client, auth_headers, make_genre):
    app.config["REQUIRES_AUTH"] = False
    genre = make_genre()

    res = client.delete(f"{API}/genres/{genre.id}", headers=auth_headers)

    assert res.status_code == 200


# -----------------------------
# Movies
# -----------------------------
def test_create_movie_snapshots_genre(client, auth_headers, make_genre, reload):
    genre = make_genre("science fiction")

    res = client.post(f"{API}/movies/", json={
        "title": "alien",
        "genre_id": genre.id,
        "number_in_stock": 4,
        "daily_rental_rate": 2.5,
    }, headers=auth_headers)

    assert res.status_code == 201
    data = res.get_json()["data"]
    assert data["genre"] == {"id": genre.id, "name": "science fiction"}
    assert data["daily_rental_rate"] == 2.5
    assert reload(Movie, data["id"]).number_in_stock == 4


def test_create_movie_with_unknown_genre(client, auth_headers):
    res = client.post(f"{API}/movies/", json={
        "title": "alien", "genre_id": 55, "number_in_stock": 1, "daily_rental_rate": 1,
    }, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["message"] == "Invalid genre_id = 55"


def test_create_movie_rejects_negative_stock(client, auth_headers, make_genre):
    genre = make_genre()

    res = client.post(f"{API}/movies/", json={
        "title": "alien", "genre_id": genre.id, "number_in_stock": -1, "daily_rental_rate": 1,
    }, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["message"] == '"number_in_stock" must be greater than or equal to 0'


def test_update_and_delete_movie(client, auth_headers, admin_headers, make_movie, make_genre, reload):
    movie = make_movie()
    drama = make_genre("drama movies")

    res = client.put(f"{API}/movies/{movie.id}", json={
        "title": "king kong 2", "genre_id": drama.id, "number_in_stock": 9, "daily_rental_rate": 3,
    }, headers=auth_headers)

    assert res.status_code == 200
    stored = reload(Movie, movie.id)
    assert stored.title == "king kong 2"
    assert stored.genre_name == "drama movies"
    assert stored.number_in_stock == 9

    assert client.delete(f"{API}/movies/{movie.id}", headers=admin_headers).status_code == 200
    assert client.get(f"{API}/movies/{movie.id}").status_code == 404


# -----------------------------
# Customers
# -----------------------------
def test_create_and_patch_customer(client, auth_headers, reload):
    created = client.post(f"{API}/customers/", json={
        "name": "Minnie Mouse", "phone": "5550001111",
    }, headers=auth_headers)
    assert created.status_code == 201
    data = created.get_json()["data"]
    assert data["is_gold"] is False

    res = client.patch(f"{API}/customers/{data['id']}", json={"is_gold": True}, headers=auth_headers)

    assert res.status_code == 200
    stored = reload(Customer, data["id"])
    assert stored.is_gold is True
    assert stored.name == "Minnie Mouse"


def test_create_customer_requires_phone(client, auth_headers):
    res = client.post(f"{API}/customers/", json={"name": "Minnie Mouse"}, headers=auth_headers)

    assert res.status_code == 400
    assert res.get_json()["message"] == '"phone" is required'


def test_customers_listed_by_name(client, make_customer):
    make_customer(name="Zorro Zed")
    make_customer(name="Alice Able")

    res = client.get(f"{API}/customers/")

    assert [c["name"] for c in res.get_json()["data"]] == ["Alice Able", "Zorro Zed"]


def test_write_routes_require_token(client):
    assert client.post(f"{API}/genres/", json={"name": "horror"}).status_code == 401
    assert client.post(f"{API}/movies/", json={}).status_code == 401
    assert client.post(f"{API}/customers/", json={}).status_code == 401


def test_customer_is_gold_accepts_boolean_strings(client, auth_headers, reload):
    created = client.post(f"{API}/customers/", json={
        "name": "Minnie Mouse", "phone": "5550001111", "is_gold": "false",
    }, headers=auth_headers)
    assert created.status_code == 201
    data = created.get_json()["data"]
    assert data["is_gold"] is False

    res = client.patch(f"{API}/customers/{data['id']}", json={"is_gold": "TRUE"}, headers=auth_headers)

    assert res.status_code == 200
    assert reload(Customer, data["id"]).is_gold is True


def test_customer_is_gold_rejects_other_values(client, auth_headers, make_customer, reload):
    res = client.post(f"{API}/customers/", json={
        "name": "Minnie Mouse", "phone": "5550001111", "is_gold": "yes",
    }, headers=auth_headers)
    assert res.status_code == 400
    assert res.get_json()["message"] == '"is_gold" must be a boolean'

    customer = make_customer()
    res = client.patch(f"{API}/customers/{customer.id}", json={"is_gold": 1}, headers=auth_headers)
    assert res.status_code == 400
    assert reload(Customer, customer.id).is_gold is False


def test_write_routes_reject_non_object_body(client, auth_headers):
    for path in ("genres/", "movies/", "customers/"):
        res = client.post(f"{API}/{path}", json="horror", headers=auth_headers)
        assert res.status_code == 400
        assert res.get_json()["message"] == '"value" must be an object'


def test_movie_update_does_not_overwrite_concurrent_rental(make_movie, make_customer, reload):
    movie = make_movie(number_in_stock=2)
    customer = make_customer()
    RentalService.create_rental(customer.id, movie.id)

    # the editor still holds the count it read before the rental committed
    db.session.refresh(movie)
    set_committed_value(movie, "number_in_stock", 2)

    with pytest.raises(InvalidState):
        MovieService.update_movie(movie.id, {
            "title": "king kong 2", "genre_id": movie.genre_id,
            "number_in_stock": 5, "daily_rental_rate": 5,
        })

    stored = reload(Movie, movie.id)
    assert stored.number_in_stock == 1
    assert stored.title == "king kong"


def test_movie_update_without_stock_change_keeps_count(make_movie, reload):
    movie = make_movie(number_in_stock=3)

    MovieService.update_movie(movie.id, {
        "title": "king kong 2", "genre_id": movie.genre_id,
        "number_in_stock": 3, "daily_rental_rate": 4,
    })

    stored = reload(Movie, movie.id)
    assert stored.title == "king kong 2"
    assert stored.number_in_stock == 3
