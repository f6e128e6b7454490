from movie_rental.errors import InvalidState, NotFound, ReferenceNotFound
from movie_rental.models.movie import Movie
from movie_rental.repositories.genre_repo import GenreRepo
from movie_rental.repositories.movie_repo import MovieRepo
from movie_rental.repositories.unit_of_work import UnitOfWork
from movie_rental.utils.validation import require_decimal, require_int, require_str


class MovieService:
    @staticmethod
    def list_movies():
        return MovieRepo.list_all()

    @staticmethod
    def get_movie(movie_id: int):
        movie = MovieRepo.get(movie_id)
        if not movie:
            raise NotFound("movie")
        return movie

    @staticmethod
    def _validated(data: dict) -> dict:
        genre_id = require_int(data, "genre_id")
        genre = GenreRepo.get(genre_id)
        if not genre:
            raise ReferenceNotFound("genre", genre_id)

        return {
            "title": require_str(data, "title", 1, 255),
            "genre_id": genre.id,
            "genre_name": genre.name,
            "number_in_stock": require_int(data, "number_in_stock", 0, 255),
            "daily_rental_rate": require_decimal(data, "daily_rental_rate", 0, 255),
        }

    @staticmethod
    def create_movie(data: dict):
        movie = Movie(**MovieService._validated(data))
        return MovieRepo.create(movie)

    @staticmethod
    def update_movie(movie_id: int, data: dict):
        movie = MovieService.get_movie(movie_id)
        values = MovieService._validated(data)
        number_in_stock = values.pop("number_in_stock")
        expected = movie.number_in_stock

        with UnitOfWork() as uow:
            for k, v in values.items():
                setattr(movie, k, v)
            # stock is written as a compare-and-set so a rental committed
            # after the read above is not overwritten
            if number_in_stock != expected and not MovieRepo.set_stock(
                movie.id, expected, number_in_stock, uow
            ):
                raise InvalidState("Stock changed while editing, reload the movie and retry")
        return movie

    @staticmethod
    def delete_movie(movie_id: int):
        movie = MovieService.get_movie(movie_id)
        MovieRepo.delete(movie)
        return movie
