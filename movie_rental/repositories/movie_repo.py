from sqlalchemy import update

from movie_rental.models.movie import Movie
from movie_rental.extensions import db


class MovieRepo:
    @staticmethod
    def list_all():
        return Movie.query.order_by(Movie.title).all()

    @staticmethod
    def get(movie_id: int):
        return db.session.get(Movie, movie_id)

    @staticmethod
    def create(movie: Movie):
        db.session.add(movie)
        db.session.commit()
        return movie

    @staticmethod
    def delete(movie: Movie):
        db.session.delete(movie)
        db.session.commit()

    @staticmethod
    def adjust_stock(movie_id: int, delta: int, uow) -> bool:
        """
        Applies `delta` to number_in_stock as a single SQL update, inside `uow`.
        The WHERE clause keeps the count from going negative, so two requests
        racing for the last copy cannot both succeed. Returns False when no
        row matched (movie missing or not enough stock).
        """
        stmt = (
            update(Movie)
            .where(Movie.id == movie_id, Movie.number_in_stock + delta >= 0)
            .values(number_in_stock=Movie.number_in_stock + delta)
            .execution_options(synchronize_session=False)
        )
        result = uow.session.execute(stmt)
        return result.rowcount == 1

    @staticmethod
    def set_stock(movie_id: int, expected: int, number_in_stock: int, uow) -> bool:
        # only applies if nobody rented or returned since `expected` was read
        stmt = (
            update(Movie)
            .where(Movie.id == movie_id, Movie.number_in_stock == expected)
            .values(number_in_stock=number_in_stock)
            .execution_options(synchronize_session=False)
        )
        result = uow.session.execute(stmt)
        return result.rowcount == 1
