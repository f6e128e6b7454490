from movie_rental.models.genre import Genre
from movie_rental.extensions import db


class GenreRepo:
    @staticmethod
    def list_all():
        return Genre.query.order_by(Genre.name).all()

    @staticmethod
    def get(genre_id: int):
        return db.session.get(Genre, genre_id)

    @staticmethod
    def create(genre: Genre):
        db.session.add(genre)
        db.session.commit()
        return genre

    @staticmethod
    def update():
        db.session.commit()

    @staticmethod
    def delete(genre: Genre):
        db.session.delete(genre)
        db.session.commit()
