from movie_rental.errors import NotFound
from movie_rental.models.genre import Genre
from movie_rental.repositories.genre_repo import GenreRepo
from movie_rental.utils.validation import require_str


class GenreService:
    @staticmethod
    def list_genres():
        return GenreRepo.list_all()

    @staticmethod
    def get_genre(genre_id: int):
        genre = GenreRepo.get(genre_id)
        if not genre:
            raise NotFound("genre")
        return genre

    @staticmethod
    def create_genre(data: dict):
        genre = Genre(name=require_str(data, "name", 5, 50))
        return GenreRepo.create(genre)

    @staticmethod
    def update_genre(genre_id: int, data: dict):
        genre = GenreService.get_genre(genre_id)
        if "name" in data:
            genre.name = require_str(data, "name", 5, 50)
        GenreRepo.update()
        return genre

    @staticmethod
    def delete_genre(genre_id: int):
        genre = GenreService.get_genre(genre_id)
        GenreRepo.delete(genre)
        return genre
