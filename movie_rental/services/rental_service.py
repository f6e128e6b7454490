from flask import current_app

from movie_rental.errors import InvalidState, NotFound, ReferenceNotFound
from movie_rental.models.rental import Rental
from movie_rental.repositories.customer_repo import CustomerRepo
from movie_rental.repositories.movie_repo import MovieRepo
from movie_rental.repositories.rental_repo import RentalRepo
from movie_rental.repositories.unit_of_work import UnitOfWork
from movie_rental.services.fee_calculator import calculate_rental_fee
from movie_rental.utils import clock


class RentalService:
    @staticmethod
    def list_rentals():
        return RentalRepo.list_all()

    @staticmethod
    def get_rental(rental_id: int):
        rental = RentalRepo.get(rental_id)
        if not rental:
            raise NotFound("rental")
        return rental

    @staticmethod
    def create_rental(customer_id: int, movie_id: int):
        customer = CustomerRepo.get(customer_id)
        if not customer:
            raise ReferenceNotFound("customer", customer_id)

        movie = MovieRepo.get(movie_id)
        if not movie:
            raise ReferenceNotFound("movie", movie_id)

        if movie.number_in_stock is None or movie.number_in_stock < 1:
            current_app.logger.warning(f"[rental] movie={movie_id} not in stock")
            raise InvalidState("Movie not in stock")

        rental = Rental.open_for(customer, movie, date_out=clock.utcnow())

        # stock first, then the rental row; both commit together or not at all
        with UnitOfWork() as uow:
            if not MovieRepo.adjust_stock(movie_id, -1, uow):
                # someone took the last copy between our read and this update
                current_app.logger.warning(f"[rental] movie={movie_id} exhausted concurrently")
                raise InvalidState("Movie not in stock")
            RentalRepo.insert(rental, uow)

        current_app.logger.info(
            f"[rental] created rental={rental.id} customer={customer_id} movie={movie_id}"
        )
        return rental

    @staticmethod
    def return_rental(customer_id: int, movie_id: int):
        rental = RentalRepo.find_for_return(customer_id, movie_id)
        if not rental:
            raise NotFound("rental")

        if not rental.is_open:
            raise InvalidState("Return already processed")

        date_returned = clock.utcnow()
        rental_fee = calculate_rental_fee(
            rental.date_out, date_returned, rental.movie_daily_rental_rate
        )
        rental_id = rental.id
        snapshot_movie_id = rental.movie_id

        with UnitOfWork() as uow:
            if not RentalRepo.close(rental, date_returned, rental_fee, uow):
                current_app.logger.warning(f"[return] rental={rental_id} closed concurrently")
                raise InvalidState("Return already processed")
            if not MovieRepo.adjust_stock(snapshot_movie_id, 1, uow):
                raise ReferenceNotFound("movie", snapshot_movie_id)

        # rows were updated with SQL statements; reload the closed state
        rental = RentalRepo.get(rental_id)
        current_app.logger.info(
            f"[return] closed rental={rental_id} fee={rental_fee} movie={snapshot_movie_id}"
        )
        return rental
