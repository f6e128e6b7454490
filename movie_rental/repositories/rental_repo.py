from datetime import datetime
from decimal import Decimal

from sqlalchemy import update

from movie_rental.models.rental import Rental
from movie_rental.extensions import db


class RentalRepo:
    @staticmethod
    def get(rental_id: int):
        return db.session.get(Rental, rental_id)

    @staticmethod
    def list_all():
        return Rental.query.order_by(Rental.date_out.desc(), Rental.id.desc()).all()

    @staticmethod
    def insert(rental: Rental, uow):
        uow.session.add(rental)
        uow.session.flush()  # id is needed before commit
        return rental

    @staticmethod
    def find_for_return(customer_id: int, movie_id: int):
        """
        Oldest open rental for the pair; if none is open, the latest closed
        one, so a second return of the same pair is reported as already
        processed rather than not found.
        """
        base = Rental.query.filter_by(customer_id=customer_id, movie_id=movie_id)

        open_rental = (
            base.filter(Rental.date_returned.is_(None))
            .order_by(Rental.date_out.asc(), Rental.id.asc())
            .first()
        )
        if open_rental:
            return open_rental

        return base.order_by(Rental.date_out.desc(), Rental.id.desc()).first()

    @staticmethod
    def close(rental: Rental, date_returned: datetime, rental_fee: Decimal, uow) -> bool:
        # only an open row can be closed; a concurrent return leaves rowcount == 0
        stmt = (
            update(Rental)
            .where(Rental.id == rental.id, Rental.date_returned.is_(None))
            .values(date_returned=date_returned, rental_fee=rental_fee)
            .execution_options(synchronize_session=False)
        )
        result = uow.session.execute(stmt)
        return result.rowcount == 1
