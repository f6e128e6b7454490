from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from movie_rental.errors import TransactionFailure
from movie_rental.extensions import db


class UnitOfWork:
    """
    Groups the writes of one workflow operation (rental row + movie stock)
    on the request-scoped session.

        with UnitOfWork() as uow:
            MovieRepo.adjust_stock(movie_id, -1, uow)
            RentalRepo.insert(rental, uow)

    Leaving the block normally commits. Any exception rolls everything back
    and is re-raised; store errors (SQLAlchemyError) are re-raised as
    TransactionFailure so callers never see a half-applied operation.
    """

    def __init__(self, session=None):
        self.session = session if session is not None else db.session
        self._finished = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.commit()
            return False

        self.rollback()
        if isinstance(exc, SQLAlchemyError):
            current_app.logger.exception(f"[uow] rolled back after store error: {exc}")
            raise TransactionFailure() from exc
        return False

    def commit(self):
        if self._finished:
            return
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            current_app.logger.exception(f"[uow] commit failed, rolled back: {e}")
            raise TransactionFailure() from e
        finally:
            self._finished = True

    def rollback(self):
        if self._finished:
            return
        self.session.rollback()
        self._finished = True
