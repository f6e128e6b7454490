from movie_rental.extensions import db
from movie_rental.utils.clock import utcnow


class Rental(db.Model):
    """
    A rental is a point-in-time record: the customer and movie columns are
    copied when the rental is created and are never re-synced with the
    customers/movies tables. That is why there are no foreign keys here.

    Open while date_returned is NULL; closed once date_returned and
    rental_fee are set.
    """
    __tablename__ = "rentals"
    __table_args__ = (
        db.Index("ix_rentals_customer_movie", "customer_id", "movie_id"),
    )

    id = db.Column(db.Integer, primary_key=True)

    customer_id = db.Column(db.Integer, nullable=False)
    customer_name = db.Column(db.String(50), nullable=False)
    customer_phone = db.Column(db.String(50), nullable=False)
    customer_is_gold = db.Column(db.Boolean, nullable=False, default=False)

    movie_id = db.Column(db.Integer, nullable=False)
    movie_title = db.Column(db.String(255), nullable=False)
    movie_daily_rental_rate = db.Column(db.Numeric(10, 2), nullable=False)

    date_out = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    date_returned = db.Column(db.DateTime, nullable=True)
    rental_fee = db.Column(db.Numeric(10, 2), nullable=True)

    @property
    def is_open(self) -> bool:
        return self.date_returned is None

    @classmethod
    def open_for(cls, customer, movie, date_out=None):
        return cls(
            customer_id=customer.id,
            customer_name=customer.name,
            customer_phone=customer.phone,
            customer_is_gold=bool(customer.is_gold),
            movie_id=movie.id,
            movie_title=movie.title,
            movie_daily_rental_rate=movie.daily_rental_rate,
            date_out=date_out or utcnow(),
        )
