from movie_rental.extensions import db


class Movie(db.Model):
    __tablename__ = "movies"
    __table_args__ = (
        db.CheckConstraint("number_in_stock >= 0", name="ck_movies_stock_non_negative"),
    )

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False, index=True)

    # genre is embedded, not referenced: renaming a genre later does not touch movies
    genre_id = db.Column(db.Integer, nullable=False, index=True)
    genre_name = db.Column(db.String(50), nullable=False)

    number_in_stock = db.Column(db.Integer, nullable=False, default=0)
    daily_rental_rate = db.Column(db.Numeric(10, 2), nullable=False, default=0)
