from movie_rental.extensions import db


class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False, index=True)
    phone = db.Column(db.String(50), nullable=False)
    is_gold = db.Column(db.Boolean, nullable=False, default=False)
