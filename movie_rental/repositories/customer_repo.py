from movie_rental.models.customer import Customer
from movie_rental.extensions import db


class CustomerRepo:
    @staticmethod
    def list_all():
        return Customer.query.order_by(Customer.name).all()

    @staticmethod
    def get(customer_id: int):
        return db.session.get(Customer, customer_id)

    @staticmethod
    def create(customer: Customer):
        db.session.add(customer)
        db.session.commit()
        return customer

    @staticmethod
    def update():
        db.session.commit()

    @staticmethod
    def delete(customer: Customer):
        db.session.delete(customer)
        db.session.commit()
