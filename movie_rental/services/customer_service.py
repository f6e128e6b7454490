from movie_rental.errors import NotFound
from movie_rental.models.customer import Customer
from movie_rental.repositories.customer_repo import CustomerRepo
from movie_rental.utils.validation import require_bool, require_str


class CustomerService:
    @staticmethod
    def list_customers():
        return CustomerRepo.list_all()

    @staticmethod
    def get_customer(customer_id: int):
        customer = CustomerRepo.get(customer_id)
        if not customer:
            raise NotFound("customer")
        return customer

    @staticmethod
    def create_customer(data: dict):
        customer = Customer(
            name=require_str(data, "name", 5, 50),
            phone=require_str(data, "phone", 5, 50),
            is_gold=require_bool(data, "is_gold", default=False),
        )
        return CustomerRepo.create(customer)

    @staticmethod
    def update_customer(customer_id: int, data: dict):
        # partial update; rentals keep the snapshot taken when they were created
        customer = CustomerService.get_customer(customer_id)
        if "name" in data:
            customer.name = require_str(data, "name", 5, 50)
        if "phone" in data:
            customer.phone = require_str(data, "phone", 5, 50)
        if "is_gold" in data:
            customer.is_gold = require_bool(data, "is_gold")
        CustomerRepo.update()
        return customer

    @staticmethod
    def delete_customer(customer_id: int):
        customer = CustomerService.get_customer(customer_id)
        CustomerRepo.delete(customer)
        return customer
