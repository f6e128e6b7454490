from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token
from movie_rental.models.user import User
from movie_rental.repositories.user_repo import UserRepo
from movie_rental.utils.validation import require_email, require_str

class AuthService:
    @staticmethod
    def register(data: dict, is_admin: bool = False):
        name = require_str(data, "name", 2, 50)
        email = require_email(data)
        password = require_str(data, "password", 5, 1024)

        if UserRepo.get_by_email(email):
            raise ValueError("User already registered.")

        user = User(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            is_admin=is_admin
        )
        UserRepo.create(user)
        return user

    @staticmethod
    def login(data: dict):
        email = require_email(data)
        password = require_str(data, "password", 5, 1024)

        user = UserRepo.get_by_email(email)
        if not user or not check_password_hash(user.password_hash, password):
            raise ValueError("Invalid email or password")

        return AuthService.issue_token(user), user

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(
            identity=str(user.id),
            additional_claims={"role": user.role, "name": user.name, "email": user.email}
        )
