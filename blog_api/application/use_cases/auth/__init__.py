from .authenticate_user import AuthenticateUserUseCase
from .register_user import RegisterUserUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "RegisterUserUseCase",
]
