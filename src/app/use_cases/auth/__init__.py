"""
Authentication Use Cases

Registration and login.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .dtos import (
    RegisterCommand,
    LoginCommand,
    UserInfo,
    AuthResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "LoginCommand",
    # DTOs - Responses
    "AuthResponse",
    "UserInfo",
]
