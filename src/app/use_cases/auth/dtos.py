"""
Authentication Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- Commands: input to use cases (raw business intent, not yet validated)
- Responses: output from use cases (structured result)
"""

from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - email/password as submitted

    Fields are optional so the use case can report every missing field
    instead of failing on the first one.
    """

    email: Optional[str] = None
    password: Optional[str] = None


class LoginCommand(BaseModel):
    """Login command - email/password as submitted"""

    email: Optional[str] = None
    password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user fields in authentication responses"""

    id: str
    email: str


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    message: str
    user: UserInfo
    token: str
