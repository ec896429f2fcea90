"""
API schemas for registration and login
"""

from pydantic import BaseModel


class Credentials(BaseModel):
    """Email/password pair that already passed the validation pipeline"""
    email: str
    password: str


class TokenResponse(BaseModel):
    """Session token returned by register and login"""
    token: str
