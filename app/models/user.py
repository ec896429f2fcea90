"""
User models: stored account record and the authenticated identity
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.product import utc_now


class Role(str, Enum):
    """Exactly one role per user"""
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """User account as persisted in the users collection"""

    id: Optional[str] = None
    email: str
    password: str  # bcrypt digest, never the plaintext
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=utc_now)


class Identity(BaseModel):
    """Identity decoded from a verified session token"""

    model_config = ConfigDict(frozen=True)

    subject_id: str
    role: Role

    def has_role(self, role: Role) -> bool:
        """Exact role match, no hierarchy"""
        return self.role == role
