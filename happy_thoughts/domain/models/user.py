from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidArgumentError


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    hashed_password: str
    access_token: str

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise InvalidArgumentError("Username is required")
        if not self.hashed_password:
            raise InvalidArgumentError("Password hash is required")
        if not self.access_token:
            raise InvalidArgumentError("Access token is required")
