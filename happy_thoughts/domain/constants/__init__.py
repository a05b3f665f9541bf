"""Constants for domain model field names"""

from .user_fields import UserFields
from .thought_fields import ThoughtFields

__all__ = [
    "UserFields",
    "ThoughtFields",
]
