# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import InvalidArgumentError

MESSAGE_MIN_LENGTH = 5
MESSAGE_MAX_LENGTH = 140


def validate_message(
    message: Optional[str],
    min_length: int = MESSAGE_MIN_LENGTH,
    max_length: int = MESSAGE_MAX_LENGTH,
) -> str:
    """
    Check a thought message against the length rules.
    
    Args:
        message: Candidate message text
        min_length: Shortest allowed message (inclusive)
        max_length: Longest allowed message (inclusive)
        
    Returns:
        The message unchanged
        
    Raises:
        InvalidArgumentError: If the message is missing or out of range
    """
    if not isinstance(message, str) or not message:
        raise InvalidArgumentError("Message is required")
    if len(message) < min_length:
        raise InvalidArgumentError(
            f"Message must be at least {min_length} characters"
        )
    if len(message) > max_length:
        raise InvalidArgumentError(
            f"Message must be at most {max_length} characters"
        )
    return message


@dataclass
class Thought:
    """
    Pure domain model for a Thought - a short post with a like counter.
    
    ``user_id`` is None for legacy records created before ownership was
    tracked. ``hearts`` always equals ``len(liked_by)``.
    """
    id: Optional[str]
    message: str
    created_at: datetime
    hearts: int = 0
    username: Optional[str] = None
    user_id: Optional[str] = None
    liked_by: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.message:
            raise InvalidArgumentError("Message is required")
        if self.hearts < 0:
            raise InvalidArgumentError("Hearts cannot be negative")

    def has_owner(self) -> bool:
        return self.user_id is not None and self.user_id != ""

    def can_be_modified_by(self, user_id: str) -> bool:
        """
        Ownership check for edits and deletes.
        
        No recorded owner -> anyone may modify; otherwise only the owner.
        """
        if not self.has_owner():
            return True
        return self.user_id == user_id

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.liked_by
