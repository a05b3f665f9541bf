from .user import User
from .thought import Thought, validate_message, MESSAGE_MIN_LENGTH, MESSAGE_MAX_LENGTH

__all__ = ["User", "Thought", "validate_message", "MESSAGE_MIN_LENGTH", "MESSAGE_MAX_LENGTH"]
