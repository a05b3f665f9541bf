from .config import Settings, get_settings
from .security import (
    hash_password,
    verify_password,
    generate_access_token,
    extract_access_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "generate_access_token",
    "extract_access_token",
]
