# Standard library imports
import base64
import hashlib
import secrets
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings

BEARER_SCHEME = "bearer"


def _prehash(plain_password: str) -> bytes:
    """
    Reduce a password of any length to 44 ASCII bytes for bcrypt
    
    bcrypt only reads the first 72 bytes and newer releases reject longer
    input, so hashing and verification both go through this digest.
    """
    digest = hashlib.sha256(plain_password.encode("utf-8", "surrogatepass")).digest()
    return base64.b64encode(digest)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(_prehash(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password
    
    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against
        
    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            _prehash(plain_password),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        # Malformed or empty stored hash
        return False


def generate_access_token() -> str:
    """
    Generate a new opaque bearer token
    
    Returns:
        Hex encoded string of ``access_token_bytes`` random bytes
    """
    return secrets.token_hex(get_settings().access_token_bytes)


def extract_access_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.
    
    Accepts either the raw token or ``Bearer <token>``.
    
    Args:
        authorization: Raw header value, possibly None
        
    Returns:
        The token, or None if the header is absent or blank
    """
    if authorization is None:
        return None
    
    value = authorization.strip()
    scheme, _, remainder = value.partition(" ")
    if remainder and scheme.lower() == BEARER_SCHEME:
        value = remainder.strip()
    
    return value or None
