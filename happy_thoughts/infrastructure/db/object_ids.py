# Standard library imports
from typing import Any

# External package imports
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.exceptions import InvalidArgumentError


def parse_object_id(value: str) -> ObjectId:
    """
    Convert an identifier string into an ObjectId
    
    Args:
        value: Identifier as received from a client
        
    Returns:
        ObjectId instance
        
    Raises:
        InvalidArgumentError: If the value is not a valid ObjectId
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidArgumentError("Invalid ID format", details={"id": value})


def reference_to_store(value: str) -> Any:
    """User references are stored as ObjectId when they look like one"""
    if ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def reference_from_store(value: Any) -> str:
    return str(value)
