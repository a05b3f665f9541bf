from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CredentialsRequest(BaseModel):
    """
    DTO for register and login requests.
    
    Fields are optional here so that missing values reach the use case and
    are reported as a 400 instead of a schema error.
    """
    username: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    """DTO returned by register and login"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    success: bool = True
    id: str
    access_token: str


class AuthFailureResponse(BaseModel):
    """Error body used by register and login"""
    success: bool = False
    message: str
