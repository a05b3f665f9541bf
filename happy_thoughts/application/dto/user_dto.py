from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password, no access token)"""
    id: str
    username: str


class SecretResponse(BaseModel):
    """DTO for the authenticated diagnostic route"""
    secret: str
