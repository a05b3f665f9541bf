from .auth_dto import CredentialsRequest, AuthResponse, AuthFailureResponse
from .user_dto import UserResponse, SecretResponse
from .thought_dto import ThoughtMessageRequest, ThoughtResponse, ThoughtMutationResponse

__all__ = [
    "CredentialsRequest",
    "AuthResponse",
    "AuthFailureResponse",
    "UserResponse",
    "SecretResponse",
    "ThoughtMessageRequest",
    "ThoughtResponse",
    "ThoughtMutationResponse",
]
