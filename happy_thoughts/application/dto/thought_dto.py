# Standard library imports
from datetime import datetime
from typing import List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Local application imports
from ...domain.models.thought import Thought


class ThoughtMessageRequest(BaseModel):
    """DTO for creating a thought or editing its message"""
    message: Optional[str] = None


class ThoughtResponse(BaseModel):
    """DTO for thought response, serialized with camelCase keys and ``_id``"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    id: str = Field(alias="_id")
    message: str
    hearts: int
    created_at: datetime
    username: Optional[str] = None
    user_id: Optional[str] = None
    liked_by: List[str] = Field(default_factory=list)
    
    @classmethod
    def from_domain(cls, thought: Thought) -> "ThoughtResponse":
        return cls(
            id=thought.id or "",
            message=thought.message,
            hearts=thought.hearts,
            created_at=thought.created_at,
            username=thought.username,
            user_id=thought.user_id,
            liked_by=list(thought.liked_by),
        )


class ThoughtMutationResponse(BaseModel):
    """DTO for update/delete confirmation"""
    message: str
    thought: ThoughtResponse
