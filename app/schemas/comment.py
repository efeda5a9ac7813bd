from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from app.schemas.user import UserSummary


class CommentCreate(BaseModel):
    # Emptiness is checked after trimming, in the comment service
    text: Optional[str] = Field(None, max_length=1000)
    videoId: Optional[str] = Field(None, max_length=64)
    
    @field_validator("videoId", mode="before")
    @classmethod
    def coerce_video_id(cls, value):
        if isinstance(value, int):
            return str(value)
        return value


class CommentUpdate(BaseModel):
    text: Optional[str] = Field(None, max_length=1000)


class CommentResponse(BaseModel):
    id: int
    text: str
    author: UserSummary
    videoId: str
    likes: List[int] = []
    likeCount: int
    isEdited: bool
    editedAt: Optional[datetime] = None
    isActive: Optional[bool] = None
    createdAt: datetime
    updatedAt: datetime
    
    class Config:
        from_attributes = True


class CommentLikeStatus(BaseModel):
    isLiked: bool
    likeCount: int
