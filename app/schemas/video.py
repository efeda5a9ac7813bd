from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime
from app.models.category import Category
from app.schemas.channel import ChannelSummary
from app.schemas.user import UserSummary


class VideoCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    videoUrl: str = Field(..., min_length=1, max_length=500)
    thumbnailUrl: Optional[str] = Field(None, max_length=500)
    duration: Optional[str] = Field(None, max_length=20)
    category: Category
    # Comma separated ("react, hooks") or a list
    tags: Optional[Union[str, List[str]]] = None
    channelId: int


class VideoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    thumbnailUrl: Optional[str] = Field(None, max_length=500)
    category: Optional[Category] = None
    tags: Optional[Union[str, List[str]]] = None


class VideoResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    videoUrl: str
    thumbnailUrl: Optional[str] = None
    duration: str
    views: int
    likes: List[int] = []
    dislikes: List[int] = []
    likeCount: int
    dislikeCount: int
    commentCount: int
    channel: ChannelSummary
    uploader: UserSummary
    category: Category
    tags: List[str] = []
    isPublic: bool
    isActive: bool
    createdAt: datetime
    updatedAt: datetime
    
    class Config:
        from_attributes = True


class VideoDetail(VideoResponse):
    # Only filled in on the single-video fetch
    comments: List[int] = []


class ReactionStatus(BaseModel):
    isLiked: bool
    isDisliked: bool
    likeCount: int
    dislikeCount: int
