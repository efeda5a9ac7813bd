from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from app.models.category import Category
from app.schemas.user import UserSummary


class ChannelCreate(BaseModel):
    channelName: str = Field(..., min_length=1, max_length=100)
    handle: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    category: Category = Category.entertainment
    avatar: Optional[str] = Field(None, max_length=500)
    banner: Optional[str] = Field(None, max_length=500)


class ChannelUpdate(BaseModel):
    # No handle: it is fixed once the channel exists
    channelName: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    category: Optional[Category] = None
    avatar: Optional[str] = Field(None, max_length=500)
    banner: Optional[str] = Field(None, max_length=500)


class ChannelSummary(BaseModel):
    id: int
    channelName: str
    handle: str
    avatar: Optional[str] = None
    subscriberCount: int = 0
    
    class Config:
        from_attributes = True


class ChannelResponse(BaseModel):
    id: int
    channelName: str
    handle: str
    description: Optional[str] = None
    owner: UserSummary
    avatar: Optional[str] = None
    banner: Optional[str] = None
    subscribers: List[int] = []
    subscriberCount: int
    videos: List[int] = []
    videoCount: int
    totalViews: int
    category: Category
    isVerified: bool
    isActive: bool
    createdAt: datetime
    updatedAt: datetime
    
    class Config:
        from_attributes = True


class SubscriptionStatus(BaseModel):
    isSubscribed: bool
    subscriberCount: int
