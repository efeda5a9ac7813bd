from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional
from datetime import datetime


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    avatar: Optional[str] = Field(None, max_length=500)


class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    avatar: Optional[str] = Field(None, max_length=500)


class UserLogin(BaseModel):
    # Username or email
    username: str
    password: str


class UserSummary(BaseModel):
    id: int
    username: str
    avatar: Optional[str] = None
    
    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    avatar: Optional[str] = None
    channels: List[int] = []
    likedVideos: List[int] = []
    dislikedVideos: List[int] = []
    subscribedChannels: List[int] = []
    createdAt: datetime
    
    class Config:
        from_attributes = True


class AuthPayload(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse
