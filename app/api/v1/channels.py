from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.schemas.channel import ChannelCreate, ChannelResponse, ChannelUpdate, SubscriptionStatus
from app.schemas.common import CountedResponse, DataResponse, ListResponse, MessageResponse
from app.schemas.video import VideoResponse
from app.services import channel_service
from app.utils.pagination import list_payload
from app.api.deps import PageParams, get_current_user

router = APIRouter()


@router.get("/", response_model=ListResponse[ChannelResponse])
def list_channels(
    search: Optional[str] = None,
    paging: PageParams = Depends(),
    db: Session = Depends(get_db)
):
    channels, total = channel_service.list_channels(db, paging.page, paging.limit, search)
    return list_payload(channels, total, paging.page, paging.limit)


@router.post("/", response_model=DataResponse[ChannelResponse], status_code=status.HTTP_201_CREATED)
def create_channel(
    channel_data: ChannelCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    channel = channel_service.create_channel(db, current_user, channel_data)
    return {"message": "Channel created successfully", "data": channel}


@router.get("/my-channels", response_model=CountedResponse[ChannelResponse])
def get_my_channels(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    channels = channel_service.list_owned_channels(db, current_user)
    return {"count": len(channels), "data": channels}


@router.get("/{channel_id}", response_model=DataResponse[ChannelResponse])
def get_channel(channel_id: int, db: Session = Depends(get_db)):
    return {"data": channel_service.get_channel(db, channel_id)}


@router.put("/{channel_id}", response_model=DataResponse[ChannelResponse])
def update_channel(
    channel_id: int,
    channel_update: ChannelUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    channel = channel_service.update_channel(db, channel_id, current_user, channel_update)
    return {"message": "Channel updated successfully", "data": channel}


@router.delete("/{channel_id}", response_model=MessageResponse)
def delete_channel(
    channel_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    channel_service.delete_channel(db, channel_id, current_user)
    return {"message": "Channel and all associated videos deleted successfully"}


@router.post("/{channel_id}/subscribe", response_model=DataResponse[SubscriptionStatus])
def subscribe_to_channel(
    channel_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    is_subscribed, subscriber_count = channel_service.toggle_subscription(db, channel_id, current_user)
    return {
        "message": "Subscribed successfully" if is_subscribed else "Unsubscribed successfully",
        "data": {"isSubscribed": is_subscribed, "subscriberCount": subscriber_count}
    }


@router.get("/{channel_id}/videos", response_model=ListResponse[VideoResponse])
def get_channel_videos(
    channel_id: int,
    paging: PageParams = Depends(),
    db: Session = Depends(get_db)
):
    videos, total = channel_service.list_channel_videos(db, channel_id, paging.page, paging.limit)
    return list_payload(videos, total, paging.page, paging.limit)
