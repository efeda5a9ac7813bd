"""
Channel lifecycle and subscriptions.

The owner's channel list, the channel's subscriber list and its video list
are all read from relationship rows; only the counters are stored, and they
are moved with SQL-side arithmetic in the same transaction as those rows.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import desc, func, or_
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import Forbidden, InvalidOperation, NotFound, ValidationError
from app.database import commit
from app.models.channel import Channel
from app.models.subscription import Subscription
from app.models.user import User
from app.models.video import Video
from app.schemas.channel import ChannelCreate, ChannelUpdate
from app.utils.pagination import paginate
from app.utils.text import contains_pattern, derive_handle
from app.utils.validators import is_record_id, validate_handle

logger = logging.getLogger(__name__)


def get_channel(db: Session, channel_id: int) -> Channel:
    channel = None
    if is_record_id(channel_id):
        channel = db.query(Channel).filter(Channel.id == channel_id).first()
    if not channel:
        raise NotFound("Channel not found")
    return channel


def _ensure_owner(channel: Channel, user: User, action: str) -> None:
    if channel.ownerId != user.id:
        raise Forbidden(f"Not authorized to {action} this channel")


def list_channels(db: Session, page: int, limit: int, search: Optional[str] = None) -> Tuple[List[Channel], int]:
    query = db.query(Channel).filter(Channel.isActive == True)
    
    if search:
        pattern = contains_pattern(search)
        query = query.filter(or_(
            Channel.channelName.ilike(pattern, escape="\\"),
            Channel.description.ilike(pattern, escape="\\"),
            Channel.handle.ilike(pattern, escape="\\")
        ))
    
    query = query.order_by(desc(Channel.subscriberCount), desc(Channel.id))
    return paginate(query, page, limit)


def list_owned_channels(db: Session, user: User) -> List[Channel]:
    return db.query(Channel).filter(
        Channel.ownerId == user.id
    ).order_by(desc(Channel.createdAt), desc(Channel.id)).all()


def create_channel(db: Session, owner: User, channel_data: ChannelCreate) -> Channel:
    channel_name = channel_data.channelName.strip()
    if not channel_name:
        raise ValidationError("Please add a channel name")
    
    handle = derive_handle(channel_data.handle or channel_name)
    if not validate_handle(handle):
        raise ValidationError("Handle must contain at least one letter or digit")
    
    # Handles are stored lowercased; compare the same way for legacy rows
    if db.query(Channel).filter(func.lower(Channel.handle) == handle).first():
        raise ValidationError("Handle already taken. Please choose a different handle.")
    
    if db.query(Channel).filter(Channel.ownerId == owner.id, Channel.channelName == channel_name).first():
        raise ValidationError("You already have a channel with this name")
    
    channel = Channel(
        channelName=channel_name,
        handle=handle,
        description=channel_data.description,
        category=channel_data.category,
        avatar=channel_data.avatar or settings.DEFAULT_CHANNEL_AVATAR,
        banner=channel_data.banner or settings.DEFAULT_CHANNEL_BANNER,
        ownerId=owner.id
    )
    db.add(channel)
    commit(db, "creating channel")
    db.refresh(channel)
    
    logger.info("User %s created channel @%s (id=%s)", owner.id, channel.handle, channel.id)
    return channel


def update_channel(db: Session, channel_id: int, user: User, channel_update: ChannelUpdate) -> Channel:
    channel = get_channel(db, channel_id)
    _ensure_owner(channel, user, "update")
    
    for field, value in channel_update.model_dump(exclude_none=True).items():
        if field == "channelName":
            value = value.strip()
            if not value:
                raise ValidationError("Please add a channel name")
        setattr(channel, field, value)
    
    commit(db, "updating channel")
    db.refresh(channel)
    return channel


def delete_channel(db: Session, channel_id: int, user: User) -> int:
    """Delete a channel and every video uploaded to it. Returns the number of videos removed."""
    channel = get_channel(db, channel_id)
    _ensure_owner(channel, user, "delete")
    
    videos = db.query(Video).filter(Video.channelId == channel.id).all()
    for video in videos:
        db.delete(video)
    db.flush()
    
    db.expire(channel, ["uploads"])
    db.delete(channel)
    commit(db, "deleting channel")
    
    logger.info("User %s deleted channel %s with %d videos", user.id, channel_id, len(videos))
    return len(videos)


def toggle_subscription(db: Session, channel_id: int, user: User) -> Tuple[bool, int]:
    """Subscribe if not subscribed, unsubscribe otherwise. Returns (isSubscribed, subscriberCount)."""
    channel = get_channel(db, channel_id)
    
    if channel.ownerId == user.id:
        raise InvalidOperation("Cannot subscribe to your own channel")
    
    subscription = db.query(Subscription).filter(
        Subscription.userId == user.id,
        Subscription.channelId == channel.id
    ).first()
    
    if subscription:
        db.delete(subscription)
        delta = -1
    else:
        db.add(Subscription(userId=user.id, channelId=channel.id))
        delta = 1
    
    db.query(Channel).filter(Channel.id == channel.id).update(
        {Channel.subscriberCount: Channel.subscriberCount + delta},
        synchronize_session=False
    )
    commit(db, "subscribing to channel")
    db.refresh(channel)
    
    return subscription is None, channel.subscriberCount


def list_channel_videos(db: Session, channel_id: int, page: int, limit: int) -> Tuple[List[Video], int]:
    channel = get_channel(db, channel_id)
    
    query = db.query(Video).filter(
        Video.channelId == channel.id,
        Video.isPublic == True,
        Video.isActive == True
    ).order_by(desc(Video.createdAt), desc(Video.id))
    return paginate(query, page, limit)
