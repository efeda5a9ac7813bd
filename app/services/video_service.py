"""
Video lifecycle, view counting and reactions.

A user's reaction to a video is a single VideoReaction row whose ``kind`` is
either like or dislike, so a user can never sit in both sets. The mirrored
lists on the user (likedVideos / dislikedVideos) are read from the same row.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import asc, desc, or_
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import Forbidden, NotFound, ValidationError
from app.database import commit
from app.models.channel import Channel
from app.models.reaction import ReactionKind, VideoReaction
from app.models.user import User
from app.models.video import Video
from app.models.video_tag import VideoTag
from app.schemas.video import VideoCreate, VideoUpdate
from app.utils.pagination import paginate
from app.utils.text import contains_pattern, split_tags
from app.utils.validators import is_record_id, parse_category

logger = logging.getLogger(__name__)

SORT_OPTIONS = {
    "-createdAt": (desc(Video.createdAt), desc(Video.id)),
    "createdAt": (asc(Video.createdAt), asc(Video.id)),
    "-views": (desc(Video.views), desc(Video.id)),
    "views": (asc(Video.views), asc(Video.id)),
    "-likeCount": (desc(Video.likeCount), desc(Video.id)),
    "likeCount": (asc(Video.likeCount), asc(Video.id)),
    "title": (asc(Video.title), asc(Video.id)),
    "-title": (desc(Video.title), desc(Video.id)),
}

REACTION_COUNTERS = {
    ReactionKind.like: Video.likeCount,
    ReactionKind.dislike: Video.dislikeCount,
}


def _visible(query):
    return query.filter(Video.isPublic == True, Video.isActive == True)


def _ensure_uploader(video: Video, user: User, action: str) -> None:
    if video.uploaderId != user.id:
        raise Forbidden(f"Not authorized to {action} this video")


def get_video(db: Session, video_id: int) -> Video:
    video = None
    if is_record_id(video_id):
        video = db.query(Video).filter(Video.id == video_id).first()
    if not video:
        raise NotFound("Video not found")
    return video


def list_videos(
    db: Session,
    page: int,
    limit: int,
    category: Optional[str] = None,
    search: Optional[str] = None,
    sort: str = "-createdAt"
) -> Tuple[List[Video], int]:
    if sort not in SORT_OPTIONS:
        raise ValidationError(f"Unsupported sort: {sort}")
    
    query = _visible(db.query(Video))
    
    category_filter = parse_category(category)
    if category_filter is not None:
        query = query.filter(Video.category == category_filter)
    
    if search:
        pattern = contains_pattern(search)
        query = query.filter(or_(
            Video.title.ilike(pattern, escape="\\"),
            Video.description.ilike(pattern, escape="\\"),
            Video.tagEntries.any(VideoTag.name.ilike(pattern, escape="\\"))
        ))
    
    return paginate(query.order_by(*SORT_OPTIONS[sort]), page, limit)


def trending_videos(db: Session) -> List[Video]:
    """All-time ranking: most viewed first, ties broken by likes."""
    return _visible(db.query(Video)).order_by(
        desc(Video.views), desc(Video.likeCount), desc(Video.id)
    ).limit(settings.TRENDING_LIMIT).all()


def view_video(db: Session, video_id: int) -> Video:
    """
    Fetch a video and count the view.

    Every successful fetch counts, including repeats by the same viewer.
    The owning channel's totalViews moves with it.
    """
    video = get_video(db, video_id)
    
    db.query(Video).filter(Video.id == video.id).update(
        {Video.views: Video.views + 1},
        synchronize_session=False
    )
    db.query(Channel).filter(Channel.id == video.channelId).update(
        {Channel.totalViews: Channel.totalViews + 1},
        synchronize_session=False
    )
    commit(db, "fetching video")
    db.refresh(video)
    return video


def create_video(db: Session, user: User, video_data: VideoCreate) -> Video:
    channel = None
    if is_record_id(video_data.channelId):
        channel = db.query(Channel).filter(Channel.id == video_data.channelId).first()
    if not channel:
        raise NotFound("Channel not found")
    if channel.ownerId != user.id:
        raise Forbidden("Not authorized to upload to this channel")
    
    video = Video(
        title=video_data.title.strip(),
        description=video_data.description,
        videoUrl=video_data.videoUrl,
        thumbnailUrl=video_data.thumbnailUrl or settings.DEFAULT_THUMBNAIL,
        duration=video_data.duration or "0:00",
        category=video_data.category,
        channelId=channel.id,
        uploaderId=user.id
    )
    video.tagEntries = [VideoTag(name=tag) for tag in split_tags(video_data.tags)]
    db.add(video)
    
    db.query(Channel).filter(Channel.id == channel.id).update(
        {Channel.videoCount: Channel.videoCount + 1},
        synchronize_session=False
    )
    commit(db, "creating video")
    db.refresh(video)
    
    logger.info("User %s uploaded video %s to channel %s", user.id, video.id, channel.id)
    return video


def update_video(db: Session, video_id: int, user: User, video_update: VideoUpdate) -> Video:
    video = get_video(db, video_id)
    _ensure_uploader(video, user, "update")
    
    if video_update.title is not None:
        video.title = video_update.title.strip()
    if video_update.description is not None:
        video.description = video_update.description
    if video_update.thumbnailUrl is not None:
        video.thumbnailUrl = video_update.thumbnailUrl
    if video_update.category is not None:
        video.category = video_update.category
    if video_update.tags is not None:
        video.tagEntries = [VideoTag(name=tag) for tag in split_tags(video_update.tags)]
    
    commit(db, "updating video")
    db.refresh(video)
    return video


def delete_video(db: Session, video_id: int, user: User) -> None:
    video = get_video(db, video_id)
    _ensure_uploader(video, user, "delete")
    
    db.query(Channel).filter(Channel.id == video.channelId).update(
        {
            Channel.videoCount: Channel.videoCount - 1,
            Channel.totalViews: Channel.totalViews - video.views
        },
        synchronize_session=False
    )
    db.delete(video)
    commit(db, "deleting video")
    
    logger.info("User %s deleted video %s", user.id, video_id)


def toggle_reaction(db: Session, video_id: int, user: User, kind: ReactionKind) -> Tuple[Optional[ReactionKind], Video]:
    """
    Apply a like or dislike press and return the user's resulting reaction.

    none -> kind, kind -> none, and opposite -> kind in a single step.
    """
    video = get_video(db, video_id)
    
    reaction = db.query(VideoReaction).filter(
        VideoReaction.userId == user.id,
        VideoReaction.videoId == video.id
    ).first()
    
    counter = REACTION_COUNTERS[kind]
    if reaction is None:
        db.add(VideoReaction(userId=user.id, videoId=video.id, kind=kind))
        changes = {counter: counter + 1}
        state = kind
    elif reaction.kind == kind:
        db.delete(reaction)
        changes = {counter: counter - 1}
        state = None
    else:
        previous = REACTION_COUNTERS[reaction.kind]
        reaction.kind = kind
        changes = {counter: counter + 1, previous: previous - 1}
        state = kind
    
    db.query(Video).filter(Video.id == video.id).update(changes, synchronize_session=False)
    commit(db, "reacting to video")
    db.refresh(video)
    
    return state, video
