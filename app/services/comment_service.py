import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import case, desc, or_
from sqlalchemy.orm import Session

from app.core.exceptions import Forbidden, NotFound, ValidationError
from app.database import commit
from app.models.comment import Comment
from app.models.comment_like import CommentLike
from app.models.user import User
from app.models.video import Video
from app.schemas.comment import CommentCreate, CommentUpdate
from app.utils.validators import is_record_id, parse_record_id

logger = logging.getLogger(__name__)


def _clean_text(text: Optional[str]) -> str:
    text = (text or "").strip()
    if not text:
        raise ValidationError("Comment text is required")
    return text


def _linked_video_query(db: Session, video_id: str):
    """Query for the video a comment points at, or None when the id cannot name one."""
    record_id = parse_record_id(video_id)
    if record_id is None:
        return None
    return db.query(Video).filter(Video.id == record_id)


def _ensure_author(comment: Comment, user: User) -> None:
    if comment.authorId != user.id:
        raise Forbidden("Not authorized")


def get_comment(db: Session, comment_id: int) -> Comment:
    comment = None
    if is_record_id(comment_id):
        comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise NotFound("Comment not found")
    return comment


def _video_comments_query(db: Session, video_id: str):
    return db.query(Comment).filter(
        Comment.videoId == video_id,
        or_(Comment.isActive.is_(None), Comment.isActive == True)
    ).order_by(desc(Comment.createdAt), desc(Comment.id))


def list_video_comments(db: Session, video_id: str) -> List[Comment]:
    return _video_comments_query(db, video_id).all()


def video_comment_ids(db: Session, video: Video) -> List[int]:
    """Ids of the comments listed for ``video``, in listing order."""
    return [row.id for row in _video_comments_query(db, str(video.id)).with_entities(Comment.id)]


def create_comment(db: Session, user: User, comment_data: CommentCreate) -> Comment:
    text = _clean_text(comment_data.text)
    video_id = (comment_data.videoId or "").strip()
    if not video_id:
        raise ValidationError("Video ID is required")
    
    # The video is not required to exist
    comment = Comment(text=text, authorId=user.id, videoId=video_id)
    db.add(comment)
    
    video_query = _linked_video_query(db, video_id)
    if video_query is not None:
        video_query.update({Video.commentCount: Video.commentCount + 1}, synchronize_session=False)
    
    commit(db, "adding comment")
    db.refresh(comment)
    
    logger.debug("User %s commented %s on video %s", user.id, comment.id, video_id)
    return comment


def update_comment(db: Session, comment_id: int, user: User, comment_update: CommentUpdate) -> Comment:
    comment = get_comment(db, comment_id)
    _ensure_author(comment, user)
    
    comment.text = _clean_text(comment_update.text)
    comment.isEdited = True
    comment.editedAt = datetime.utcnow()
    
    commit(db, "updating comment")
    db.refresh(comment)
    return comment


def delete_comment(db: Session, comment_id: int, user: User) -> None:
    comment = get_comment(db, comment_id)
    _ensure_author(comment, user)
    
    video_query = _linked_video_query(db, comment.videoId)
    if video_query is not None:
        video_query.update(
            {Video.commentCount: case((Video.commentCount > 0, Video.commentCount - 1), else_=0)},
            synchronize_session=False
        )
    db.delete(comment)
    commit(db, "deleting comment")


def toggle_comment_like(db: Session, comment_id: int, user: User) -> Tuple[bool, int]:
    """Like or unlike a comment. Returns (isLiked, likeCount)."""
    comment = get_comment(db, comment_id)
    
    like = db.query(CommentLike).filter(
        CommentLike.userId == user.id,
        CommentLike.commentId == comment.id
    ).first()
    
    if like:
        db.delete(like)
        new_count = case((Comment.likeCount > 0, Comment.likeCount - 1), else_=0)
    else:
        db.add(CommentLike(userId=user.id, commentId=comment.id))
        new_count = Comment.likeCount + 1
    
    db.query(Comment).filter(Comment.id == comment.id).update(
        {Comment.likeCount: new_count},
        synchronize_session=False
    )
    commit(db, "liking comment")
    db.refresh(comment)
    
    return like is None, comment.likeCount
