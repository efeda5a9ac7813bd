from app.models.category import Category
from app.models.user import User
from app.models.channel import Channel
from app.models.subscription import Subscription
from app.models.video import Video
from app.models.video_tag import VideoTag
from app.models.reaction import VideoReaction, ReactionKind
from app.models.comment import Comment
from app.models.comment_like import CommentLike

__all__ = [
    "Category", "User", "Channel", "Subscription", "Video", "VideoTag",
    "VideoReaction", "ReactionKind", "Comment", "CommentLike"
]
