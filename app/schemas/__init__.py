from app.schemas.common import Pagination, MessageResponse, DataResponse, CountedResponse, ListResponse
from app.schemas.user import UserCreate, UserUpdate, UserLogin, UserSummary, UserResponse, AuthPayload
from app.schemas.channel import ChannelCreate, ChannelUpdate, ChannelSummary, ChannelResponse, SubscriptionStatus
from app.schemas.video import VideoCreate, VideoUpdate, VideoResponse, VideoDetail, ReactionStatus
from app.schemas.comment import CommentCreate, CommentUpdate, CommentResponse, CommentLikeStatus

__all__ = [
    "Pagination", "MessageResponse", "DataResponse", "CountedResponse", "ListResponse",
    "UserCreate", "UserUpdate", "UserLogin", "UserSummary", "UserResponse", "AuthPayload",
    "ChannelCreate", "ChannelUpdate", "ChannelSummary", "ChannelResponse", "SubscriptionStatus",
    "VideoCreate", "VideoUpdate", "VideoResponse", "VideoDetail", "ReactionStatus",
    "CommentCreate", "CommentUpdate", "CommentResponse", "CommentLikeStatus"
]
