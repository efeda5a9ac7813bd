from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.reaction import ReactionKind
from app.models.user import User
from app.schemas.common import CountedResponse, DataResponse, ListResponse, MessageResponse
from app.schemas.video import ReactionStatus, VideoCreate, VideoDetail, VideoResponse, VideoUpdate
from app.services import comment_service, video_service
from app.utils.pagination import list_payload
from app.api.deps import PageParams, get_current_user

router = APIRouter()


def _reaction_payload(state, video):
    return {
        "isLiked": state == ReactionKind.like,
        "isDisliked": state == ReactionKind.dislike,
        "likeCount": video.likeCount,
        "dislikeCount": video.dislikeCount
    }


@router.get("/", response_model=ListResponse[VideoResponse])
def list_videos(
    category: Optional[str] = None,
    search: Optional[str] = None,
    sort: str = "-createdAt",
    paging: PageParams = Depends(),
    db: Session = Depends(get_db)
):
    videos, total = video_service.list_videos(db, paging.page, paging.limit, category, search, sort)
    return list_payload(videos, total, paging.page, paging.limit)


# Declared before /{video_id}
@router.get("/trending", response_model=CountedResponse[VideoResponse])
def get_trending_videos(db: Session = Depends(get_db)):
    videos = video_service.trending_videos(db)
    return {"count": len(videos), "data": videos}


@router.get("/{video_id}", response_model=DataResponse[VideoDetail])
def get_video(video_id: int, db: Session = Depends(get_db)):
    video = video_service.view_video(db, video_id)
    detail = VideoDetail.model_validate(video)
    detail.comments = comment_service.video_comment_ids(db, video)
    return {"data": detail}


@router.post("/", response_model=DataResponse[VideoResponse], status_code=status.HTTP_201_CREATED)
def create_video(
    video_data: VideoCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    video = video_service.create_video(db, current_user, video_data)
    return {"message": "Video uploaded successfully", "data": video}


@router.put("/{video_id}", response_model=DataResponse[VideoResponse])
def update_video(
    video_id: int,
    video_update: VideoUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    video = video_service.update_video(db, video_id, current_user, video_update)
    return {"message": "Video updated successfully", "data": video}


@router.delete("/{video_id}", response_model=MessageResponse)
def delete_video(
    video_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    video_service.delete_video(db, video_id, current_user)
    return {"message": "Video deleted successfully"}


@router.post("/{video_id}/like", response_model=DataResponse[ReactionStatus])
def like_video(
    video_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    state, video = video_service.toggle_reaction(db, video_id, current_user, ReactionKind.like)
    return {
        "message": "Video liked" if state == ReactionKind.like else "Video unliked",
        "data": _reaction_payload(state, video)
    }


@router.post("/{video_id}/dislike", response_model=DataResponse[ReactionStatus])
def dislike_video(
    video_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    state, video = video_service.toggle_reaction(db, video_id, current_user, ReactionKind.dislike)
    return {
        "message": "Video disliked" if state == ReactionKind.dislike else "Dislike removed",
        "data": _reaction_payload(state, video)
    }
