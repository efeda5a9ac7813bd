from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.schemas.comment import CommentCreate, CommentLikeStatus, CommentResponse, CommentUpdate
from app.schemas.common import CountedResponse, DataResponse, MessageResponse
from app.services import comment_service
from app.api.deps import get_current_user

router = APIRouter()


@router.get("/video/{video_id}", response_model=CountedResponse[CommentResponse])
def get_video_comments(video_id: str, db: Session = Depends(get_db)):
    comments = comment_service.list_video_comments(db, video_id)
    return {"count": len(comments), "data": comments}


@router.post("/", response_model=DataResponse[CommentResponse], status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_data: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    comment = comment_service.create_comment(db, current_user, comment_data)
    return {"message": "Comment added successfully", "data": comment}


@router.put("/{comment_id}", response_model=DataResponse[CommentResponse])
def update_comment(
    comment_id: int,
    comment_update: CommentUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    comment = comment_service.update_comment(db, comment_id, current_user, comment_update)
    return {"data": comment}


@router.delete("/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    comment_service.delete_comment(db, comment_id, current_user)
    return {"message": "Comment deleted successfully"}


@router.post("/{comment_id}/like", response_model=DataResponse[CommentLikeStatus])
def like_comment(
    comment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    is_liked, like_count = comment_service.toggle_comment_like(db, comment_id, current_user)
    return {"data": {"isLiked": is_liked, "likeCount": like_count}}
