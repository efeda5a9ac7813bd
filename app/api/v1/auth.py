from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.schemas.common import DataResponse, MessageResponse
from app.schemas.user import AuthPayload, UserCreate, UserLogin, UserResponse, UserUpdate
from app.services import user_service
from app.api.deps import get_current_user

router = APIRouter()


@router.post("/register", response_model=DataResponse[AuthPayload], status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    user, token = user_service.register_user(db, user_data)
    return {
        "message": "User registered successfully",
        "data": {"token": token, "user": user}
    }


@router.post("/login", response_model=DataResponse[AuthPayload])
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user, token = user_service.authenticate_user(db, credentials)
    return {
        "message": "Login successful",
        "data": {"token": token, "user": user}
    }


@router.post("/logout", response_model=MessageResponse)
def logout():
    # Tokens are stateless; the client just drops it
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=DataResponse[UserResponse])
def get_me(current_user: User = Depends(get_current_user)):
    return {"data": current_user}


@router.put("/profile", response_model=DataResponse[UserResponse])
def update_profile(
    user_update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    user = user_service.update_profile(db, current_user, user_update)
    return {"message": "Profile updated successfully", "data": user}
