import logging
from typing import Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import Unauthenticated, ValidationError
from app.core.security import create_access_token, hash_password, verify_password
from app.database import commit
from app.models.user import User
from app.schemas.user import UserCreate, UserLogin, UserUpdate
from app.utils.validators import validate_username

logger = logging.getLogger(__name__)


def register_user(db: Session, user_data: UserCreate) -> Tuple[User, str]:
    if not validate_username(user_data.username):
        raise ValidationError("Username may only contain letters, digits, underscores and dashes")
    
    email = user_data.email.lower()
    existing = db.query(User).filter(
        or_(User.username == user_data.username, func.lower(User.email) == email)
    ).first()
    if existing:
        raise ValidationError("User with this email or username already exists")
    
    user = User(
        username=user_data.username,
        email=email,
        password=hash_password(user_data.password),
        avatar=user_data.avatar or settings.DEFAULT_USER_AVATAR
    )
    db.add(user)
    commit(db, "registering user")
    db.refresh(user)
    
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user, create_access_token(user.id)


def authenticate_user(db: Session, credentials: UserLogin) -> Tuple[User, str]:
    login = credentials.username.strip()
    user = db.query(User).filter(
        or_(User.username == login, func.lower(User.email) == login.lower())
    ).first()
    if not user or not verify_password(credentials.password, user.password):
        raise Unauthenticated("Invalid credentials")
    return user, create_access_token(user.id)


def update_profile(db: Session, user: User, user_update: UserUpdate) -> User:
    if user_update.username is not None and user_update.username != user.username:
        if not validate_username(user_update.username):
            raise ValidationError("Username may only contain letters, digits, underscores and dashes")
        taken = db.query(User).filter(User.username == user_update.username, User.id != user.id).first()
        if taken:
            raise ValidationError("Username already taken")
        user.username = user_update.username
    if user_update.avatar is not None:
        user.avatar = user_update.avatar
    
    commit(db, "updating profile")
    db.refresh(user)
    return user
