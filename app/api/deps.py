from typing import Optional
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.exceptions import Unauthenticated
from app.core.security import decode_access_token
from app.database import get_db
from app.models.user import User
from app.utils.validators import is_record_id

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    if credentials is None:
        raise Unauthenticated("No token, authorization denied")
    
    user_id = decode_access_token(credentials.credentials)
    if user_id is None or not is_record_id(user_id):
        raise Unauthenticated("Token is not valid")
    
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise Unauthenticated("User not found")
    
    return user


class PageParams:
    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)
    ):
        self.page = page
        self.limit = limit
