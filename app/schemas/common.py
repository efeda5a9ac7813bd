from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Pagination(BaseModel):
    page: int
    limit: int
    pages: int


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: T


class CountedResponse(BaseModel, Generic[T]):
    success: bool = True
    count: int
    data: List[T]


class ListResponse(BaseModel, Generic[T]):
    success: bool = True
    count: int
    total: int
    pagination: Pagination
    data: List[T]
