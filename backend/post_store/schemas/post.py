from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import List, Optional

from post_store.validation import validate_content, validate_title

class PostBase(BaseModel):
    title: str
    content: str

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return validate_title(value)

    @field_validator("content")
    @classmethod
    def check_content(cls, value: str) -> str:
        return validate_content(value)

class PostCreate(PostBase):
    user_id: int

class PostUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> Optional[str]:
        return validate_title(value)

    @field_validator("content")
    @classmethod
    def check_content(cls, value: Optional[str]) -> Optional[str]:
        return validate_content(value)

class PostInDB(BaseModel):
    id: int
    title: str
    content: str
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class PostEnvelope(BaseModel):
    data: PostInDB

class PostListEnvelope(BaseModel):
    data: List[PostInDB]

class PageMeta(BaseModel):
    page: int
    per_page: int
    total_pages: int
    total_items: int

class PostPageEnvelope(PostListEnvelope):
    meta: PageMeta
