from pydantic import BaseModel
from datetime import datetime
from typing import Optional

# Read-only copy of a post as served by the store
class Post(BaseModel):
    id: int
    title: str
    content: str
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
