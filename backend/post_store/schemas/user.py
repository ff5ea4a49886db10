from pydantic import BaseModel, EmailStr
from datetime import datetime
from typing import Optional

class UserCreate(BaseModel):
    email: EmailStr
    role: Optional[str] = None

class UserInDB(BaseModel):
    id: int
    email: str
    role: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class UserEnvelope(BaseModel):
    data: UserInDB
