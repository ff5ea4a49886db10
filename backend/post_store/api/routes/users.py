from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from post_store.crud import post as post_crud
from post_store.crud import user as user_crud
from post_store.db.session import get_db
from post_store.schemas.post import PostListEnvelope
from post_store.schemas.user import UserCreate, UserEnvelope

router = APIRouter()

def get_user_or_404(user_id: int, db: Session = Depends(get_db)):
    user = user_crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return user

@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    if user_crud.get_user_by_email(db, user_data.email):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered.")
    try:
        new_user = user_crud.create_user(db, user_data.email, user_data.role)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered.")
    return {"data": new_user}

@router.get("/{user_id}", response_model=UserEnvelope)
def read_user(user=Depends(get_user_or_404)):
    return {"data": user}

@router.get("/{user_id}/posts", response_model=PostListEnvelope)
def read_user_posts(user=Depends(get_user_or_404), db: Session = Depends(get_db)):
    return {"data": post_crud.get_user_posts(db, user.id)}
