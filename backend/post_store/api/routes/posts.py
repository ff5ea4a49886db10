from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from typing import Optional

from post_store.core.config import settings
from post_store.crud import post as post_crud
from post_store.crud import user as user_crud
from post_store.db.session import get_db
from post_store.schemas.post import (
    PageMeta,
    PostCreate,
    PostEnvelope,
    PostListEnvelope,
    PostPageEnvelope,
    PostUpdate,
)

# Serves the collection at the site root, the address the viewer's index screen reads.
index_router = APIRouter()
router = APIRouter()

def get_post_or_404(post_id: int, db: Session = Depends(get_db)):
    post = post_crud.get_post(db, post_id)
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")
    return post

@index_router.get("/", response_model=PostListEnvelope)
def list_posts(db: Session = Depends(get_db)):
    """
    Retrieves every post in id order.
    """
    return {"data": post_crud.get_all_posts(db)}

@router.get("", response_model=PostPageEnvelope)
def list_post_page(
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """
    Retrieves one page of posts. ``per_page`` defaults to the configured page
    size and is capped at ``MAX_PER_PAGE``.
    """
    per_page = min(per_page or settings.PER_PAGE, settings.MAX_PER_PAGE)
    post_page = post_crud.get_post_page(db, page, per_page)
    meta = PageMeta(
        page=post_page.page,
        per_page=post_page.per_page,
        total_pages=post_page.total_pages,
        total_items=post_page.total_items,
    )
    return {"data": post_page.posts, "meta": meta}

@router.get("/{post_id}", response_model=PostEnvelope)
def read_post(post=Depends(get_post_or_404)):
    return {"data": post}

@router.post("", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED)
def create_post(post_data: PostCreate, db: Session = Depends(get_db)):
    """
    Creates a post owned by ``user_id``. Title and content are checked before
    anything is written.
    """
    user = user_crud.get_user(db, post_data.user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    new_post = post_crud.create_post(db, user, post_data.title, post_data.content)
    return {"data": new_post}

@router.patch("/{post_id}", response_model=PostEnvelope)
def update_post(post_data: PostUpdate, post=Depends(get_post_or_404), db: Session = Depends(get_db)):
    changes = post_data.model_dump(exclude_unset=True)
    return {"data": post_crud.update_post(db, post, **changes)}

@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post=Depends(get_post_or_404), db: Session = Depends(get_db)):
    post_crud.delete_post(db, post)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
