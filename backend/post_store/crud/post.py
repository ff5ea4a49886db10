import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from post_store.models.post import Post
from post_store.models.user import User

logger = logging.getLogger(__name__)


@dataclass
class PostPage:
    """One page of posts in id order, plus the totals needed to navigate."""
    posts: List[Post]
    page: int
    per_page: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.per_page) if self.total_items else 0


def get_post(db: Session, post_id: int) -> Optional[Post]:
    return db.query(Post).filter(Post.id == post_id).first()

def get_all_posts(db: Session) -> List[Post]:
    return db.query(Post).order_by(Post.id.asc()).all()

def find_posts(db: Session, ids: List[int]) -> List[Post]:
    if not ids:
        return []
    return db.query(Post).filter(Post.id.in_(ids)).order_by(Post.id.asc()).all()

def first_post(db: Session) -> Optional[Post]:
    return db.query(Post).order_by(Post.id.asc()).first()

def first_posts(db: Session, n: int) -> List[Post]:
    return db.query(Post).order_by(Post.id.asc()).limit(n).all()

def last_post(db: Session) -> Optional[Post]:
    return db.query(Post).order_by(Post.id.desc()).first()

def last_posts(db: Session, n: int) -> List[Post]:
    """Newest ``n`` posts, newest first."""
    return db.query(Post).order_by(Post.id.desc()).limit(n).all()

def count_posts(db: Session) -> int:
    return db.query(Post).count()

def get_user_posts(db: Session, user_id: int) -> List[Post]:
    return db.query(Post).filter(Post.user_id == user_id).order_by(Post.id.asc()).all()

def get_post_page(db: Session, page: int, per_page: int) -> PostPage:
    """
    Returns the 1-based ``page`` of posts ordered by id. Pages past the end
    come back empty rather than raising.
    """
    total_items = count_posts(db)
    offset = (page - 1) * per_page
    if offset >= total_items:
        return PostPage(posts=[], page=page, per_page=per_page, total_items=total_items)
    posts = (
        db.query(Post)
        .order_by(Post.id.asc())
        .offset(offset)
        .limit(per_page)
        .all()
    )
    return PostPage(posts=posts, page=page, per_page=per_page, total_items=total_items)


def create_post(db: Session, user: User, title: str, content: str) -> Post:
    new_post = Post(title=title, content=content, user_id=user.id)
    db.add(new_post)
    db.commit()
    db.refresh(new_post)
    logger.info("Created post %s for user %s", new_post.id, user.id)
    return new_post

def update_post(db: Session, post: Post, **fields) -> Post:
    try:
        for name, value in fields.items():
            setattr(post, name, value)
    except ValueError:
        db.rollback()
        raise
    db.commit()
    db.refresh(post)
    logger.info("Updated post %s (%s)", post.id, ", ".join(sorted(fields)) or "no changes")
    return post

def delete_post(db: Session, post: Post) -> None:
    post_id = post.id
    db.delete(post)
    db.commit()
    logger.info("Deleted post %s", post_id)
