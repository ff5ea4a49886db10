import logging
from typing import Optional

from sqlalchemy.orm import Session

from post_store.models.user import User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, email: str, role: Optional[str] = None) -> User:
    new_user = User(email=email, role=role)
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info("Created user %s", new_user.id)
    return new_user
