from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func

from post_store.db.session import Base
from post_store.validation import validate_email

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False)
    role = Column(String(50), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    posts = relationship("Post", back_populates="user", cascade="all, delete-orphan", order_by="Post.id")

    @validates("email")
    def _validate_email(self, key, value):
        return validate_email(value)

    def __repr__(self):
        return f"<User {self.email}>"
