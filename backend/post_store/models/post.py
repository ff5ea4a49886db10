from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func

from post_store.db.session import Base
from post_store.validation import validate_content, validate_title

class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", back_populates="posts")

    # Every assignment goes through the same rules as the request schemas.
    @validates("title")
    def _validate_title(self, key, value):
        return validate_title(value)

    @validates("content")
    def _validate_content(self, key, value):
        return validate_content(value)

    def __repr__(self):
        return f"<Post {self.id} {self.title!r}>"
