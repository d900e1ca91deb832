from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Boolean
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.core.database import Base


class Post(Base):
    """
    Blog post written by a user, optionally filed under a category.

    published_at stays null for drafts.
    """
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), unique=True, nullable=False)
    slug = Column(String(255), nullable=False)
    excerpt = Column(String, nullable=True)
    content = Column(Text, nullable=False)
    is_published = Column(Boolean, default=False, nullable=False)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    views_count = Column(Integer, default=0, nullable=False)
    likes_count = Column(Integer, default=0, nullable=False)
    reading_time = Column(Integer, default=1, nullable=False)  # Minutes
    published_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    author = relationship("User", backref="posts")
    category = relationship("Category", backref="posts")
