"""Article model definitions."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from backend.database import Base


class Article(Base):
    """Represents a published news article."""
    __tablename__ = "articles"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String, index=True, nullable=False)
    source = Column(String, nullable=False)
    author = Column(String)
    image_url = Column(String)
    verified = Column(Boolean, default=True)
    published_at = Column(DateTime, index=True)
    created_at = Column(DateTime)
