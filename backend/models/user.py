"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String
from backend.database import Base


class User(Base):
    """Represents a registered reader or administrator."""
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    location = Column(String, default="Kenya")
    role = Column(String, nullable=False, default="user")  # user/admin
    articles_read = Column(Integer, default=0)
    facts_checked = Column(Integer, default=0)
    bookmarks_count = Column(Integer, default=0)
    created_at = Column(DateTime)
