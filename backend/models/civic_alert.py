"""Civic alert model definitions."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from backend.database import Base


class CivicAlert(Base):
    """Represents a civic announcement shown on the alerts board."""
    __tablename__ = "civic_alerts"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String, nullable=False)  # info/warning/urgent
    category = Column(String, nullable=False)
    action_text = Column(String)
    action_url = Column(String)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime)
