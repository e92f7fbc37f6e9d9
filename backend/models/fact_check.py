"""Fact check model definitions."""

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from backend.database import Base


class FactCheck(Base):
    """Represents one classified claim submitted by a user."""
    __tablename__ = "fact_checks"
    __table_args__ = (
        CheckConstraint("confidence >= 0 AND confidence <= 100", name="ck_fact_checks_confidence"),
    )

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    text = Column(Text, nullable=False)
    result = Column(String, nullable=False)  # true/false/partly-true/unverified
    confidence = Column(Integer, nullable=False)
    explanation = Column(Text)
    sources = Column(JSON)
    created_at = Column(DateTime)
