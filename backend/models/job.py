"""Job listing model definitions."""

from sqlalchemy import Column, DateTime, String, Text
from backend.database import Base


class Job(Base):
    """Represents a job listing."""
    __tablename__ = "jobs"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=False)
    type = Column(String, index=True, nullable=False)  # full-time/part-time/contract/internship
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    salary = Column(String)
    application_url = Column(String)
    posted_at = Column(DateTime)
    expires_at = Column(DateTime)
