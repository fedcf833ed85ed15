"""Developer profile model.

Experience and education entries are embedded JSON arrays on the profile row,
newest entry first; skills and social links are embedded the same way.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from ..database.base import Base

SOCIAL_NETWORKS = ("youtube", "twitter", "instagram", "linkedin", "facebook")


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    company = Column(String(255), default="")
    location = Column(String(255), default="")
    website = Column(String(500), default="")
    bio = Column(Text, default="")
    skills = Column(JSON, default=list)
    status = Column(String(255), nullable=False)
    githubusername = Column(String(100), default="")
    social = Column(JSON, default=dict)
    experience = Column(JSON, default=list)
    education = Column(JSON, default=list)
    date = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
    )

    user = relationship("User", back_populates="profile")
