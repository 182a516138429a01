"""ORM mapping of the supporter directory tables.

Mirrors the two tables the directory reads: ``profiles`` (one row per user)
and ``supporter_details`` (one row per supporter, keyed by profile id). The
application that owns these tables manages migrations; create_schema() only
exists for local fixtures and tests.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship

logger = logging.getLogger(__name__)

Base = declarative_base()

SUPPORTER_ROLE = "supporter"


class ProfileModel(Base):
    """ORM model for the profiles table."""

    __tablename__ = "profiles"

    id = Column(String(64), primary_key=True, nullable=False)
    email = Column(String(255), nullable=True)
    full_name = Column(String(255), nullable=True)
    avatar_url = Column(Text, nullable=True)
    role = Column(String(32), nullable=False, default="client", index=True)
    onboarding_complete = Column(Boolean, nullable=False, default=False)

    supporter_details = relationship(
        "SupporterDetailsModel",
        back_populates="profile",
        uselist=False,
        lazy="selectin",
    )

    def to_directory_row(self) -> Dict[str, Any]:
        """Joined row shape accepted by SupporterCandidate.from_directory_row()."""
        details: Optional[Dict[str, Any]] = None
        if self.supporter_details is not None:
            details = self.supporter_details.to_dict()
        return {
            "id": self.id,
            "full_name": self.full_name,
            "onboarding_complete": self.onboarding_complete,
            "supporter_details": details,
        }


class SupporterDetailsModel(Base):
    """ORM model for the supporter_details table."""

    __tablename__ = "supporter_details"

    supporter_id = Column(String(64), ForeignKey("profiles.id"), primary_key=True, nullable=False)
    bio = Column(Text, nullable=True)
    specialties = Column(JSON, nullable=True)
    approach = Column(Text, nullable=True)
    session_types = Column(JSON, nullable=True)
    # {"monday": ["09:00", "10:00"], ...}
    availability = Column(JSON, nullable=True)
    total_sessions = Column(Integer, nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=False)
    is_verified = Column(Boolean, nullable=False, default=False)
    accepting_clients = Column(Boolean, nullable=False, default=False)
    training_complete = Column(Boolean, nullable=False, default=False)

    profile = relationship("ProfileModel", back_populates="supporter_details")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "specialties": self.specialties,
            "approach": self.approach,
            "session_types": self.session_types,
            "availability": self.availability,
            "is_available": self.is_available,
            "is_verified": self.is_verified,
            "accepting_clients": self.accepting_clients,
            "training_complete": self.training_complete,
        }


def create_schema(engine: Engine) -> None:
    """Create the directory tables if they don't exist (idempotent)."""
    logger.info("Creating directory schema if not exists")
    Base.metadata.create_all(engine, checkfirst=True)
