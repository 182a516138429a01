"""Read-only access to supporter records."""

from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from peermatch.domain.models import SupporterCandidate
from peermatch.logging import get_logger

from .exceptions import DirectoryError
from .schema import SUPPORTER_ROLE, ProfileModel

logger = get_logger(__name__, component="directory")


class SupporterDirectory:
    """Queries supporter profiles joined with their supporter details.

    Records that fail validation are skipped with a warning so that one bad
    profile cannot block matching for everybody else.
    """

    def __init__(self, session: Session):
        """Initialize directory with a database session.

        Args:
            session: SQLAlchemy session for the directory database
        """
        self.session = session

    def list_candidates(self, onboarded_only: bool = True) -> List[SupporterCandidate]:
        """All supporters, ordered by profile id.

        Args:
            onboarded_only: Only supporters whose profile finished onboarding

        Returns:
            List of SupporterCandidate (empty if none found)

        Raises:
            DirectoryError: If the query fails
        """
        stmt = select(ProfileModel).where(ProfileModel.role == SUPPORTER_ROLE)
        if onboarded_only:
            stmt = stmt.where(ProfileModel.onboarding_complete.is_(True))
        stmt = stmt.order_by(ProfileModel.id)

        try:
            profiles = self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            logger.error(
                f"Error listing supporters: {e}",
                extra={"event": "directory.query.failed"},
            )
            raise DirectoryError(f"Failed to list supporters: {e}") from e

        candidates = []
        for profile in profiles:
            candidate = self._to_candidate(profile)
            if candidate is not None:
                candidates.append(candidate)

        logger.info(
            f"Loaded {len(candidates)} supporters from directory",
            extra={
                "event": "directory.loaded",
                "source": "database",
                "supporter_count": len(candidates),
                "skipped_count": len(profiles) - len(candidates),
                "onboarded_only": onboarded_only,
            },
        )
        return candidates

    def get_candidate(self, supporter_id: str) -> Optional[SupporterCandidate]:
        """Single supporter by profile id, or None if missing or not a supporter.

        Raises:
            DirectoryError: If the query fails
        """
        stmt = select(ProfileModel).where(
            ProfileModel.id == supporter_id, ProfileModel.role == SUPPORTER_ROLE
        )
        try:
            profile = self.session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                f"Error retrieving supporter {supporter_id}: {e}",
                extra={"event": "directory.query.failed", "supporter_id": supporter_id},
            )
            raise DirectoryError(f"Failed to retrieve supporter: {e}") from e

        if profile is None:
            return None
        return self._to_candidate(profile)

    @staticmethod
    def _to_candidate(profile: ProfileModel) -> Optional[SupporterCandidate]:
        try:
            return SupporterCandidate.from_directory_row(profile.to_directory_row())
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid supporter record {profile.id}",
                extra={
                    "event": "directory.record.invalid",
                    "supporter_id": profile.id,
                    "error_count": e.error_count(),
                },
            )
            return None
