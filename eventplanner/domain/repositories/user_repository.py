"""
User Repository Interface.
Read access to the credential store, plus out-of-band provisioning.
"""

from typing import Optional

from eventplanner.domain.repositories.base import BaseRepository
from eventplanner.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get the user whose email matches exactly."""
        ...
