"""
Profile Source Port - Remote user profile data.

Implementations:
- GraphProfileSourceAdapter: Microsoft Graph over httpx
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from identity_session.domain.profile import UserRecord


class ProfileSourcePort(ABC):
    """Port: Fetch user records and photos with a bearer token."""

    @abstractmethod
    async def get_user_info(self, token: str) -> Optional[UserRecord]:
        """
        Fetch the signed-in user's record.

        Returns:
            The record, or None if the source has none

        Raises:
            ProfileSourceError: On transport failure
        """
        pass

    @abstractmethod
    async def get_related_people(self, token: str) -> Optional[List[UserRecord]]:
        """
        Fetch people related to the signed-in user.

        Returns:
            Records (possibly empty), or None if the source has none
        """
        pass

    @abstractmethod
    async def get_photo(self, token: str, user_id: Optional[str] = None) -> str:
        """
        Fetch a user's photo.

        Args:
            token: Bearer token
            user_id: Whose photo; None means the signed-in user

        Returns:
            Base64 encoded image, or "" when the user has no photo
        """
        pass
