"""
Image Port - Turn photo references into displayable images.

Implementations:
- Base64ImageResolver: Decodes base64 photo payloads
"""

from abc import ABC, abstractmethod

from identity_session.domain.profile import ProfileImage


class ImageResolverPort(ABC):
    """Port: Resolve a non-empty photo reference to an image."""

    @abstractmethod
    async def resolve(self, reference: str) -> ProfileImage:
        """
        Resolve a photo reference.

        Args:
            reference: Non-empty photo reference

        Returns:
            Decoded image (the default image if the reference is unusable)
        """
        pass
