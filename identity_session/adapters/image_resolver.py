"""
Image Resolver Adapter - Decodes base64 photo payloads.
"""

import base64
import binascii
import logging

from identity_session.domain.profile import ProfileImage
from identity_session.ports.image_port import ImageResolverPort

logger = logging.getLogger(__name__)


class Base64ImageResolver(ImageResolverPort):
    """Decode base64 (optionally data: URI) photo references to bytes."""

    async def resolve(self, reference: str) -> ProfileImage:
        payload = reference
        if payload.startswith("data:") and "," in payload:
            payload = payload.split(",", 1)[1]

        try:
            content = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Photo reference is not valid base64, using default image")
            return ProfileImage.default()

        if not content:
            return ProfileImage.default()
        return ProfileImage(content=content)
