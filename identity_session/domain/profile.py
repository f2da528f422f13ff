"""
Profile Domain Models - Raw user records and their display views.
"""

from dataclasses import dataclass, replace
from typing import Dict, Any, Optional


DEFAULT_IMAGE_ASSET = "DefaultIcon.png"


@dataclass(frozen=True)
class UserRecord:
    """
    Raw user record as returned by the profile data source.

    photo holds a base64 encoded image, or "" when the user has none.
    """
    id: str
    display_name: str = ""
    user_principal_name: str = ""
    photo: str = ""

    def with_photo(self, photo: Optional[str]) -> "UserRecord":
        """Return a copy carrying the given photo reference."""
        return replace(self, photo=photo or "")

    @classmethod
    def from_graph(cls, data: Dict[str, Any]) -> "UserRecord":
        """
        Build a record from a Microsoft Graph user or person resource.

        People resources have no userPrincipalName; the first scored
        e-mail address stands in for it.
        """
        principal = data.get("userPrincipalName")
        if not principal:
            addresses = data.get("scoredEmailAddresses") or []
            principal = addresses[0].get("address", "") if addresses else ""

        return cls(
            id=data.get("id", ""),
            display_name=data.get("displayName") or "",
            user_principal_name=principal or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "user_principal_name": self.user_principal_name,
            "photo": self.photo,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserRecord":
        """Deserialize from dict."""
        return cls(
            id=data.get("id", ""),
            display_name=data.get("display_name", ""),
            user_principal_name=data.get("user_principal_name", ""),
            photo=data.get("photo") or "",
        )


@dataclass(frozen=True)
class ProfileImage:
    """Either decoded image bytes or the name of a bundled asset."""
    content: Optional[bytes] = None
    asset: Optional[str] = None

    @classmethod
    def from_asset(cls, name: str) -> "ProfileImage":
        return cls(asset=name)

    @classmethod
    def default(cls) -> "ProfileImage":
        """The fixed placeholder image."""
        return cls.from_asset(DEFAULT_IMAGE_ASSET)

    @property
    def is_default(self) -> bool:
        return self.content is None and self.asset == DEFAULT_IMAGE_ASSET


@dataclass(frozen=True)
class UserProfile:
    """Display-ready view of a user."""
    display_name: str
    principal_name: str = ""
    photo: ProfileImage = ProfileImage.default()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (photo bytes reduced to their size)."""
        return {
            "display_name": self.display_name,
            "principal_name": self.principal_name,
            "photo_asset": self.photo.asset,
            "photo_bytes": len(self.photo.content) if self.photo.content else 0,
        }
