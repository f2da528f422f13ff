"""
Profile Service - Display-ready user profiles with cache and default fallbacks.
"""

import logging
from typing import List, Optional

from identity_session.domain.profile import UserRecord, UserProfile, ProfileImage
from identity_session.errors import ProfileSourceError, StoreError
from identity_session.ports.image_port import ImageResolverPort
from identity_session.ports.profile_source_port import ProfileSourcePort
from identity_session.ports.store_port import KeyValueStorePort
from identity_session.sdk.session_manager import SessionManager, SessionObserver

logger = logging.getLogger(__name__)

USER_CACHE_KEY = "IdentityUser"


class ProfileService(SessionObserver):
    """
    Resolves the signed-in user's profile.

    Remote data is only fetched with a token from the session manager.
    The last fetched profile is cached and cleared again on logout.

    Example:
        profiles = ProfileService(manager, GraphProfileSourceAdapter(), store, images)

        profile = await profiles.get_profile()
        print(profile.display_name)
    """

    def __init__(
        self,
        sessions: SessionManager,
        source: ProfileSourcePort,
        store: KeyValueStorePort,
        images: ImageResolverPort,
        cache_key: str = USER_CACHE_KEY,
    ):
        """
        Initialize profile service.

        Args:
            sessions: Session manager providing access tokens
            source: Remote profile data
            store: Local cache for the signed-in user's record
            images: Photo decoding
            cache_key: Store key of the cached record
        """
        self._sessions = sessions
        self._source = source
        self._store = store
        self._images = images
        self._cache_key = cache_key

        sessions.subscribe(self)

    async def on_logged_out(self):
        """Forget the cached profile."""
        try:
            await self._store.save(self._cache_key, None)
        except StoreError as e:
            logger.warning("Could not clear cached profile: %s", e)

    async def get_cached_profile(self) -> Optional[UserProfile]:
        """Read the cached profile. No network access."""
        try:
            data = await self._store.read(self._cache_key)
        except StoreError as e:
            logger.warning("Could not read cached profile: %s", e)
            return None

        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring corrupt cached profile of type %s", type(data).__name__)
            return None

        logger.debug("Cached profile found")
        return await self._to_profile(UserRecord.from_dict(data))

    async def get_profile_from_remote(self) -> Optional[UserProfile]:
        """
        Fetch the signed-in user's profile and refresh the cache.

        Returns:
            Profile, or None when unauthenticated or the source has none
        """
        token = await self._sessions.get_access_token()
        if not token:
            return None

        try:
            record = await self._source.get_user_info(token)
        except ProfileSourceError as e:
            logger.warning("Could not fetch profile: %s", e)
            return None

        if record is not None:
            record = record.with_photo(await self._fetch_photo(token))
            await self._save(record)

        return await self._to_profile(record)

    async def get_related_people(self) -> Optional[List[UserProfile]]:
        """
        Fetch people related to the signed-in user.

        Returns:
            Profiles, or None when unauthenticated or the source has none
        """
        token = await self._sessions.get_access_token()
        if not token:
            return None

        try:
            records = await self._source.get_related_people(token)
        except ProfileSourceError as e:
            logger.warning("Could not fetch related people: %s", e)
            return None

        if records is None:
            return None
        records = [
            record.with_photo(await self._fetch_photo(token, record.id))
            for record in records
        ]

        return [await self._to_profile(record) for record in records]

    def get_default_profile(self) -> UserProfile:
        """Placeholder profile from the local account name. No I/O."""
        return UserProfile(
            display_name=self._sessions.get_account_display_name(),
            photo=ProfileImage.default(),
        )

    async def get_profile(self) -> UserProfile:
        """Remote profile, else cached, else default."""
        profile = await self.get_profile_from_remote()
        if profile is None:
            profile = await self.get_cached_profile()
        return profile or self.get_default_profile()

    async def _fetch_photo(self, token: str, user_id: Optional[str] = None) -> str:
        """Photo reference, or "" when it cannot be fetched."""
        try:
            return await self._source.get_photo(token, user_id)
        except ProfileSourceError as e:
            logger.warning("Could not fetch photo for %s: %s", user_id or "me", e)
            return ""

    async def _save(self, record: UserRecord):
        try:
            await self._store.save(self._cache_key, record.to_dict())
        except StoreError as e:
            logger.warning("Could not cache profile: %s", e)

    async def _to_profile(self, record: Optional[UserRecord]) -> Optional[UserProfile]:
        if record is None:
            return None

        if record.photo:
            photo = await self._images.resolve(record.photo)
        else:
            photo = ProfileImage.default()

        return UserProfile(
            display_name=record.display_name,
            principal_name=record.user_principal_name,
            photo=photo,
        )
