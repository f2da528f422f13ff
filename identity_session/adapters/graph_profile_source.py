"""
Graph Profile Source Adapter - Implements ProfileSourcePort with Microsoft Graph.
"""

import base64
import logging
from typing import Any, Dict, List, Optional

import httpx

from identity_session.config import GRAPH_URL
from identity_session.domain.profile import UserRecord
from identity_session.errors import ProfileSourceError
from identity_session.ports.profile_source_port import ProfileSourcePort

logger = logging.getLogger(__name__)

USER_SELECT = "id,displayName,userPrincipalName"
PEOPLE_SELECT = "id,displayName,userPrincipalName,scoredEmailAddresses"


class GraphProfileSourceAdapter(ProfileSourcePort):
    """
    Microsoft Graph client for the signed-in user, related people and photos.

    Requires the User.Read scope (People.Read for related people).
    """

    def __init__(
        self,
        base_url: str = GRAPH_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        people_limit: int = 10,
    ):
        """
        Initialize Graph adapter.

        Args:
            base_url: Graph endpoint including version
            client: Preconfigured httpx.AsyncClient (built if None)
            timeout: Request timeout in seconds
            people_limit: Maximum related people returned
        """
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._people_limit = people_limit

    async def _get(
        self,
        token: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            return await self._client.get(
                path,
                params=params,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            raise ProfileSourceError(f"GET {path} failed: {e}") from e

    def _check(self, response: httpx.Response, path: str):
        if response.is_error:
            raise ProfileSourceError(
                f"GET {path} returned {response.status_code}",
                status_code=response.status_code,
            )

    async def get_user_info(self, token: str) -> Optional[UserRecord]:
        """GET /me."""
        path = "me"
        response = await self._get(token, path, params={"$select": USER_SELECT})
        if response.status_code == 404:
            return None
        self._check(response, path)
        return UserRecord.from_graph(response.json())

    async def get_related_people(self, token: str) -> Optional[List[UserRecord]]:
        """GET /me/people."""
        path = "me/people"
        response = await self._get(
            token,
            path,
            params={"$top": self._people_limit, "$select": PEOPLE_SELECT},
        )
        if response.status_code == 404:
            return None
        self._check(response, path)

        people = response.json().get("value")
        if people is None:
            return None
        return [UserRecord.from_graph(person) for person in people]

    async def get_photo(self, token: str, user_id: Optional[str] = None) -> str:
        """
        GET /me/photo/$value or /users/{id}/photo/$value.

        A missing or unreadable photo is not an error, the caller falls back
        to the default image.
        """
        path = f"users/{user_id}/photo/$value" if user_id else "me/photo/$value"
        response = await self._get(token, path)
        if response.is_error:
            logger.debug("No photo at %s (%s)", path, response.status_code)
            return ""
        return base64.b64encode(response.content).decode("ascii")

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()
