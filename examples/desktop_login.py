"""
Desktop Login Example - Forced login with silent resume and profile display.

Set IDENTITY_CLIENT_ID (and optionally IDENTITY_AUTHORITY_MODE,
IDENTITY_TENANT, IDENTITY_INTEGRATED_AUTH) before running.
"""

import asyncio
import logging

from identity_session import IdentityConfig, LoginOutcome, SessionObserver
from identity_session.sdk import build_session_manager, build_profile_service


class ConsoleObserver(SessionObserver):
    def on_logged_in(self):
        print("-> logged in")

    def on_logged_out(self):
        print("-> logged out")


async def main():
    logging.basicConfig(level=logging.INFO)

    config = IdentityConfig.from_env()
    sessions = await build_session_manager(config)
    profiles = build_profile_service(config, sessions)
    sessions.subscribe(ConsoleObserver())

    # Show the cached profile right away, then try to resume silently
    cached = await profiles.get_cached_profile()
    if cached:
        print(f"Welcome back, {cached.display_name} (cached)")

    if not await sessions.silent_login():
        outcome = await sessions.login()
        if outcome != LoginOutcome.SUCCESS:
            print(f"Login failed: {outcome.value}")
            return

    profile = await profiles.get_profile()
    print(f"\nSigned in as {profile.display_name or sessions.get_account_display_name()}")
    print(f"Principal: {profile.principal_name}")
    print(f"Photo: {'custom' if not profile.photo.is_default else profile.photo.asset}")

    people = await profiles.get_related_people() or []
    print(f"\nRelated people ({len(people)}):")
    for person in people:
        print(f"  {person.display_name} <{person.principal_name}>")

    await sessions.logout()


if __name__ == "__main__":
    asyncio.run(main())
