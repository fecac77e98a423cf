import pytest
from app.core.exceptions import NotFoundError
from app.services.profile import get_profile, get_profiles, FALLBACK_ICON_HASH


@pytest.mark.asyncio
async def test_get_profile_uses_fallback_icon(session_factory, seed):
    user = await seed.user("noicon")

    async with session_factory() as session:
        profile = await get_profile(session, user.id)

    assert profile.icon_hash == FALLBACK_ICON_HASH


@pytest.mark.asyncio
async def test_get_profile_display_name_is_not_description(session_factory, seed):
    user = await seed.user("alice", display_name="Alice A.", icon_hash="cd" * 32)

    async with session_factory() as session:
        profile = await get_profile(session, user.id)

    assert profile.display_name == "Alice A."
    assert profile.description == "alice description"
    assert profile.icon_hash == "cd" * 32
    assert profile.theme.dark_mode is False


@pytest.mark.asyncio
async def test_get_profile_not_found(session_factory):
    async with session_factory() as session:
        with pytest.raises(NotFoundError):
            await get_profile(session, 1234)


@pytest.mark.asyncio
async def test_get_profiles_deduplicates(session_factory, seed):
    alice = await seed.user("alice")
    bob = await seed.user("bob")

    async with session_factory() as session:
        profiles = await get_profiles(session, [alice.id, bob.id, alice.id])

    assert set(profiles) == {alice.id, bob.id}
    assert profiles[bob.id].name == "bob"
