"""Tests for the ownership guard against a real SQLite database."""

import pytest

from pixelgallery.core.exceptions import NotFoundError, OwnershipError
from pixelgallery.schemas.user import UserInfo
from pixelgallery.services.art_service import ArtService
from pixelgallery.services.gallery_service import GalleryService
from pixelgallery.services.ownership import NOT_THE_USER, OwnershipGuard
from pixelgallery.services.user_service import UserService


async def _user(db, sub):
    user, _ = await UserService.get_or_create_user(sub, UserInfo(sub=sub, name=sub), db)
    return user


@pytest.mark.asyncio
class TestArtOwnership:

    async def test_owner_passes(self, db):
        owner = await _user(db, "user1")
        art = await ArtService.create_art(owner.id, db)

        ownership = await OwnershipGuard.check_art_ownership(art.id, "user1", db)

        assert ownership.resource.id == art.id
        assert ownership.owner.id == owner.id

    async def test_other_user_is_forbidden_even_when_public(self, db):
        owner = await _user(db, "user1")
        await _user(db, "user2")
        art = await ArtService.create_art(owner.id, db)
        await ArtService.update_art(art, {"is_public": True}, db)

        with pytest.raises(OwnershipError) as exc_info:
            await OwnershipGuard.check_art_ownership(art.id, "user2", db)

        assert exc_info.value.message == "Art does not belong to the user"

    async def test_unknown_caller_is_forbidden(self, db):
        owner = await _user(db, "user1")
        art = await ArtService.create_art(owner.id, db)

        with pytest.raises(OwnershipError) as exc_info:
            await OwnershipGuard.check_art_ownership(art.id, "nobody", db)

        assert exc_info.value.message == NOT_THE_USER

    async def test_missing_art_is_not_found_before_caller_lookup(self, db):
        # The caller is unknown too, but existence is checked first
        with pytest.raises(NotFoundError):
            await OwnershipGuard.check_art_ownership(999, "nobody", db)


@pytest.mark.asyncio
class TestGalleryOwnership:

    async def test_owner_passes(self, db):
        owner = await _user(db, "user1")
        gallery = await GalleryService.create_gallery(owner.id, db)

        ownership = await OwnershipGuard.check_gallery_ownership(gallery.id, "user1", db)

        assert ownership.resource.id == gallery.id

    async def test_other_user_is_forbidden(self, db):
        owner = await _user(db, "user1")
        await _user(db, "user2")
        gallery = await GalleryService.create_gallery(owner.id, db)

        with pytest.raises(OwnershipError):
            await OwnershipGuard.check_gallery_ownership(gallery.id, "user2", db)

    async def test_missing_gallery(self, db):
        with pytest.raises(NotFoundError):
            await OwnershipGuard.check_gallery_ownership(42, "user1", db)


@pytest.mark.asyncio
class TestSelfAccess:

    async def test_self_passes(self, db):
        user = await _user(db, "user1")

        assert (await OwnershipGuard.check_self_access(user.id, "user1", db)).id == user.id

    async def test_other_caller_is_forbidden(self, db):
        user = await _user(db, "user1")
        await _user(db, "user2")

        with pytest.raises(OwnershipError):
            await OwnershipGuard.check_self_access(user.id, "user2", db)

    async def test_missing_user(self, db):
        with pytest.raises(NotFoundError):
            await OwnershipGuard.check_self_access(5, "user1", db)
