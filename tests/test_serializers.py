"""Unit tests for response projection and the comments column."""

from datetime import datetime, timezone

import pytest

from pixelgallery.models.art import Art
from pixelgallery.models.gallery import Gallery
from pixelgallery.models.user import User
from pixelgallery.utils.serializers import (
    art_to_response,
    dump_comments,
    gallery_to_response,
    load_comments,
    user_to_response,
)


BASE = "http://api.test"


class TestComments:

    @pytest.mark.parametrize("raw", [None, "", "not json", "{\"a\": 1}", "42", "null", "[1, 2"])
    def test_bad_stored_comments_decode_to_empty_list(self, raw):
        assert load_comments(raw) == []

    def test_mixed_comments_survive_storage(self):
        comments = ["nice", {"by": "user2", "text": "wow"}, 3, None, ["nested"]]

        assert load_comments(dump_comments(comments)) == comments


class TestArtProjection:

    def _art(self, **overrides) -> Art:
        values = dict(
            id=7,
            user_id=1,
            image="data:image/png;base64,AAAA",
            title="Sunset",
            comments='["first"]',
            modified_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            is_public=True,
            previous_art_id=None,
        )
        values.update(overrides)
        return Art(**values)

    def test_fields_and_self_link(self):
        data = art_to_response(self._art(), BASE).model_dump(by_alias=True)

        assert data["A_ID"] == 7
        assert data["A_Title"] == "Sunset"
        assert data["A_Comments"] == ["first"]
        assert data["A_Is_Public"] is True
        assert data["A_Previous"] == {}
        assert data["self"] == "http://api.test/arts/7"

    def test_previous_reference(self):
        data = art_to_response(self._art(previous_art_id=3), BASE).model_dump(by_alias=True)

        assert data["A_Previous"] == {"A_ID": 3, "self": "http://api.test/arts/3"}

    def test_corrupt_comments_render_empty(self):
        data = art_to_response(self._art(comments="{broken"), BASE).model_dump(by_alias=True)

        assert data["A_Comments"] == []


class TestGalleryProjection:

    def test_embeds_member_arts(self):
        gallery = Gallery(id=2, user_id=1, name="Mine", profile=None, comments="[]", is_public=False)
        art = Art(id=5, user_id=1, comments="[]", is_public=False)

        data = gallery_to_response(gallery, [art], BASE).model_dump(by_alias=True)

        assert data["G_ID"] == 2
        assert data["G_Name"] == "Mine"
        assert [a["A_ID"] for a in data["G_Arts"]] == [5]
        assert data["self"] == "http://api.test/galleries/2"


class TestUserProjection:

    def test_embeds_friend_summaries(self):
        user = User(id=1, auth_sub="user1", name="One", is_custom_time=False, time_length=10, pixel_amount=10)
        friend = User(id=2, auth_sub="user2", name="Two")

        data = user_to_response(user, [friend], BASE).model_dump(by_alias=True)

        assert data["U_Auth_Sub"] == "user1"
        assert data["Time_Length"] == 10
        assert data["Pixel_Amount"] == 10
        assert data["U_Friends"] == [{"U_ID": 2, "U_Name": "Two", "self": "http://api.test/users/2"}]
        assert data["self"] == "http://api.test/users/1"
