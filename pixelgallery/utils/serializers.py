"""
Response projection for users, arts and galleries.

Maps ORM rows to the wire schemas: prefixed field names (U_*, A_*, G_*),
nested friends / member arts / previous-version reference, and a canonical
self link on every entity.
"""

import json
import logging
from typing import Any, List, Optional, Sequence

from pixelgallery.models.art import Art
from pixelgallery.models.gallery import Gallery
from pixelgallery.models.user import User
from pixelgallery.schemas.art import ArtResponse
from pixelgallery.schemas.gallery import GalleryResponse
from pixelgallery.schemas.user import FriendSummary, UserResponse


logger = logging.getLogger(__name__)


def self_link(path: str, base_url: str = "") -> str:
    """Join the public base URL and a resource path."""
    return f"{base_url.rstrip('/')}{path}"


def load_comments(raw: Optional[str]) -> List[Any]:
    """
    Decode a stored comments column.

    Anything that is not a JSON array (null, corrupt JSON, an object, a
    number) decodes to an empty list instead of raising.
    """
    if not raw:
        return []
    try:
        comments = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Stored comments are not valid JSON, returning []")
        return []
    if not isinstance(comments, list):
        return []
    return comments


def dump_comments(comments: Sequence[Any]) -> str:
    """Encode a comments sequence for storage."""
    return json.dumps(list(comments))


def art_to_response(art: Art, base_url: str = "") -> ArtResponse:
    previous = {}
    if art.previous_art_id is not None:
        # The referenced art may have been deleted; the stored id is still shown
        previous = {
            "A_ID": art.previous_art_id,
            "self": self_link(f"/arts/{art.previous_art_id}", base_url),
        }

    return ArtResponse(
        A_ID=art.id,
        A_Image=art.image,
        A_Title=art.title,
        A_Comments=load_comments(art.comments),
        A_Modified_Date=art.modified_date,
        A_Is_Public=bool(art.is_public),
        A_Previous=previous,
        self_link=self_link(f"/arts/{art.id}", base_url),
    )


def gallery_to_response(
    gallery: Gallery,
    arts: Sequence[Art] = (),
    base_url: str = "",
) -> GalleryResponse:
    return GalleryResponse(
        G_ID=gallery.id,
        G_Name=gallery.name,
        G_Profile=gallery.profile,
        G_Comments=load_comments(gallery.comments),
        G_Creation_Date=gallery.creation_date,
        G_Is_Public=bool(gallery.is_public),
        G_Arts=[art_to_response(art, base_url) for art in arts],
        self_link=self_link(f"/galleries/{gallery.id}", base_url),
    )


def user_to_response(
    user: User,
    friends: Sequence[User] = (),
    base_url: str = "",
) -> UserResponse:
    return UserResponse(
        U_ID=user.id,
        U_Auth_Sub=user.auth_sub,
        U_Name=user.name,
        U_Email=user.email,
        U_Profile=user.picture,
        Is_Custom_Time=bool(user.is_custom_time),
        Custom_Time_Alarm=user.custom_time_alarm,
        Today_Time=user.today_time,
        Time_Length=user.time_length if user.time_length is not None else 10,
        Pixel_Amount=user.pixel_amount if user.pixel_amount is not None else 10,
        U_Friends=[
            FriendSummary(
                U_ID=friend.id,
                U_Name=friend.name,
                self_link=self_link(f"/users/{friend.id}", base_url),
            )
            for friend in friends
        ],
        self_link=self_link(f"/users/{user.id}", base_url),
    )
