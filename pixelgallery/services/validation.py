"""
Mutation validation for PATCH and PUT bodies.

Each validator turns a parsed JSON body into a dict of column changes, or
raises. A body is accepted or rejected as a whole: one unknown key or one
badly typed value rejects every field in it.
"""

from typing import Any, Dict, Optional, Type

import pydantic
from sqlalchemy.ext.asyncio import AsyncSession

from pixelgallery.core.exceptions import (
    ART_NOT_FOUND,
    InvalidBodyError,
    InvalidFieldError,
    NotFoundError,
)
from pixelgallery.db.base import MAX_INTEGER
from pixelgallery.models.art import Art
from pixelgallery.schemas.art import ArtPatch, ArtPut
from pixelgallery.schemas.gallery import GalleryPatch, GalleryPut
from pixelgallery.services.art_service import ArtService
from pixelgallery.utils.serializers import dump_comments


INVALID_ART_BODY = "Invalid art body"
INVALID_GALLERY_BODY = "Invalid gallery body"


def _whole_number(value: Any) -> Optional[int]:
    """Return value as an int if it is an integer or a whole float (2.0), else None."""
    # bool is an int subclass but never a valid id
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _build(model: Type[pydantic.BaseModel], body: Any, invalid_body: str) -> pydantic.BaseModel:
    if not isinstance(body, dict):
        raise InvalidBodyError(invalid_body)

    try:
        return model.model_validate(body)
    except pydantic.ValidationError as e:
        if any(error["type"] == "extra_forbidden" for error in e.errors()):
            raise InvalidFieldError()
        raise InvalidBodyError(invalid_body)


async def validate_art_patch(body: Any, db: AsyncSession) -> Dict[str, Any]:
    """
    Validate a partial art update.

    A_Previous is either {} (clear the link) or {"A_ID": <n>} naming an
    existing art, where n is an integer or a whole float such as 2.0.
    Self references and cycles are not rejected.

    Raises:
        InvalidFieldError: On any key outside the allow-list.
        InvalidBodyError: On a wrong type or an empty body.
        NotFoundError: If A_Previous names a missing art.
    """
    patch = _build(ArtPatch, body, INVALID_ART_BODY)
    present = patch.model_fields_set
    if not present:
        raise InvalidBodyError(INVALID_ART_BODY)

    changes: Dict[str, Any] = {}
    if "A_Title" in present:
        changes["title"] = patch.A_Title
    if "A_Image" in present:
        changes["image"] = patch.A_Image
    if "A_Comments" in present:
        changes["comments"] = dump_comments(patch.A_Comments)
    if "A_Is_Public" in present:
        changes["is_public"] = patch.A_Is_Public

    if "A_Previous" in present:
        previous = patch.A_Previous
        if not previous:
            changes["previous_art_id"] = None
        else:
            previous_id = _whole_number(previous.get("A_ID"))
            if previous_id is None:
                raise InvalidBodyError(INVALID_ART_BODY)
            # Out-of-range ids cannot be bound as SQL integers and name no row
            if not 1 <= previous_id <= MAX_INTEGER or await ArtService.get_art(previous_id, db) is None:
                raise NotFoundError(ART_NOT_FOUND)
            changes["previous_art_id"] = previous_id

    return changes


def validate_art_put(body: Any, art: Art) -> Dict[str, Any]:
    """
    Validate a full art replacement.

    A_Title, A_Comments and A_Is_Public are required. A_Image falls back to
    the stored image when absent. A_Previous is not replaced by PUT.
    """
    put = _build(ArtPut, body, INVALID_ART_BODY)

    image = put.A_Image if "A_Image" in put.model_fields_set else art.image
    return {
        "title": put.A_Title,
        "comments": dump_comments(put.A_Comments),
        "is_public": put.A_Is_Public,
        "image": image,
    }


def validate_gallery_patch(body: Any) -> Dict[str, Any]:
    """
    Validate a partial gallery update.

    Raises:
        InvalidFieldError: On any key outside the allow-list.
        InvalidBodyError: On a wrong type or an empty body.
    """
    patch = _build(GalleryPatch, body, INVALID_GALLERY_BODY)
    present = patch.model_fields_set
    if not present:
        raise InvalidBodyError(INVALID_GALLERY_BODY)

    changes: Dict[str, Any] = {}
    if "G_Name" in present:
        changes["name"] = patch.G_Name
    if "G_Profile" in present:
        changes["profile"] = patch.G_Profile
    if "G_Comments" in present:
        changes["comments"] = dump_comments(patch.G_Comments)
    if "G_Is_Public" in present:
        changes["is_public"] = patch.G_Is_Public
    return changes


def validate_gallery_put(body: Any) -> Dict[str, Any]:
    """Validate a full gallery replacement; all four fields are required."""
    put = _build(GalleryPut, body, INVALID_GALLERY_BODY)
    return {
        "name": put.G_Name,
        "profile": put.G_Profile,
        "comments": dump_comments(put.G_Comments),
        "is_public": put.G_Is_Public,
    }
