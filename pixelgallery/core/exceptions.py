"""
Gallery API exception hierarchy.

Every error raised by the request pipeline derives from GalleryAPIError and
carries the HTTP status code and JSON payload it is rendered with. The
exception handlers registered in pixelgallery.main turn them into responses.

Usage:
    from pixelgallery.core.exceptions import NotFoundError

    if art is None:
        raise NotFoundError("No art with this art_id exists")
"""

from typing import Any, Dict

from fastapi import status


class GalleryAPIError(Exception):
    """Base exception for all Gallery API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        return {"Error": self.message}


# --- 401 ---------------------------------------------------------------------

class CredentialError(GalleryAPIError):
    """Missing or malformed caller credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_header"

    def to_payload(self) -> Dict[str, Any]:
        return {"code": self.code, "description": self.message}


class MissingCredentialError(CredentialError):
    code = "no auth header"

    def __init__(self, message: str = "Authorization header is missing"):
        super().__init__(message)


class MalformedCredentialError(CredentialError):
    code = "invalid_header"

    def __init__(self, message: str = "Invalid header. Use 'Bearer sub:<subject>'"):
        super().__init__(message)


# --- 406 / 415 ---------------------------------------------------------------

class NegotiationError(GalleryAPIError):
    """Unacceptable response type or unsupported request content type."""


class NotAcceptableError(NegotiationError):
    status_code = status.HTTP_406_NOT_ACCEPTABLE

    def __init__(self, message: str = "NotAcceptable"):
        super().__init__(message)


class UnsupportedMediaTypeError(NegotiationError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE

    def __init__(self, message: str = "UnsupportedMediaType"):
        super().__init__(message)


# --- 400 ---------------------------------------------------------------------

class BodyPolicyError(GalleryAPIError):
    """Body present where forbidden, or absent where required."""

    status_code = status.HTTP_400_BAD_REQUEST


class NoBodyAllowedError(BodyPolicyError):
    def __init__(self, message: str = "The request should not have any content json"):
        super().__init__(message)


class BodyRequiredError(BodyPolicyError):
    def __init__(self, message: str = "BadRequest"):
        super().__init__(message)


class ValidationError(GalleryAPIError):
    """Wrong shape, wrong field set or wrong element type."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidBodyError(ValidationError):
    pass


class InvalidFieldError(ValidationError):
    def __init__(self, message: str = "Invalid field in request body"):
        super().__init__(message)


class AutoOnlyError(ValidationError):
    def __init__(self, message: str = "Should not be triggered manually"):
        super().__init__(message)


# --- 404 ---------------------------------------------------------------------

USER_NOT_FOUND = "No user with this user_id exists"
ART_NOT_FOUND = "No art with this art_id exists"
GALLERY_NOT_FOUND = "No gallery with this gallery_id exists"

# Path parameter name -> message for an id that cannot name a row
PATH_NOT_FOUND_MESSAGES = {
    "user_id": USER_NOT_FOUND,
    "friend_id": USER_NOT_FOUND,
    "art_id": ART_NOT_FOUND,
    "gallery_id": GALLERY_NOT_FOUND,
}


class NotFoundError(GalleryAPIError):
    status_code = status.HTTP_404_NOT_FOUND


# --- 403 ---------------------------------------------------------------------

class OwnershipError(GalleryAPIError):
    """Caller is unknown or does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(GalleryAPIError):
    """Duplicate or missing edge, self-friendship."""

    status_code = status.HTTP_403_FORBIDDEN
