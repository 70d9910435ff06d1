

from typing import Optional

from fastapi import Depends, Header

from pixelgallery.core.config import Settings
from pixelgallery.core.security import extract_subject
from pixelgallery.dependencies.settings import get_settings


async def get_auth_subject(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Dependency to get the caller subject from the Authorization header.

    The subject is not looked up here; an unknown subject is resolved to
    "no such user" by the ownership checks downstream.

    Args:
        authorization: Raw "Bearer sub:<subject>" header value.
        settings: Application settings (scheme and prefix).

    Returns:
        str: Caller subject.

    Raises:
        MissingCredentialError: If the header is absent.
        MalformedCredentialError: If the header is malformed.
    """
    return extract_subject(
        authorization,
        scheme=settings.auth_scheme,
        prefix=settings.auth_sub_prefix,
    )
