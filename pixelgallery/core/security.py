

import logging
from typing import Optional

from pixelgallery.core.config import settings
from pixelgallery.core.exceptions import MalformedCredentialError, MissingCredentialError


logger = logging.getLogger(__name__)


def extract_subject(
    authorization: Optional[str],
    scheme: Optional[str] = None,
    prefix: Optional[str] = None,
) -> str:
    """
    Extract the caller subject from an Authorization header value.

    Expected format: "<scheme> <prefix><subject>", e.g. "Bearer sub:auth0|123".
    No lookup is performed: an unknown subject is still a valid subject.

    fastapi.security.HTTPBearer is not used here. It matches the scheme
    case-insensitively and reports a missing header and a malformed one
    the same way, while callers get distinct 401 codes for the two.

    Args:
        authorization: Raw Authorization header value, or None if absent.
        scheme: Expected scheme (defaults to settings.auth_scheme).
        prefix: Expected token prefix (defaults to settings.auth_sub_prefix).

    Returns:
        str: The opaque caller subject.

    Raises:
        MissingCredentialError: If no header was sent.
        MalformedCredentialError: If scheme, token, prefix or subject is wrong.
    """
    scheme = scheme or settings.auth_scheme
    prefix = prefix or settings.auth_sub_prefix

    if authorization is None:
        raise MissingCredentialError()

    parts = authorization.split(" ")
    token_scheme = parts[0]
    token = parts[1] if len(parts) > 1 else ""

    if token_scheme != scheme or not token:
        logger.warning("Rejected credential with wrong scheme or missing token")
        raise MalformedCredentialError()

    if not token.startswith(prefix):
        logger.warning("Rejected credential without subject prefix")
        raise MalformedCredentialError()

    subject = token[len(prefix):]
    if not subject:
        logger.warning("Rejected credential with empty subject")
        raise MalformedCredentialError()

    return subject
