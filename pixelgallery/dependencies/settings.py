

from fastapi import Request

from pixelgallery.core.config import Settings


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the running application was built with."""
    return request.app.state.settings
