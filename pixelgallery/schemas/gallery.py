

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pixelgallery.schemas.art import ArtResponse


class GalleryResponse(BaseModel):
    """Schema for gallery response to client."""
    model_config = ConfigDict(populate_by_name=True)

    G_ID: int
    G_Name: Optional[str] = None
    G_Profile: Optional[str] = None
    G_Comments: List[Any] = []
    G_Creation_Date: Optional[datetime] = None
    G_Is_Public: bool = False
    G_Arts: List[ArtResponse] = []

    self_link: str = Field(alias="self")


class GalleryPage(BaseModel):
    """One page of galleries plus the link to the next page, if any."""
    items: List[GalleryResponse]
    next: Optional[str] = None


class GalleryPatch(BaseModel):
    """Partial update of a gallery; unknown keys fail construction."""
    model_config = ConfigDict(extra="forbid", strict=True)

    G_Name: Optional[str] = None
    G_Profile: Optional[str] = None
    G_Comments: List[Any] = Field(default=None)
    G_Is_Public: bool = Field(default=None)


class GalleryPut(BaseModel):
    """Full replacement of a gallery; all four fields are required."""
    model_config = ConfigDict(extra="ignore", strict=True)

    G_Name: Optional[str]
    G_Profile: Optional[str]
    G_Comments: List[Any]
    G_Is_Public: bool
