

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArtResponse(BaseModel):
    """Schema for art response to client."""
    model_config = ConfigDict(populate_by_name=True)

    A_ID: int
    A_Image: Optional[str] = None
    A_Title: Optional[str] = None
    A_Comments: List[Any] = []
    A_Modified_Date: Optional[datetime] = None
    A_Is_Public: bool = False
    A_Previous: Dict[str, Any] = {}

    self_link: str = Field(alias="self")


class ArtPage(BaseModel):
    """One page of arts plus the link to the next page, if any."""
    items: List[ArtResponse]
    next: Optional[str] = None


class ArtPatch(BaseModel):
    """
    Partial update of an art.

    Only the listed fields are accepted; any other key fails construction.
    Fields not present in the body are left untouched, so presence is read
    from model_fields_set rather than from the values.
    """
    model_config = ConfigDict(extra="forbid", strict=True)

    A_Title: Optional[str] = None
    A_Image: Optional[str] = None
    A_Comments: List[Any] = Field(default=None)
    A_Is_Public: bool = Field(default=None)
    A_Previous: Dict[str, Any] = Field(default=None)  # {} clears, {"A_ID": n} links


class ArtPut(BaseModel):
    """Full replacement of an art. A_Image keeps the stored value when omitted."""
    model_config = ConfigDict(extra="ignore", strict=True)

    A_Title: Optional[str]
    A_Comments: List[Any]
    A_Is_Public: bool
    A_Image: Optional[str] = None
