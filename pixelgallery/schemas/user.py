

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserInfo(BaseModel):
    """Profile claims sent by the client when registering."""
    model_config = ConfigDict(extra="ignore")

    sub: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    picture: Optional[str] = None


class UserCreate(BaseModel):
    """Schema for the POST /users body."""
    userinfo: UserInfo


class TodayTimeRefresh(BaseModel):
    """Schema for the PATCH /users maintenance body."""
    model_config = ConfigDict(extra="ignore")

    request_method: Optional[str] = None


class TodayTimeRefreshResponse(BaseModel):
    """Schema for the PATCH /users maintenance response."""
    ok: bool = True
    Today_Time: datetime


class FriendSummary(BaseModel):
    """Reduced user embedded in a friends list."""
    model_config = ConfigDict(populate_by_name=True)

    U_ID: int
    U_Name: Optional[str] = None
    self_link: str = Field(alias="self")


class UserResponse(BaseModel):
    """Schema for user response to client."""
    model_config = ConfigDict(populate_by_name=True)

    U_ID: int
    U_Auth_Sub: str
    U_Name: Optional[str] = None
    U_Email: Optional[str] = None
    U_Profile: Optional[str] = None

    Is_Custom_Time: bool = False
    Custom_Time_Alarm: Optional[str] = None
    Today_Time: Optional[datetime] = None
    Time_Length: int = 10
    Pixel_Amount: int = 10

    U_Friends: List[FriendSummary] = []

    self_link: str = Field(alias="self")
