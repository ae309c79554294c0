from datetime import datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

OptionKind = Literal["activities", "servings"]
BarFlag = Literal["is_facilitated", "is_active"]
OpeningHoursBoundary = Literal["open", "close"]
Coordinate = Union[float, str]


# Opening hours


class OpeningHoursDay(BaseModel):
    open: Optional[str] = ""
    close: Optional[str] = ""


class OpeningHoursBoundaryUpdate(BaseModel):
    value: str = ""


class OpeningHoursSummary(BaseModel):
    text: str


# Bars


class BarCreate(BaseModel):
    name: str = Field(min_length=1)
    website: Optional[str] = None
    featured_image: Optional[str] = None
    logo: Optional[str] = None
    price: Optional[str] = None
    age_restriction: int = Field(default=0, ge=0)
    is_facilitated: bool = False
    is_active: bool = True
    address: Optional[str] = None
    activities: List[str] = Field(default_factory=list)
    servings: List[str] = Field(default_factory=list)
    opening_hours: Optional[Dict[str, OpeningHoursDay]] = None
    lat: Optional[Coordinate] = None
    lon: Optional[Coordinate] = None


class BarUpdate(BaseModel):
    name: Optional[str] = None
    website: Optional[str] = None
    featured_image: Optional[str] = None
    logo: Optional[str] = None
    price: Optional[str] = None
    age_restriction: Optional[int] = Field(default=None, ge=0)
    is_facilitated: Optional[bool] = None
    is_active: Optional[bool] = None
    address: Optional[str] = None
    activities: Optional[List[str]] = None
    servings: Optional[List[str]] = None
    opening_hours: Optional[Dict[str, OpeningHoursDay]] = None
    lat: Optional[Coordinate] = None
    lon: Optional[Coordinate] = None


class BarDraft(BaseModel):
    name: str = ""
    website: str = ""
    featured_image: str = ""
    logo: str = ""
    price: str = ""
    age_restriction: int = 0
    is_facilitated: bool = False
    is_active: bool = True
    address: str = ""
    activities: List[str] = Field(default_factory=list)
    servings: List[str] = Field(default_factory=list)
    opening_hours: Dict[str, OpeningHoursDay]
    available_activities: List[str] = Field(default_factory=list)
    available_servings: List[str] = Field(default_factory=list)


class BarOut(BaseModel):
    id: str
    name: str
    website: Optional[str] = None
    featured_image: Optional[str] = None
    logo: Optional[str] = None
    price: Optional[str] = None
    age_restriction: int
    is_facilitated: bool
    is_active: bool
    address: Optional[str] = None
    activities: List[str] = Field(default_factory=list)
    servings: List[str] = Field(default_factory=list)
    opening_hours: Dict[str, OpeningHoursDay] = Field(default_factory=dict)
    opening_hours_text: str
    lat: Optional[float] = None
    lon: Optional[float] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Options


class OptionCreate(BaseModel):
    name: str
    display_order: int = 0


class OptionOut(BaseModel):
    id: int
    name: str
    display_order: int

    class Config:
        from_attributes = True


class OptionsOut(BaseModel):
    activities: List[str] = Field(default_factory=list)
    servings: List[str] = Field(default_factory=list)
