from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from runova.schemas.common import CamelModel, DistanceUnit


class ProfileCreate(CamelModel):
    full_name: Optional[str] = None
    distance_unit: Optional[DistanceUnit] = None


class ProfileUpdate(CamelModel):
    """Settings form; unset fields are left alone."""

    full_name: Optional[str] = None
    distance_unit: Optional[DistanceUnit] = None


class ProfileRead(BaseModel):
    id: UUID
    email: str
    full_name: Optional[str] = None
    distance_unit: DistanceUnit
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
