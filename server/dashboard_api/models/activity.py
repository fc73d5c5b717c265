"""Activity log data models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, Optional, Union

from activity_tracker import ActivityRecord, TypeInfo

MetadataValue = Union[str, int, float, bool, None]


class TypeInfoModel(BaseModel):
    """Category, label and icon of an activity type."""

    category: str
    label: str
    icon: str

    @classmethod
    def from_type_info(cls, info: TypeInfo) -> "TypeInfoModel":
        return cls(**info.to_dict())


class Activity(BaseModel):
    """A logged activity."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    type_info: TypeInfoModel = Field(serialization_alias="typeInfo")
    metadata: Dict[str, MetadataValue] = {}
    patient_id: str = Field(serialization_alias="patientId")
    timestamp: str
    date: str

    @classmethod
    def from_record(cls, record: ActivityRecord) -> "Activity":
        return cls(
            id=record.id,
            type=record.type,
            type_info=TypeInfoModel.from_type_info(record.type_info),
            metadata=dict(record.metadata),
            patient_id=record.patient_id,
            timestamp=record.timestamp,
            date=record.date,
        )


class TrackActivityRequest(BaseModel):
    """Request body for logging an activity."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(min_length=1)
    metadata: Dict[str, MetadataValue] = {}
    patient_id: Optional[str] = Field(default=None, alias="patientId")


class ActivityTypeEntry(BaseModel):
    """Entry of the activity type table."""

    type: str
    category: str
    label: str
    icon: str


class SeedResult(BaseModel):
    """Result of seeding demo activities."""

    model_config = ConfigDict(populate_by_name=True)

    patient_id: str = Field(serialization_alias="patientId")
    seeded: int
