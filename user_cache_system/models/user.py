from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date
from enum import Enum


class ClientType(str, Enum):
    """Client classification determining credit policy"""
    VERY_IMPORTANT = "VERY_IMPORTANT"
    IMPORTANT = "IMPORTANT"
    REGULAR = "REGULAR"


class Client(BaseModel):
    """Client organization that users belong to"""
    id: str = Field(..., description="Unique client identifier")
    name: str = Field(..., description="Display name of the organization")
    type: ClientType = Field(..., description="Classification determining credit policy")


class User(BaseModel):
    """Model representing a user of a client organization"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Unique user identifier (UUID)")
    client: Client
    date_of_birth: Optional[date] = Field(None, alias="dateOfBirth")
    email: str = Field(..., description="Unique email address")
    firstname: str
    surname: str
    has_credit_limit: bool = Field(False, alias="hasCreditLimit")
    credit_limit: float = Field(0.0, alias="creditLimit")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _strip_time_component(cls, value):
        # Stored dates may carry a time part ("1990-01-01T00:00:00")
        if isinstance(value, str):
            try:
                return date.fromisoformat(value.split("T", 1)[0])
            except ValueError:
                return None
        return value
