from typing import Annotated
from pydantic import BaseModel, Field, field_validator


class PreferenceCreate(BaseModel):
    preference_value: Annotated[str, Field(min_length=1, max_length=128, examples=["Coffee"])]
    is_default: bool = False

    @field_validator("preference_value", mode="before")
    @classmethod
    def strip_value(cls, v):
        return v.strip() if isinstance(v, str) else v


class PreferenceOut(BaseModel):
    id: int
    preference_type: str
    preference_value: str
    is_default: bool


class DefaultPreferenceOut(BaseModel):
    id: int
    preference_type: str
    preference_value: str
