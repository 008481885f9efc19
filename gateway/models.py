from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_str(value: Any) -> Any:
    # json-server hands out numeric ids
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class Company(BaseModel):
    id: str = Field(..., description="Company id assigned by the backend")
    name: str
    description: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return _as_str(value)


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User id assigned by the backend")
    first_name: str = Field(..., alias="firstName")
    age: int
    company_id: Optional[str] = Field(None, alias="companyId")

    @field_validator("id", "company_id", mode="before")
    @classmethod
    def coerce_ids(cls, value):
        return _as_str(value)


class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName")
    age: int
    company_id: Optional[str] = Field(None, alias="companyId")

    def payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class UserUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    age: Optional[int] = None
    company_id: Optional[str] = Field(None, alias="companyId")

    def payload(self) -> dict:
        # Only the fields the caller actually set go into the PATCH body
        return self.model_dump(by_alias=True, exclude_unset=True)
