# gateway/graph_types.py

from typing import Any, List, Optional, Type, TypeVar

import pydantic
import strawberry
from strawberry.types import Info

from gateway import models
from gateway.errors import TransportError
from gateway.rest_client import resource_path

Model = TypeVar("Model", bound=pydantic.BaseModel)


def parse(model: Type[Model], payload: Any) -> Model:
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise TransportError(f"Malformed {model.__name__} in backend response") from exc


@strawberry.type(name="Company")
class CompanyType:
    id: str
    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "CompanyType":
        company = parse(models.Company, payload)
        return cls(id=company.id, name=company.name, description=company.description)

    @strawberry.field
    async def users(self, info: Info) -> Optional[List["UserType"]]:
        payload = await info.context.rest.get(resource_path("companies", self.id, "users"))
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise TransportError(f"Expected a list of users for company {self.id}")
        return [UserType.from_payload(item) for item in payload]


@strawberry.type(name="User")
class UserType:
    id: str
    first_name: Optional[str] = None
    age: Optional[int] = None
    company_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "UserType":
        user = parse(models.User, payload)
        return cls(id=user.id, first_name=user.first_name, age=user.age, company_id=user.company_id)

    @strawberry.field
    async def company(self, info: Info) -> Optional[CompanyType]:
        # No link, nothing to fetch
        if self.company_id is None:
            return None
        payload = await info.context.rest.get(resource_path("companies", self.company_id))
        return CompanyType.from_payload(payload)
