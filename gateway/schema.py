"""GraphQL schema: root query and mutation types bound into one schema.

Every root field forwards to a single REST call. Nested relation fields on
``User`` and ``Company`` fetch on demand, so a query asking for a company and
its users costs one call for the company plus one for its users.
"""

import logging
from typing import Optional

import strawberry
from strawberry.types import Info

from gateway.errors import ValidationError
from gateway.graph_types import CompanyType, UserType
from gateway.models import UserCreate, UserUpdate
from gateway.rest_client import resource_path

logger = logging.getLogger(__name__)


def require_id(value: Optional[str], field: str = "id") -> str:
    if value is None or not value.strip():
        raise ValidationError(f"Argument '{field}' must be a non-empty string")
    return value


@strawberry.type
class Query:
    @strawberry.field
    async def user(self, info: Info, id: Optional[str] = None) -> Optional[UserType]:
        user_id = require_id(id)
        payload = await info.context.rest.get(resource_path("users", user_id))
        return UserType.from_payload(payload)

    @strawberry.field
    async def company(self, info: Info, id: Optional[str] = None) -> Optional[CompanyType]:
        company_id = require_id(id)
        payload = await info.context.rest.get(resource_path("companies", company_id))
        return CompanyType.from_payload(payload)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_user(
        self,
        info: Info,
        first_name: str,
        age: int,
        company_id: Optional[str] = None,
    ) -> Optional[UserType]:
        body = UserCreate(first_name=first_name, age=age, company_id=company_id).payload()
        payload = await info.context.rest.post(resource_path("users"), body)
        user = UserType.from_payload(payload)
        logger.info("Created user %s", user.id)
        return user

    @strawberry.mutation
    async def edit_user(
        self,
        info: Info,
        id: str,
        first_name: Optional[str] = strawberry.UNSET,
        age: Optional[int] = strawberry.UNSET,
        company_id: Optional[str] = strawberry.UNSET,
    ) -> Optional[UserType]:
        user_id = require_id(id)
        # companyId may be cleared, the mandatory fields may not
        for name, value in (("firstName", first_name), ("age", age)):
            if value is None:
                raise ValidationError(f"Argument '{name}' cannot be null")
        provided = {
            name: value
            for name, value in (("first_name", first_name), ("age", age), ("company_id", company_id))
            if value is not strawberry.UNSET
        }
        body = UserUpdate(**provided).payload()
        payload = await info.context.rest.patch(resource_path("users", user_id), body)
        return UserType.from_payload(payload)

    @strawberry.mutation
    async def delete_user(self, info: Info, id: str) -> Optional[UserType]:
        user_id = require_id(id)
        payload = await info.context.rest.delete(resource_path("users", user_id))
        logger.info("Deleted user %s", user_id)
        # json-server answers a delete with an empty object
        if not payload:
            return UserType(id=user_id)
        return UserType.from_payload(payload)


schema = strawberry.Schema(query=Query, mutation=Mutation)
