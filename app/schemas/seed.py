"""Seed API schemas."""

from app.application.services.seed_service import SeedResult
from app.schemas.common import CamelModel


class SeededOrganizationResponse(CamelModel):
    name: str
    user_count: int


class SeededUserResponse(CamelModel):
    id: str
    email: str


class SeedResponse(CamelModel):
    """What POST /seed created."""

    organizations: list[SeededOrganizationResponse]
    users: list[SeededUserResponse]
    orders: list[str]

    @classmethod
    def from_result(cls, r: SeedResult) -> "SeedResponse":
        return cls(
            organizations=[
                SeededOrganizationResponse(name=o.name, user_count=o.user_count)
                for o in r.organizations
            ],
            users=[SeededUserResponse(id=u.id, email=u.email) for u in r.users],
            orders=list(r.orders),
        )
