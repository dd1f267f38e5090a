"""Tests for request/response schema validation and camelCase serialization."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from app.application.dtos.order import OrderResult
from app.application.dtos.organization import OrganizationResult
from app.application.dtos.user import UserResult
from app.schemas.order import OrderCreateRequest, OrderResponse, OrderUpdateRequest
from app.schemas.organization import (
    OrganizationCreateRequest,
    OrganizationUpdateRequest,
)
from app.schemas.user import UserCreateRequest, UserUpdateRequest

YESTERDAY = datetime.now(UTC) - timedelta(days=1)
TOMORROW = datetime.now(UTC) + timedelta(days=1)


def test_organization_name_is_trimmed() -> None:
    body = OrganizationCreateRequest.model_validate({"name": "  Acme  "})
    assert body.name == "Acme"
    assert body.industry is None
    assert body.date_founded is None


@pytest.mark.parametrize("name", ["", "   "])
def test_organization_blank_name_rejected(name: str) -> None:
    with pytest.raises(ValidationError):
        OrganizationCreateRequest.model_validate({"name": name})


def test_organization_future_founding_date_rejected() -> None:
    with pytest.raises(ValidationError, match="date must be in the past"):
        OrganizationCreateRequest.model_validate(
            {"name": "Acme", "dateFounded": TOMORROW.isoformat()}
        )


def test_naive_dates_are_read_as_utc() -> None:
    body = OrganizationCreateRequest.model_validate(
        {"name": "Acme", "dateFounded": "2001-02-03T04:05:06"}
    )
    assert body.date_founded == datetime(2001, 2, 3, 4, 5, 6, tzinfo=UTC)


def test_organization_industry_max_length() -> None:
    with pytest.raises(ValidationError):
        OrganizationCreateRequest.model_validate({"name": "Acme", "industry": "x" * 256})


def test_organization_update_changes_only_sent_fields() -> None:
    body = OrganizationUpdateRequest.model_validate({"industry": None})
    assert body.changes() == {"industry": None}


def test_organization_update_rejects_null_name() -> None:
    with pytest.raises(ValidationError, match="fields cannot be null: name"):
        OrganizationUpdateRequest.model_validate({"name": None})


def test_user_create_accepts_camel_case() -> None:
    body = UserCreateRequest.model_validate(
        {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "password": "long-enough",
            "organizationId": "org1",
        }
    )
    assert body.first_name == "Ada"
    assert body.organization_id == "org1"


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("email", "not-an-email"),
        ("password", "short"),
        ("firstName", " "),
        ("organizationId", ""),
        ("dateCreated", TOMORROW.isoformat()),
    ],
)
def test_user_create_invalid_fields(field: str, value: str) -> None:
    data = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "password": "long-enough",
        "organizationId": "org1",
        field: value,
    }
    with pytest.raises(ValidationError):
        UserCreateRequest.model_validate(data)


def test_user_update_password_kept_in_changes() -> None:
    body = UserUpdateRequest.model_validate({"password": "new-password", "lastName": "Byron"})
    assert body.changes() == {"password": "new-password", "last_name": "Byron"}


def test_order_create_valid() -> None:
    body = OrderCreateRequest.model_validate(
        {
            "orderDate": YESTERDAY.isoformat(),
            "totalAmount": "19.99",
            "userId": "u1",
            "organizationId": "org1",
        }
    )
    assert body.total_amount == 19.99


@pytest.mark.parametrize("amount", [0, -1, "abc", 100_000_000])
def test_order_total_amount_must_be_positive_number(amount: object) -> None:
    with pytest.raises(ValidationError):
        OrderCreateRequest.model_validate(
            {
                "orderDate": YESTERDAY.isoformat(),
                "totalAmount": amount,
                "userId": "u1",
                "organizationId": "org1",
            }
        )


def test_order_date_must_be_in_the_past() -> None:
    with pytest.raises(ValidationError):
        OrderCreateRequest.model_validate(
            {
                "orderDate": TOMORROW.isoformat(),
                "totalAmount": 5,
                "userId": "u1",
                "organizationId": "org1",
            }
        )


def test_order_update_rejects_null_required_fields() -> None:
    with pytest.raises(ValidationError):
        OrderUpdateRequest.model_validate({"totalAmount": None})


def test_order_response_omits_missing_joins() -> None:
    order = OrderResult(
        id="o1",
        order_date=datetime(2024, 1, 2, tzinfo=UTC),
        total_amount=10.5,
        user_id="u1",
        organization_id="org1",
    )
    body = OrderResponse.from_result(order).to_body()
    assert body == {
        "id": "o1",
        "orderDate": "2024-01-02T00:00:00Z",
        "totalAmount": 10.5,
        "userId": "u1",
        "organizationId": "org1",
    }


def test_order_response_includes_joins() -> None:
    org = OrganizationResult(id="org1", name="Acme", industry=None, date_founded=None)
    user = UserResult(
        id="u1",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        date_created=None,
        organization_id="org1",
    )
    order = OrderResult(
        id="o1",
        order_date=datetime(2024, 1, 2, tzinfo=UTC),
        total_amount=10.0,
        user_id="u1",
        organization_id="org1",
        user=user,
        organization=org,
    )
    body = OrderResponse.from_result(order).to_body()
    assert body["user"]["firstName"] == "Ada"
    assert body["organization"] == {
        "id": "org1",
        "name": "Acme",
        "industry": None,
        "dateFounded": None,
    }
