"""
Tests for shared models.
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from shared.models import Account


class TestAccount:
    """Tests for the public Account model."""

    def test_create_with_required_fields(self):
        account = Account(id="user-1", email="a@x.com", first_name="A", last_name="B")
        assert account.phone == ""
        assert account.created_at is None

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            Account(id="user-1", email="not-an-email", first_name="A", last_name="B")

    def test_camel_case_aliases(self):
        """Accepts and emits the storefront's camelCase keys."""
        account = Account.model_validate(
            {"id": "user-1", "email": "a@x.com", "firstName": "A", "lastName": "B",
             "createdAt": "2024-06-01T00:00:00Z"}
        )
        assert account.created_at == datetime(2024, 6, 1, tzinfo=timezone.utc)
        data = account.model_dump(by_alias=True)
        assert set(data) == {"id", "email", "firstName", "lastName", "phone", "createdAt"}

    def test_frozen(self):
        account = Account(id="user-1", email="a@x.com", first_name="A", last_name="B")
        with pytest.raises(ValidationError):
            account.email = "b@x.com"
