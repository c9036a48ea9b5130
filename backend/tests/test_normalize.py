"""
Bugboard Backend — Response Normalization Tests
=================================================
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from app.services.normalize import bug_to_response, normalize_id, post_to_response

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestNormalizeId:

    def test_uuid(self):
        value = uuid.uuid4()
        assert normalize_id(value) == str(value)

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent(self, value):
        assert normalize_id(value) is None

    def test_idempotent(self):
        once = normalize_id(uuid.uuid4())
        assert normalize_id(once) == once

    def test_other_values(self):
        assert normalize_id(42) == "42"


class TestRecordConversion:

    def test_post(self):
        record = SimpleNamespace(
            id=uuid.uuid4(),
            title="T",
            content="C",
            author=uuid.uuid4(),
            category=None,
            slug=None,
            created_at=NOW,
            updated_at=NOW,
        )

        response = post_to_response(record)

        assert response.id == str(record.id)
        assert response.author == str(record.author)
        assert response.category is None
        assert response.slug == ""

    def test_bug(self):
        record = SimpleNamespace(
            id=uuid.uuid4(),
            title="T",
            description=None,
            status="open",
            reporter=None,
            created_at=NOW,
            updated_at=NOW,
        )

        response = bug_to_response(record)

        assert isinstance(response.id, str)
        assert response.reporter is None
        assert response.model_dump()["status"] == "open"
