"""Tests for request validation."""

import pytest
from pydantic import ValidationError

from app.models.fortune_models import (
    FortuneDrawCreate,
    FortuneSessionListRequest,
    FortuneTemplateCreate,
    FortuneTemplateListRequest,
    FortuneTemplateUpdate,
)


class TestTemplateCreate:
    def test_body_is_required(self):
        with pytest.raises(ValidationError):
            FortuneTemplateCreate(title="No body")

    def test_empty_body_is_rejected(self):
        with pytest.raises(ValidationError):
            FortuneTemplateCreate(body="")


class TestTemplateUpdate:
    def test_no_fields_is_rejected(self):
        with pytest.raises(ValidationError, match="At least one field must be provided"):
            FortuneTemplateUpdate()

    def test_only_sent_fields_are_changes(self):
        request = FortuneTemplateUpdate.model_validate({"tone": "balanced"})
        assert request.changes() == {"tone": "balanced"}

    def test_camel_case_keys_are_accepted(self):
        request = FortuneTemplateUpdate.model_validate({"isActive": False})
        assert request.changes() == {"is_active": False}

    def test_explicit_null_title_clears_it(self):
        request = FortuneTemplateUpdate.model_validate({"title": None})
        assert request.changes() == {"title": None}

    @pytest.mark.parametrize("payload", [{"body": None}, {"isActive": None}, {"body": ""}])
    def test_required_columns_cannot_be_blanked(self, payload):
        with pytest.raises(ValidationError):
            FortuneTemplateUpdate.model_validate(payload)


class TestListDefaults:
    def test_template_listing_defaults(self):
        request = FortuneTemplateListRequest()
        assert request.include_inactive is False
        assert request.include_system is True
        assert request.include_mine is True

    def test_session_listing_defaults(self):
        request = FortuneSessionListRequest()
        assert (request.page, request.page_size) == (1, 20)

    @pytest.mark.parametrize("payload", [{"page": 0}, {"pageSize": 0}, {"pageSize": 101}])
    def test_session_listing_bounds(self, payload):
        with pytest.raises(ValidationError):
            FortuneSessionListRequest.model_validate(payload)


class TestDrawCreate:
    def test_everything_is_optional(self):
        request = FortuneDrawCreate()
        assert request.fortune_template_id is None
        assert request.position_index is None

    @pytest.mark.parametrize("position", [0, -1])
    def test_position_must_be_positive(self, position):
        with pytest.raises(ValidationError):
            FortuneDrawCreate(position_index=position)
