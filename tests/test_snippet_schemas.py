"""
Snippet payload validation and normalization.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from snipshare.shared.models.enums import ProgrammingLanguage
from snipshare.shared.schemas.snippet import (
    SnippetCreate,
    SnippetUpdate,
    normalize_tags,
    parse_tag_filter,
)


def _payload(**overrides):
    body = {
        "title": "Debounce",
        "code": "const x = 1;",
        "language": "javascript",
    }
    body.update(overrides)
    return body


def _failed_fields(exc_info) -> set[str]:
    return {str(error["loc"][-1]) for error in exc_info.value.errors()}


class TestTagNormalization:

    def test_lowercases_trims_and_keeps_duplicates(self):
        assert normalize_tags(["  React ", "JavaScript", "react"]) == ["react", "javascript", "react"]

    def test_drops_empty_tags(self):
        assert normalize_tags(["", "   ", "go"]) == ["go"]

    def test_create_normalizes_tags(self):
        snippet = SnippetCreate.model_validate(_payload(tags=["  React ", "JavaScript", "react"]))
        assert snippet.tags == ["react", "javascript", "react"]

    def test_tag_filter_splits_on_commas(self):
        assert parse_tag_filter("React, vue ,,") == ["react", "vue"]
        assert parse_tag_filter(None) == []


class TestSnippetCreate:

    def test_defaults(self):
        snippet = SnippetCreate.model_validate(_payload())
        assert snippet.tags == []
        assert snippet.snippet_collection == "uncategorized"
        assert snippet.is_public is False
        assert snippet.language == ProgrammingLanguage.JAVASCRIPT

    def test_trims_strings(self):
        snippet = SnippetCreate.model_validate(
            _payload(title="  Debounce  ", description="  short  ", snippetCollection=" utils ")
        )
        assert snippet.title == "Debounce"
        assert snippet.description == "short"
        assert snippet.snippet_collection == "utils"

    def test_accepts_collection_alias(self):
        snippet = SnippetCreate.model_validate(_payload(collection="hooks"))
        assert snippet.snippet_collection == "hooks"

    def test_blank_collection_falls_back_to_default(self):
        snippet = SnippetCreate.model_validate(_payload(snippetCollection="   "))
        assert snippet.snippet_collection == "uncategorized"

    @pytest.mark.parametrize("language", ["Python", " python", "PYTHON"])
    def test_language_must_match_exactly(self, language):
        with pytest.raises(PydanticValidationError) as exc_info:
            SnippetCreate.model_validate(_payload(language=language))
        assert _failed_fields(exc_info) == {"language"}

    def test_reports_every_offending_field(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            SnippetCreate.model_validate(
                _payload(title="x" * 101, code="   ", language="klingon")
            )
        assert _failed_fields(exc_info) == {"title", "code", "language"}

    def test_missing_required_fields(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            SnippetCreate.model_validate({})
        assert {"title", "code", "language"} <= _failed_fields(exc_info)

    def test_description_length_limit(self):
        with pytest.raises(PydanticValidationError):
            SnippetCreate.model_validate(_payload(description="d" * 501))

    def test_title_at_limit_is_accepted(self):
        snippet = SnippetCreate.model_validate(_payload(title="t" * 100))
        assert len(snippet.title) == 100


class TestSnippetUpdate:

    def test_changes_only_include_sent_fields(self):
        update = SnippetUpdate.model_validate({"title": "Renamed", "isPublic": True})
        assert update.changes() == {"title": "Renamed", "is_public": True}

    def test_protected_fields_are_ignored(self):
        update = SnippetUpdate.model_validate(
            {
                "title": "Renamed",
                "author": "someone-else",
                "likes": ["a", "b"],
                "views": 1000,
                "forks": [],
                "isForked": True,
                "originalSnippet": "abc",
            }
        )
        assert update.changes() == {"title": "Renamed"}

    def test_null_fields_are_skipped(self):
        update = SnippetUpdate.model_validate({"description": None, "tags": ["A"]})
        assert update.changes() == {"tags": ["a"]}

    def test_update_validates_like_create(self):
        with pytest.raises(PydanticValidationError):
            SnippetUpdate.model_validate({"title": "   "})
