"""Tests for the URL expression builder."""

import pytest

from gdgen.errors import UnmatchedPlaceholderError
from gdgen.urls import parse_url_params


def _path(name):
    return {"name": name, "in": "path", "required": True, "type": "string"}


class TestParseUrlParams:
    """Test GDScript URL expression generation."""

    def test_single_path_param(self):
        result = parse_url_params("/v1/gameservers/{id}", [_path("id")])
        assert result == '("/v1/gameservers/%s"% [id])'

    def test_param_order_preserved(self):
        result = parse_url_params("/v1/a/{x}/b/{y}", [_path("x"), _path("y")])
        assert result == '("/v1/a/%s/b/%s"% [x, y])'

    def test_param_order_follows_list_not_url(self):
        """Arguments follow parameter order even when the URL differs."""
        result = parse_url_params("/v1/a/{x}/b/{y}", [_path("y"), _path("x")])
        assert result.endswith("% [y, x])")

    def test_no_params(self):
        assert parse_url_params("/v1/health", []) == '("/v1/health")'

    def test_none_params(self):
        """Definitions without a parameters key pass None."""
        assert parse_url_params("/ready", None) == '("/ready")'

    def test_body_param_ignored(self):
        """Non-path parameters never substitute, even on a name match."""
        params = [{"name": "id", "in": "body", "schema": {}}]
        result = parse_url_params("/v1/gameservers/{id}", params)
        assert result == '("/v1/gameservers/{id}")'
        assert "%" not in result

    def test_query_param_ignored(self):
        params = [_path("name"), {"name": "limit", "in": "query", "type": "integer"}]
        assert parse_url_params("/v1/lists/{name}", params) == '("/v1/lists/%s"% [name])'

    def test_unmatched_placeholder_passes_through(self):
        result = parse_url_params("/v1/a/{x}/b/{y}", [_path("x")])
        assert result == '("/v1/a/%s/b/{y}"% [x])'

    def test_duplicate_names_kept(self):
        result = parse_url_params("/v1/{id}", [_path("id"), _path("id")])
        assert result == '("/v1/%s"% [id, id])'

    def test_repeated_placeholder_replaced_everywhere(self):
        result = parse_url_params("/v1/{id}/copy/{id}", [_path("id")])
        assert result == '("/v1/%s/copy/%s"% [id])'


class TestStrictMode:
    """Test failing on leftover placeholders."""

    def test_unmatched_raises(self):
        with pytest.raises(UnmatchedPlaceholderError) as exc_info:
            parse_url_params("/v1/a/{x}/b/{y}", [_path("x")], strict=True)
        assert exc_info.value.placeholders == ["{y}"]
        assert "/v1/a/{x}/b/{y}" in str(exc_info.value)

    def test_body_match_still_unmatched(self):
        params = [{"name": "id", "in": "body"}]
        with pytest.raises(UnmatchedPlaceholderError):
            parse_url_params("/v1/{id}", params, strict=True)

    def test_matched_output_unchanged(self):
        """Strict mode changes nothing when every placeholder matches."""
        params = [_path("x"), _path("y")]
        assert parse_url_params("/v1/a/{x}/b/{y}", params, strict=True) == parse_url_params(
            "/v1/a/{x}/b/{y}", params
        )
