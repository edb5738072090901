from __future__ import annotations

import os
from pathlib import Path

import pytest

from supercast.errors import InvalidRequestError
from supercast.util import encode_params, member_url, normalize_id, quote_segment
from supercast.utils.env import getenv_number, load_env_file_if_present


@pytest.fixture
def isolated_env():
    """Snapshot os.environ so keys loaded from .env files do not leak."""
    saved = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(saved)


class TestLoadEnvFileIfPresent:
    def test_load_existing_env_file(self, tmp_path, isolated_env):
        env_file = tmp_path / ".env"
        env_file.write_text(
            """
# This is a comment
SUPERCAST_API_KEY=sk_file_123
SUPERCAST_API_BASE=https://custom.api.com
EMPTY_LINE=

QUOTED_VALUE="quoted_string"
SINGLE_QUOTED='single_quoted'
export EXPORTED=yes
"""
        )
        for key in ["SUPERCAST_API_KEY", "SUPERCAST_API_BASE", "QUOTED_VALUE", "SINGLE_QUOTED"]:
            os.environ.pop(key, None)

        result = load_env_file_if_present(env_file)

        assert result == {
            "SUPERCAST_API_KEY": "sk_file_123",
            "SUPERCAST_API_BASE": "https://custom.api.com",
            "EMPTY_LINE": "",
            "QUOTED_VALUE": "quoted_string",
            "SINGLE_QUOTED": "single_quoted",
            "EXPORTED": "yes",
        }
        assert os.environ["SUPERCAST_API_KEY"] == "sk_file_123"
        assert os.environ["QUOTED_VALUE"] == "quoted_string"

    def test_nonexistent_file_returns_empty_dict(self, tmp_path):
        assert load_env_file_if_present(tmp_path / "nonexistent.env") == {}

    def test_ignore_lines_without_equals(self, tmp_path, isolated_env):
        env_file = tmp_path / ".env"
        env_file.write_text("VALID_KEY=valid_value\nINVALID_LINE_NO_EQUALS\n  # comment=1\n")

        assert load_env_file_if_present(env_file) == {"VALID_KEY": "valid_value"}

    def test_handle_equals_in_value(self, tmp_path, isolated_env):
        env_file = tmp_path / ".env"
        env_file.write_text("URL_WITH_QUERY=https://api.example.com/endpoint?key=value&a=b\n")

        result = load_env_file_if_present(env_file)

        assert result == {"URL_WITH_QUERY": "https://api.example.com/endpoint?key=value&a=b"}

    def test_respect_existing_environment_variables(self, tmp_path, isolated_env):
        env_file = tmp_path / ".env"
        env_file.write_text("EXISTING_VAR=from_file")
        os.environ["EXISTING_VAR"] = "from_env"

        result = load_env_file_if_present(env_file)

        assert result == {"EXISTING_VAR": "from_file"}
        assert os.environ["EXISTING_VAR"] == "from_env"

    def test_override_replaces_existing_values(self, tmp_path, isolated_env):
        env_file = tmp_path / ".env"
        env_file.write_text("EXISTING_VAR=from_file")
        os.environ["EXISTING_VAR"] = "from_env"

        load_env_file_if_present(env_file, override=True)

        assert os.environ["EXISTING_VAR"] == "from_file"

    def test_string_and_path_input(self, tmp_path, isolated_env):
        env_file = tmp_path / ".env"
        env_file.write_text("PATH_TEST=success")

        assert load_env_file_if_present(str(env_file)) == {"PATH_TEST": "success"}
        assert load_env_file_if_present(Path(env_file)) == {"PATH_TEST": "success"}


class TestGetenvNumber:
    def test_unset_returns_none(self, monkeypatch):
        monkeypatch.delenv("SUPERCAST_TEST_NUMBER", raising=False)

        assert getenv_number("SUPERCAST_TEST_NUMBER", int) is None

    def test_blank_returns_none(self, monkeypatch):
        monkeypatch.setenv("SUPERCAST_TEST_NUMBER", "  ")

        assert getenv_number("SUPERCAST_TEST_NUMBER", float) is None

    def test_casts_value(self, monkeypatch):
        monkeypatch.setenv("SUPERCAST_TEST_NUMBER", " 12 ")

        assert getenv_number("SUPERCAST_TEST_NUMBER", int) == 12


class TestNormalizeId:
    def test_scalar_id(self):
        assert normalize_id("ep_1") == ("ep_1", {})

    def test_mapping_id(self):
        assert normalize_id({"id": 5, "expand": "channel"}) == (5, {"expand": "channel"})

    def test_mapping_without_id(self):
        assert normalize_id({"expand": "channel"}) == (None, {"expand": "channel"})

    def test_input_mapping_not_mutated(self):
        raw = {"id": 5, "expand": "channel"}

        normalize_id(raw)

        assert raw == {"id": 5, "expand": "channel"}


class TestQuoteSegment:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("simple", "simple"),
            ("with space", "with%20space"),
            ("a/b", "a%2Fb"),
            ("q?x=1&y", "q%3Fx%3D1%26y"),
            (42, "42"),
        ],
    )
    def test_quote_segment(self, value, expected):
        assert quote_segment(value) == expected


class TestMemberUrl:
    def test_builds_quoted_member_url(self):
        assert member_url("/episodes", "ep 1", "Episode") == "/episodes/ep%201"

    @pytest.mark.parametrize("id", [None, ""])
    def test_missing_id_raises(self, id):
        with pytest.raises(InvalidRequestError, match="Episode has invalid ID") as exc_info:
            member_url("/episodes", id, "Episode")

        assert exc_info.value.param == "id"


class TestEncodeParams:
    def test_flat_params_unchanged(self):
        assert encode_params({"status": "published", "page": 2}) == {"status": "published", "page": 2}

    def test_nested_mapping_uses_bracketed_keys(self):
        params = {"filter": {"status": "published", "channel": {"id": 7}}}

        assert encode_params(params) == {
            "filter[status]": "published",
            "filter[channel][id]": 7,
        }

    def test_scalar_list_uses_empty_brackets(self):
        assert encode_params({"ids": [1, 2]}) == {"ids[]": [1, 2]}

    def test_list_of_mappings_is_indexed(self):
        params = {"sort": [{"field": "title"}, {"field": "id"}]}

        assert encode_params(params) == {"sort[0][field]": "title", "sort[1][field]": "id"}
