"""Tests for the in-memory mention resolver."""

import json

import pytest

from discord_markdown.core.discord.models.user import User
from discord_markdown.core.discord.resolver import InMemoryMentionResolver, MentionResolver
from discord_markdown.core.exceptions import DiscordMarkdownError, MentionDataError


class TestLookups:
    def test_hits(self, resolver):
        assert resolver.get_user("42").name == "Alice"
        assert resolver.get_channel("100").name == "general"
        assert resolver.get_role("2001").name == "Moderator"

    def test_misses_return_none(self, empty_resolver):
        assert empty_resolver.get_user("1") is None
        assert empty_resolver.get_channel("1") is None
        assert empty_resolver.get_role("1") is None

    def test_is_a_mention_resolver(self, resolver):
        assert isinstance(resolver, MentionResolver)

    def test_abstract_resolver_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            MentionResolver()  # type: ignore[abstract]

    def test_later_entry_with_same_id_wins(self):
        resolver = InMemoryMentionResolver(users=[User(id="1", name="a"), User(id="1", name="b")])
        assert resolver.get_user("1").name == "b"


class TestFromMapping:
    def test_library_shape(self):
        resolver = InMemoryMentionResolver.from_mapping(
            {
                "users": [{"id": "1", "name": "alice"}],
                "channels": [{"id": "2", "name": "general"}],
                "roles": [{"id": "3", "name": "Mod", "color": "#ff0000"}],
            }
        )
        assert resolver.get_user("1").full_name == "alice"
        assert resolver.get_channel("2").name == "general"
        assert resolver.get_role("3").color == "#ff0000"

    def test_api_shape(self):
        resolver = InMemoryMentionResolver.from_mapping(
            {
                "users": [{"id": 1, "username": "bob", "discriminator": "0042"}],
                "channels": [{"id": 2, "type": 2, "name": "Lounge"}],
                "roles": [{"id": 3, "name": "Mod", "color": 255}],
            }
        )
        assert resolver.get_user("1").full_name == "bob#0042"
        assert resolver.get_channel("2").is_voice
        assert resolver.get_role("3").color == "#0000ff"

    def test_missing_sections_are_empty(self):
        resolver = InMemoryMentionResolver.from_mapping({"users": None})
        assert resolver.get_user("1") is None

    def test_invalid_entry(self):
        with pytest.raises(MentionDataError) as exc_info:
            InMemoryMentionResolver.from_mapping({"users": [{"id": "1"}]})
        assert exc_info.value.is_fatal

    @pytest.mark.parametrize("color", ["red", "#abc"])
    def test_malformed_role_color(self, color):
        with pytest.raises(MentionDataError) as exc_info:
            InMemoryMentionResolver.from_mapping({"roles": [{"id": "1", "name": "Mod", "color": color}]})
        assert exc_info.value.is_fatal

    def test_not_a_mapping(self):
        with pytest.raises(DiscordMarkdownError):
            InMemoryMentionResolver.from_mapping(["users"])  # type: ignore[arg-type]


class TestFromFile:
    def test_reads_json(self, tmp_path):
        path = tmp_path / "mentions.json"
        path.write_text(json.dumps({"users": [{"id": "42", "name": "Alice"}]}), encoding="utf-8")
        resolver = InMemoryMentionResolver.from_file(path)
        assert resolver.get_user("42").name == "Alice"

    def test_missing_file(self, tmp_path):
        with pytest.raises(MentionDataError):
            InMemoryMentionResolver.from_file(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MentionDataError, match="not valid JSON"):
            InMemoryMentionResolver.from_file(path)
