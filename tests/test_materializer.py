"""Tests for recursive materialization of API payloads."""

from __future__ import annotations

from supercast import Channel, DataList, DataObject, Episode
from supercast.context import RequestContext
from supercast.registry import TypeRegistry
from supercast.resource import Resource
from supercast.util import convert_to_supercast_object


class TestConvertToSupercastObject:
    def test_scalars_pass_through(self):
        assert convert_to_supercast_object(5) == 5
        assert convert_to_supercast_object("text") == "text"
        assert convert_to_supercast_object(None) is None
        assert convert_to_supercast_object(1.5) == 1.5
        assert convert_to_supercast_object(True) is True

    def test_list_of_scalars_keeps_values_and_order(self):
        assert convert_to_supercast_object([3, 1, 2]) == [3, 1, 2]

    def test_registered_tag_resolves_to_registered_class(self, sample_episode_data):
        episode = convert_to_supercast_object(sample_episode_data)

        assert type(episode) is Episode
        assert episode.id == 42
        assert episode["title"] == "Pilot"

    def test_unknown_tag_falls_back_to_data_object(self):
        obj = convert_to_supercast_object({"object": "usage_alert", "id": 9, "level": "high"})

        assert type(obj) is DataObject
        assert obj.object == "usage_alert"
        assert obj.level == "high"

    def test_missing_tag_falls_back_to_data_object(self):
        obj = convert_to_supercast_object({"name": "untagged"})

        assert type(obj) is DataObject
        assert obj.name == "untagged"

    def test_nested_mappings_are_materialized(self, sample_episode_data):
        episode = convert_to_supercast_object(sample_episode_data)

        assert type(episode.channel) is Channel
        assert episode.channel.name == "Main Feed"
        assert type(episode.audio) is DataObject
        assert episode.audio.bytes == 29311488
        assert episode.tags == ["intro", "season-1"]
        assert [type(c) for c in episode.chapters] == [DataObject, DataObject]
        assert [c.start for c in episode.chapters] == [0, 312]

    def test_list_payload_becomes_data_list(self):
        payload = {
            "object": "list",
            "url": "/episodes",
            "data": [{"object": "episode", "id": 1}, {"object": "creator", "id": 2}],
        }

        result = convert_to_supercast_object(payload)

        assert type(result) is DataList
        assert [type(item).__name__ for item in result.data] == ["Episode", "Creator"]

    def test_top_level_list_of_mappings(self):
        result = convert_to_supercast_object(
            [{"object": "episode", "id": 1}, {"id": 2}, "raw"]
        )

        assert type(result[0]) is Episode
        assert type(result[1]) is DataObject
        assert result[2] == "raw"

    def test_context_propagates_to_nested_objects(self, sample_episode_data):
        ctx = RequestContext(api_key="sk_live_abc")

        episode = convert_to_supercast_object(sample_episode_data, ctx)

        assert episode.request_context == ctx
        assert episode.channel.request_context == ctx
        assert episode.chapters[0].request_context == ctx

    def test_field_order_is_preserved(self):
        obj = convert_to_supercast_object({"z": 1, "a": 2, "m": 3})

        assert list(obj.keys()) == ["z", "a", "m"]

    def test_custom_registry_is_used_throughout_the_tree(self):
        class Clip(Resource):
            OBJECT_NAME = "clip"

        registry = TypeRegistry()
        registry.register(Clip)

        result = convert_to_supercast_object(
            {"object": "clip", "id": 1, "related": {"object": "clip", "id": 2}},
            registry=registry,
        )

        assert type(result) is Clip
        assert type(result.related) is Clip

    def test_custom_registry_does_not_know_default_tags(self, sample_episode_data):
        result = convert_to_supercast_object(sample_episode_data, registry=TypeRegistry())

        assert type(result) is DataObject
