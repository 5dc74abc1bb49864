"""Tests for the embed value objects and their serialization rules."""

import json

import pytest

from wikifeed.embeds import Embed, EmbedField, Payload


class TestEmbedField:
    def test_inline_false_is_omitted(self):
        assert EmbedField("Name", "Value", False).serialize() == {"name": "Name", "value": "Value"}

    def test_inline_true_is_emitted(self):
        assert EmbedField("Name", "Value", True).serialize() == {
            "name": "Name",
            "value": "Value",
            "inline": True,
        }

    def test_empty_parts_are_omitted(self):
        assert EmbedField("", None).serialize() == {}

    def test_setters_chain(self):
        embed_field = EmbedField().set_name("a").set_value("b").set_inline(True)
        assert embed_field.serialize() == {"name": "a", "value": "b", "inline": True}


class TestEmbed:
    def test_unset_embed_serializes_empty(self):
        assert Embed().serialize() == {}

    def test_chained_construction(self):
        embed = (
            Embed()
            .set_author("Main Page")
            .set_author_url("https://wiki.example.org/wiki/Main_Page")
            .set_author_icon_url("https://icons.example.org/add.png")
            .set_color(0x2ECC71)
            .set_description("hello")
            .set_footer_text("Monday, January 15, 2024 3:04 PM")
            .add_field(EmbedField("One", "1", True))
            .add_field(EmbedField("Two", "2"))
        )

        assert embed.serialize() == {
            "author": {
                "name": "Main Page",
                "url": "https://wiki.example.org/wiki/Main_Page",
                "icon_url": "https://icons.example.org/add.png",
            },
            "color": 0x2ECC71,
            "description": "hello",
            "footer": {"text": "Monday, January 15, 2024 3:04 PM"},
            "fields": [
                {"name": "One", "value": "1", "inline": True},
                {"name": "Two", "value": "2"},
            ],
        }

    def test_fields_keep_insertion_order(self):
        embed = Embed()
        for name in ("c", "a", "b"):
            embed.add_field(EmbedField(name, "x"))

        assert [f["name"] for f in embed.serialize()["fields"]] == ["c", "a", "b"]

    def test_incomplete_fields_are_dropped(self):
        embed = Embed().add_field(EmbedField("Name", "")).add_field(EmbedField("", "Value"))

        assert "fields" not in embed.serialize()

    def test_zero_color_is_kept(self):
        assert Embed().set_color(0).serialize() == {"color": 0}

    @pytest.mark.parametrize("color", [-1, 0x1000000])
    def test_color_must_fit_24_bits(self, color):
        with pytest.raises(ValueError):
            Embed().set_color(color)

    def test_author_icon_without_name(self):
        assert Embed().set_author_icon_url("https://i/x.png").serialize() == {
            "author": {"icon_url": "https://i/x.png"}
        }


class TestPayload:
    def test_null_content_without_embeds(self):
        assert Payload().set_content(None).serialize() == {"content": None}

    def test_content_and_embeds(self):
        payload = Payload().set_content("hi").add_embed(Embed().set_description("d"))

        assert payload.serialize() == {"content": "hi", "embeds": [{"description": "d"}]}

    def test_json_round_trip_keeps_field_text(self):
        payload = Payload().add_embed(
            Embed()
            .set_color(123)
            .set_description("désc")
            .set_footer_text("foot")
            .add_field(EmbedField("Name", "Value", True))
        )

        parsed = json.loads(payload.to_json())

        assert parsed["content"] is None
        embed = parsed["embeds"][0]
        assert embed["color"] == 123
        assert embed["description"] == "désc"
        assert embed["footer"] == {"text": "foot"}
        assert embed["fields"] == [{"name": "Name", "value": "Value", "inline": True}]
