import json

import pytest
from structlog.testing import capture_logs

from gramkit import codec
from gramkit.errors import MalformedInputError, UnknownVariantError
from gramkit.objects import (
    INLINE_QUERY_RESULTS,
    ApiObject,
    InlineQueryResultArticle,
    InlineQueryResultGame,
    InlineQueryResultLocation,
    InlineQueryResultPhoto,
    InputTextMessageContent,
)
from gramkit.variants import VariantFamily
from tests.factories import article_result, button, game_result, keyboard


class _Alpha(ApiObject, tag="alpha", tag_field="kind", kw_only=True):
    value: str


class _OtherAlpha(ApiObject, tag="alpha", tag_field="kind", kw_only=True):
    value: str


class _Beta(ApiObject, tag="beta", tag_field="type", kw_only=True):
    value: str


class _Untagged(ApiObject, kw_only=True):
    value: str


def test_inline_query_result_family_members() -> None:
    assert INLINE_QUERY_RESULTS.tags == ("game", "article", "photo", "location")
    assert INLINE_QUERY_RESULTS.member_for("game") is InlineQueryResultGame
    assert "photo" in INLINE_QUERY_RESULTS
    assert len(INLINE_QUERY_RESULTS) == 4
    assert list(INLINE_QUERY_RESULTS) == [
        InlineQueryResultGame,
        InlineQueryResultArticle,
        InlineQueryResultPhoto,
        InlineQueryResultLocation,
    ]


def test_game_result_round_trips_through_family() -> None:
    result = game_result()
    decoded = INLINE_QUERY_RESULTS.decode(
        b'{"type":"game","id":"g1","game_short_name":"chess"}'
    )

    assert isinstance(decoded, InlineQueryResultGame)
    assert decoded == result
    assert INLINE_QUERY_RESULTS.decode(result.encode()) == result
    assert INLINE_QUERY_RESULTS.from_builtins(result.to_json()) == result


_SAMPLES = {
    "game": {"id": "g", "game_short_name": "chess"},
    "article": {
        "id": "a",
        "title": "t",
        "input_message_content": InputTextMessageContent(message_text="m"),
    },
    "photo": {
        "id": "p",
        "photo_url": "https://x/p.jpg",
        "thumb_url": "https://x/t.jpg",
    },
    "location": {"id": "l", "latitude": 1.0, "longitude": 2.0, "title": "t"},
}


@pytest.mark.parametrize("tag", INLINE_QUERY_RESULTS.tags)
def test_discriminator_is_fixed_per_member(tag: str) -> None:
    member = INLINE_QUERY_RESULTS.member_for(tag)
    result = member(**_SAMPLES[tag])

    assert result.type == tag
    assert result.to_json()["type"] == tag
    assert json.loads(result.encode())["type"] == tag
    assert codec.wire_fields(member)[0].literal == tag
    assert "type" not in member.__struct_fields__
    with pytest.raises(TypeError):
        member(type="other", **_SAMPLES[tag])
    assert INLINE_QUERY_RESULTS.decode(result.encode()) == result


def test_discriminator_cannot_be_reassigned() -> None:
    result = game_result()

    assert result.type == "game"
    with pytest.raises(AttributeError):
        result.type = "article"
    assert result.to_json()["type"] == "game"


def test_unknown_variant_is_reported() -> None:
    with capture_logs() as logs:
        with pytest.raises(UnknownVariantError) as exc:
            INLINE_QUERY_RESULTS.decode(b'{"type":"unknown_shape","id":"x"}')

    assert exc.value.tag == "unknown_shape"
    assert exc.value.family == "InlineQueryResult"
    assert any(entry["event"] == "variant.unknown" for entry in logs)


def test_unknown_variant_from_builtins() -> None:
    with pytest.raises(UnknownVariantError):
        INLINE_QUERY_RESULTS.from_builtins({"type": "voice", "id": "x"})


def test_unknown_variant_checked_before_fields() -> None:
    with pytest.raises(UnknownVariantError):
        INLINE_QUERY_RESULTS.decode(b'{"type":"sticker"}')


def test_missing_discriminator_is_malformed() -> None:
    with pytest.raises(MalformedInputError, match="missing discriminator"):
        INLINE_QUERY_RESULTS.decode(b'{"id":"x","game_short_name":"chess"}')


def test_non_string_discriminator_is_malformed() -> None:
    with pytest.raises(MalformedInputError):
        INLINE_QUERY_RESULTS.from_builtins({"type": 3, "id": "x"})


def test_known_variant_missing_field_is_malformed() -> None:
    with pytest.raises(MalformedInputError):
        INLINE_QUERY_RESULTS.decode(b'{"type":"game","id":"g1"}')


def test_shared_reply_markup_decoded_for_every_member() -> None:
    markup = keyboard([button("Play")])
    game = game_result(reply_markup=markup)
    article = article_result()
    article.reply_markup = markup

    decoded = INLINE_QUERY_RESULTS.decode_many(
        b"[" + game.encode() + b"," + article.encode() + b"]"
    )

    assert [type(item) for item in decoded] == [
        InlineQueryResultGame,
        InlineQueryResultArticle,
    ]
    assert all(item.reply_markup == markup for item in decoded)
    assert decoded == [game, article]


def test_heterogeneous_results_from_builtins() -> None:
    items = [
        {
            "type": "photo",
            "id": "p",
            "photo_url": "https://x/p.jpg",
            "thumb_url": "https://x/t.jpg",
        },
        {
            "type": "location",
            "id": "l",
            "latitude": 1.5,
            "longitude": 2.5,
            "title": "Here",
        },
    ]

    decoded = INLINE_QUERY_RESULTS.from_builtins_many(items)

    assert [item.type for item in decoded] == ["photo", "location"]
    assert [item.to_json() for item in decoded] == items


def test_decode_many_rejects_non_array() -> None:
    with pytest.raises(MalformedInputError):
        INLINE_QUERY_RESULTS.decode_many(b'{"type":"game"}')


def test_custom_family_with_other_discriminator_field() -> None:
    family: VariantFamily[ApiObject] = VariantFamily("Sample", tag_field="kind")
    family.register(_Alpha)
    family.register(_Alpha)

    assert family.decode(b'{"kind":"alpha","value":"v"}') == _Alpha(value="v")
    assert _Alpha(value="v").to_json() == {"kind": "alpha", "value": "v"}


def test_duplicate_tag_is_rejected() -> None:
    family: VariantFamily[ApiObject] = VariantFamily("Sample", tag_field="kind")
    family.register(_Alpha)

    with pytest.raises(ValueError, match="duplicate Sample tag 'alpha'"):
        family.register(_OtherAlpha)


def test_member_must_use_family_discriminator() -> None:
    family: VariantFamily[ApiObject] = VariantFamily("Sample", tag_field="kind")

    with pytest.raises(ValueError, match="must declare a string tag"):
        family.register(_Beta)
    with pytest.raises(ValueError, match="must declare a string tag"):
        family.register(_Untagged)
