"""Tests for JSON recovery and recommendation normalization."""

import pytest

from models.schemas.career_recommendation import CareerRecommendation
from models.schemas.interpreted_reply import (
    ExtractionFailure,
    ProseReply,
    StructuredReply,
    Unparsable,
)
from services.structured_extractor import (
    InvalidShapeError,
    extract,
    extract_json,
    extract_recommendations,
    interpret,
    normalize,
    recommendations_from,
    strip_code_fences,
)

WELL_FORMED = '[{"title":"A","description":"B","key_skills":["x","y"]}]'
EMPTY_SKILLS = [{"title": "A", "description": "B", "key_skills": []}]


class TestExtractJson:
    def test_well_formed(self):
        assert extract_json(WELL_FORMED) == [
            {"title": "A", "description": "B", "key_skills": ["x", "y"]}
        ]

    def test_noisy_wrapper_with_json_fence(self):
        text = (
            "Sure! Here you go:\n```json\n"
            '[{"title":"A","description":"B","key_skills":[]}]'
            "\n```\nHope that helps!"
        )
        assert extract_json(text) == EMPTY_SKILLS

    def test_plain_fence(self):
        text = '```\n[{"title":"A","description":"B","key_skills":[]}]\n```'
        assert extract_json(text) == EMPTY_SKILLS

    def test_uppercase_json_tag(self):
        text = '```JSON\n{"a": 1}\n```'
        assert extract_json(text) == {"a": 1}

    def test_trailing_noise(self):
        text = '[{"title":"A","description":"B","key_skills":[]}] -- generated by model'
        assert extract_json(text) == EMPTY_SKILLS

    def test_trailing_noise_with_brackets(self):
        text = '{"a": [1, 2]} (see [docs] for {details})'
        assert extract_json(text) == {"a": [1, 2]}

    def test_leading_commentary_dropped(self):
        assert extract_json('Result: {"ok": true}') == {"ok": True}

    def test_no_json(self):
        assert extract_json("I cannot help with that.") is None

    def test_empty_and_none(self):
        assert extract_json("") is None
        assert extract_json(None) is None

    def test_unparsable(self):
        assert extract_json("[this is not json") is None

    def test_truncated_array_is_unparsable(self):
        # Candidates always start at the first bracket, so a complete inner
        # object cannot be salvaged from an unterminated array.
        assert extract_json('[{"title":"A"}, {"title":"B"') is None

    def test_object_reply(self):
        assert extract_json('{"title": "A"}') == {"title": "A"}

    def test_max_chars_limits_truncation_pass(self):
        text = '[1, 2, 3]' + " trailing" * 10
        assert extract_json(text, max_chars=100) == [1, 2, 3]
        assert extract_json(text, max_chars=5) is None

    def test_max_chars_does_not_block_full_parse(self):
        assert extract_json("[1, 2, 3]", max_chars=2) == [1, 2, 3]


class TestExtractReasons:
    def test_empty_reply(self):
        assert extract("").reason == ExtractionFailure.EMPTY_REPLY

    def test_no_json_found(self):
        result = extract("No brackets here.")
        assert not result.ok
        assert result.reason == ExtractionFailure.NO_JSON_FOUND

    def test_unparsable(self):
        assert extract("{oops").reason == ExtractionFailure.UNPARSABLE_JSON

    def test_success(self):
        result = extract("[1]")
        assert result.ok
        assert result.value == [1]
        assert result.reason is None


class TestStripCodeFences:
    def test_keeps_surrounding_text_in_order(self):
        text = "before\n```json\n[1]\n```\nmiddle\n```\n{}\n```\nafter"
        cleaned = strip_code_fences(text)
        assert "```" not in cleaned
        positions = [cleaned.index(s) for s in ("before", "[1]", "middle", "{}", "after")]
        assert positions == sorted(positions)

    def test_no_fences_unchanged(self):
        assert strip_code_fences("plain [1]") == "plain [1]"


class TestNormalize:
    def test_round_trip(self):
        result = normalize(extract_json(WELL_FORMED))
        assert result == [CareerRecommendation(title="A", description="B", key_skills=["x", "y"])]

    def test_malformed_element_defaults(self):
        result = normalize([{"description": 5, "key_skills": "not-an-array"}])
        assert result == [CareerRecommendation(title="", description="5", key_skills=[])]

    def test_skill_elements_coerced(self):
        result = normalize([{"title": "T", "key_skills": ["sql", 3, True, None]}])
        assert result[0].key_skills == ["sql", "3", "true", "null"]

    def test_non_object_elements_kept_as_empty(self):
        result = normalize(["oops", None, {"title": "Real"}])
        assert len(result) == 3
        assert result[0] == CareerRecommendation()
        assert result[2].title == "Real"

    def test_falsy_fields_default_to_empty(self):
        result = normalize([{"title": 0, "description": None}])
        assert result[0].title == ""
        assert result[0].description == ""

    @pytest.mark.parametrize("value", [{"title": "A"}, "text", 3, None])
    def test_rejects_non_array(self, value):
        with pytest.raises(InvalidShapeError):
            normalize(value)

    def test_empty_array(self):
        assert normalize([]) == []

    def test_whole_floats_render_as_integers(self):
        result = normalize([{"description": 5.0, "key_skills": [1.5, 2.0, 3]}])
        assert result[0].description == "5"
        assert result[0].key_skills == ["1.5", "2", "3"]


class TestExtractRecommendations:
    def test_success(self):
        items, reason = extract_recommendations(WELL_FORMED)
        assert reason is None
        assert items[0].key_skills == ["x", "y"]

    def test_object_is_invalid_shape(self):
        items, reason = extract_recommendations('{"title": "A"}')
        assert items == []
        assert reason == ExtractionFailure.INVALID_SHAPE

    def test_empty_array_is_invalid_shape(self):
        _, reason = extract_recommendations("Here: []")
        assert reason == ExtractionFailure.INVALID_SHAPE

    def test_no_json_reason_kept(self):
        _, reason = extract_recommendations("Sorry, no.")
        assert reason == ExtractionFailure.NO_JSON_FOUND

    def test_prose_reply_is_invalid_shape(self):
        items, reason = recommendations_from(interpret("## Tips", expect_json=False))
        assert items == []
        assert reason == ExtractionFailure.INVALID_SHAPE

    def test_from_unparsable_keeps_reason(self):
        _, reason = recommendations_from(interpret("{oops", expect_json=True))
        assert reason == ExtractionFailure.UNPARSABLE_JSON


class TestInterpret:
    def test_structured(self):
        reply = interpret(WELL_FORMED, expect_json=True)
        assert isinstance(reply, StructuredReply)
        assert reply.value[0]["title"] == "A"

    def test_unparsable(self):
        reply = interpret("nothing here", expect_json=True)
        assert isinstance(reply, Unparsable)
        assert reply.reason == ExtractionFailure.NO_JSON_FOUND

    def test_prose(self):
        reply = interpret("## Tips\n- **Network** more", expect_json=False)
        assert isinstance(reply, ProseReply)
        assert [b.kind for b in reply.blocks] == ["header", "bullet"]
        assert reply.blocks[1].text == "Network more"
