from __future__ import annotations

import unittest

from schemas.brief import RawBrief
from schemas.common import Tone
from video_factory.normalizer import (
    DEFAULT_AUDIENCE,
    DEFAULT_CALL_TO_ACTION,
    DEFAULT_MINUTES,
    DEFAULT_TOPIC,
    clamp_minutes,
    normalize_brief,
    split_keywords,
)


class TestNormalizer(unittest.TestCase):
    def test_empty_brief_gets_defaults(self) -> None:
        b = normalize_brief(None)
        self.assertEqual(b.topic, DEFAULT_TOPIC)
        self.assertEqual(b.minutes, DEFAULT_MINUTES)
        self.assertEqual(b.target_audience, DEFAULT_AUDIENCE)
        self.assertEqual(b.call_to_action, DEFAULT_CALL_TO_ACTION)
        self.assertEqual(b.tone, Tone.authoritative)
        self.assertEqual(b.keywords, (DEFAULT_TOPIC.lower(),))

    def test_minutes_are_rounded_and_clamped(self) -> None:
        self.assertEqual(clamp_minutes(3), 5)
        self.assertEqual(clamp_minutes(40), 25)
        self.assertEqual(clamp_minutes(12.6), 13)
        self.assertEqual(clamp_minutes(None), DEFAULT_MINUTES)

        self.assertEqual(normalize_brief({"minutes": "12"}).minutes, 12)
        self.assertEqual(normalize_brief({"minutes": "ten"}).minutes, DEFAULT_MINUTES)
        self.assertEqual(normalize_brief({"minutes": float("nan")}).minutes, DEFAULT_MINUTES)
        self.assertEqual(normalize_brief({"minutes": -4}).minutes, 5)
        self.assertEqual(normalize_brief({"minutes": True}).minutes, DEFAULT_MINUTES)

    def test_keywords_split_trim_and_dedupe(self) -> None:
        self.assertEqual(
            split_keywords("Cold brew, coffee\nCOLD BREW ,  ,\n  steeping   time "),
            ["Cold brew", "coffee", "steeping time"],
        )
        self.assertEqual(split_keywords(["a, b", "c", "B"]), ["a", "b", "c"])
        self.assertEqual(split_keywords(None), [])

    def test_blank_keywords_fall_back_to_topic(self) -> None:
        b = normalize_brief({"topic": "Sourdough Basics", "keywords": " , \n"})
        self.assertEqual(b.keywords, ("sourdough basics",))

    def test_tone_is_case_insensitive_with_default(self) -> None:
        self.assertEqual(normalize_brief({"tone": "educational"}).tone, Tone.educational)
        self.assertEqual(normalize_brief({"tone": " ANALYTICAL "}).tone, Tone.analytical)
        self.assertEqual(normalize_brief({"tone": "sarcastic"}).tone, Tone.authoritative)

    def test_text_fields_collapse_whitespace(self) -> None:
        b = normalize_brief({"topic": "  cold   brew  ", "target_audience": "   ", "call_to_action": 42})
        self.assertEqual(b.topic, "cold brew")
        self.assertEqual(b.target_audience, DEFAULT_AUDIENCE)
        self.assertEqual(b.call_to_action, "42")

    def test_accepts_camel_case_and_ignores_unknown_keys(self) -> None:
        b = normalize_brief({
            "topic": "Index funds",
            "targetAudience": "new investors",
            "callToAction": "Subscribe",
            "somethingElse": [1, 2, 3],
        })
        self.assertEqual(b.target_audience, "new investors")
        self.assertEqual(b.call_to_action, "Subscribe")

    def test_raw_brief_and_brief_inputs(self) -> None:
        raw = RawBrief(topic="Trail running", keywords=["trail running", "shoes"])
        b = normalize_brief(raw)
        self.assertEqual(b.keywords, ("trail running", "shoes"))
        self.assertIs(normalize_brief(b), b)

    def test_brief_is_immutable(self) -> None:
        b = normalize_brief({"topic": "x"})
        with self.assertRaises(Exception):
            b.topic = "y"


if __name__ == "__main__":
    unittest.main()
