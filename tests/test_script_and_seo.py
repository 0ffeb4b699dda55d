from __future__ import annotations

import unittest

from lib.text_utils import hashtag_token
from styles.category_heuristics import get_category
from video_factory.niche import analyze_niche
from video_factory.normalizer import normalize_brief
from video_factory.outline import build_outline
from video_factory.script import compose_script
from video_factory.seo import (
    MAX_KEYWORD_TAGS,
    MAX_TITLE_CHARS,
    build_hashtags,
    build_keyword_tags,
    compose_seo,
    format_timestamp,
)


def _cold_brew():
    brief = normalize_brief({
        "topic": "cold brew coffee",
        "minutes": 10,
        "target_audience": "home baristas",
        "tone": "Educational",
        "keywords": ["cold brew", "coffee"],
        "call_to_action": "Subscribe for more brewing guides",
    })
    category = get_category("food_and_drink")
    return brief, category


class TestScriptComposer(unittest.TestCase):
    def test_script_aligns_with_outline(self) -> None:
        brief, category = _cold_brew()
        outline = build_outline(brief, category)
        script = compose_script(brief, category, outline)

        self.assertEqual(len(script), len(outline))
        self.assertEqual([s.title for s in script], [s.title for s in outline])
        for s in script:
            self.assertEqual(len(s.visual_prompts), 3)
            self.assertTrue(s.voiceover)
            self.assertTrue(s.engagement_hook)

    def test_opening_mentions_topic_and_final_steers_to_cta(self) -> None:
        brief, category = _cold_brew()
        script = compose_script(brief, category, build_outline(brief, category))

        self.assertIn("cold brew coffee", script[0].voiceover)
        self.assertIn(brief.call_to_action, script[-1].voiceover)
        self.assertIn(brief.call_to_action, script[-1].engagement_hook)
        for s in script[:-1]:
            self.assertNotIn(brief.call_to_action, s.engagement_hook)

    def test_step_labels_read_as_prose(self) -> None:
        brief, category = _cold_brew()
        script = compose_script(brief, category, build_outline(brief, category))
        for s in script:
            self.assertNotIn("Step 1:", s.voiceover)


class TestSeoComposer(unittest.TestCase):
    def test_format_timestamp(self) -> None:
        self.assertEqual(format_timestamp(0), "0:00")
        self.assertEqual(format_timestamp(7), "7:00")
        self.assertEqual(format_timestamp(12), "12:00")
        self.assertEqual(format_timestamp(75), "1:15:00")

    def test_chapter_markers_follow_outline(self) -> None:
        brief, category = _cold_brew()
        outline = build_outline(brief, category)
        seo = compose_seo(brief, category, analyze_niche(brief, category), outline)

        markers = seo.chapter_markers
        self.assertEqual(len(markers), len(outline))
        self.assertEqual(markers[0].timestamp, "0:00")
        self.assertEqual([m.label for m in markers], [s.title for s in outline])

        elapsed = 0
        for marker, section in zip(markers, outline):
            self.assertEqual(marker.timestamp, format_timestamp(elapsed))
            elapsed += section.estimated_duration

    def test_keyword_tags_put_brief_keywords_first(self) -> None:
        brief, category = _cold_brew()
        outline = build_outline(brief, category)
        seo = compose_seo(brief, category, analyze_niche(brief, category), outline)

        self.assertEqual(list(seo.keyword_tags[:2]), ["cold brew", "coffee"])
        self.assertLessEqual(len(seo.keyword_tags), MAX_KEYWORD_TAGS)
        self.assertEqual(list(seo.hashtags), ["#ColdBrew", "#Coffee", "#Recipe"])

    def test_keyword_tag_cap_keeps_brief_keywords(self) -> None:
        keywords = [f"keyword {i}" for i in range(20)]
        tags = build_keyword_tags(keywords, ["category term"])
        self.assertEqual(tags, keywords[:MAX_KEYWORD_TAGS])

        self.assertEqual(build_keyword_tags(["Cold Brew"], ["cold brew", "recipe"]), ["Cold Brew", "recipe"])

    def test_hashtags(self) -> None:
        self.assertEqual(build_hashtags(["cold brew", "coffee", "cold-brew!", "recipe"]), ["#ColdBrew", "#Coffee", "#Recipe"])
        self.assertEqual(build_hashtags(["!!!", "a"]), ["#A"])
        long_tag = hashtag_token("an extremely long keyword phrase that keeps going and going")
        self.assertLessEqual(len(long_tag) - 1, 30)
        self.assertTrue(long_tag.startswith("#"))

    def test_hashtags_keep_accented_and_non_latin_letters(self) -> None:
        self.assertEqual(hashtag_token("crème brûlée"), "#CrèmeBrûlée")
        self.assertEqual(hashtag_token("café au lait"), "#CaféAuLait")
        self.assertEqual(hashtag_token("コーヒー"), "#コーヒー")
        self.assertEqual(hashtag_token("snake_case tag"), "#SnakeCaseTag")

        brief = normalize_brief({"topic": "crème brûlée", "keywords": ["crème brûlée", "café au lait", "コーヒー"]})
        category = get_category("general")
        outline = build_outline(brief, category)
        seo = compose_seo(brief, category, analyze_niche(brief, category), outline)
        self.assertEqual(list(seo.hashtags), ["#CrèmeBrûlée", "#CaféAuLait", "#コーヒー"])

    def test_video_title_cap(self) -> None:
        brief = normalize_brief({
            "topic": " ".join(["incredibly detailed sourdough fermentation"] * 5),
            "target_audience": "home bakers",
        })
        category = get_category("food_and_drink")
        outline = build_outline(brief, category)
        seo = compose_seo(brief, category, analyze_niche(brief, category), outline)

        self.assertLessEqual(len(seo.video_title), MAX_TITLE_CHARS)
        self.assertFalse(seo.video_title.endswith((" ", ":", "-")))

    def test_description_shape(self) -> None:
        brief, category = _cold_brew()
        outline = build_outline(brief, category)
        seo = compose_seo(brief, category, analyze_niche(brief, category), outline)

        self.assertIn(brief.call_to_action, seo.description)
        self.assertIn("0:00 ", seo.description)
        self.assertTrue(seo.description.splitlines()[-1].startswith("Keywords: "))


if __name__ == "__main__":
    unittest.main()
