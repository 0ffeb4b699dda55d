from __future__ import annotations

import unittest

from agents.title_optimization_agent import TitleOptimizationAgent, select_titles
from lib.text_utils import normalize_text
from schemas.title import TitleOptimizationInput
from styles.category_heuristics import get_category
from video_factory.contracts import BlueprintContractError
from video_factory.niche import analyze_niche
from video_factory.normalizer import normalize_brief
from video_factory.outline import build_outline
from video_factory.publishing import BEST_PUBLISH_WINDOWS, plan_publishing
from video_factory.seo import compose_seo
from video_factory.upload import MAX_UPLOAD_TAG_CHARS, MAX_UPLOAD_TAGS, package_upload, pick_distinct_title, tags_char_count


def _upload_for(raw: dict):
    brief = normalize_brief(raw)
    category = get_category("food_and_drink")
    niche = analyze_niche(brief, category)
    seo = compose_seo(brief, category, niche, build_outline(brief, category))
    return brief, seo, package_upload(brief, category, niche, seo)


class TestTitleOptimizationAgent(unittest.TestCase):
    def _input(self, **overrides) -> TitleOptimizationInput:
        data = dict(
            topic="cold brew coffee",
            primary_keyword="cold brew",
            secondary_keywords=["coffee"],
            audience="home baristas",
            minutes=10,
            tone="Educational",
        )
        data.update(overrides)
        return TitleOptimizationInput(**data)

    def test_run_is_deterministic(self) -> None:
        agent = TitleOptimizationAgent()
        a = agent.run(self._input())
        b = agent.run(self._input().to_dict())
        self.assertEqual(a, b)
        self.assertEqual(len(a["selected"]), 3)
        self.assertIn("candidates", a)

    def test_existing_titles_are_never_candidates(self) -> None:
        first = select_titles(self._input()).selected[0].title
        out = select_titles(self._input(existing_titles=[first]))
        self.assertNotIn(normalize_text(first), {normalize_text(c.title) for c in out.candidates})

    def test_banned_starts_and_length(self) -> None:
        out = select_titles(self._input(banned_starts=["How to"]))
        for c in out.candidates:
            self.assertFalse(normalize_text(c.title).startswith("how to"))
            self.assertLessEqual(len(c.title), 100)
            self.assertGreaterEqual(c.score, 0)
            self.assertLessEqual(c.score, 100)

    def test_primary_keyword_titles_rank_first(self) -> None:
        top = select_titles(self._input()).selected[0]
        self.assertIn("cold brew", normalize_text(top.title))


class TestUploadPackager(unittest.TestCase):
    def test_cold_brew_upload_package(self) -> None:
        brief, seo, upload = _upload_for({
            "topic": "cold brew coffee",
            "minutes": 10,
            "target_audience": "home baristas",
            "tone": "Educational",
            "keywords": ["cold brew", "coffee"],
            "call_to_action": "Subscribe for more brewing guides",
        })
        self.assertNotEqual(normalize_text(upload.optimized_title), normalize_text(seo.video_title))
        self.assertLessEqual(len(upload.optimized_title), 100)
        self.assertEqual(len(upload.end_screen_ideas), 3)
        self.assertEqual(len(upload.playlist_targets), 3)
        self.assertEqual(upload.upload_tags[0], "cold brew coffee")
        self.assertIn("cold brew", upload.upload_tags)

        lines = upload.optimized_description.split("\n\n")
        self.assertEqual(lines[1], brief.call_to_action)
        self.assertEqual(lines[-1], " ".join(seo.hashtags))

    def test_upload_title_comes_from_title_agent_run(self) -> None:
        brief, seo, upload = _upload_for({"topic": "cold brew coffee", "keywords": ["cold brew", "coffee"]})
        out = TitleOptimizationAgent().run({
            "topic": brief.topic,
            "primary_keyword": "cold brew",
            "secondary_keywords": ["coffee"],
            "audience": brief.target_audience,
            "minutes": brief.minutes,
            "tone": brief.tone.value,
            "existing_titles": [seo.video_title],
        })
        self.assertEqual(upload.optimized_title, out["selected"][0]["title"])

    def test_pick_distinct_title(self) -> None:
        selected = [{"title": "Cold Brew Coffee: A Step-by-Step Guide"}, {"title": "Fix Your Cold Brew Today"}]
        self.assertEqual(pick_distinct_title(selected, "cold brew coffee:  a step-by-step guide"), "Fix Your Cold Brew Today")

        with self.assertRaises(BlueprintContractError):
            pick_distinct_title(selected[:1], "Cold Brew Coffee: A Step-by-Step Guide")
        with self.assertRaises(BlueprintContractError):
            pick_distinct_title([], "Anything")

    def test_upload_tag_caps(self) -> None:
        keywords = [f"very long keyword phrase number {i} " + "x" * 80 for i in range(10)]
        _, _, upload = _upload_for({"topic": "sourdough", "keywords": keywords})
        self.assertLessEqual(len(upload.upload_tags), MAX_UPLOAD_TAGS)
        self.assertLessEqual(tags_char_count(upload.upload_tags), MAX_UPLOAD_TAG_CHARS)
        self.assertTrue(upload.upload_tags)


class TestPublishingPlanner(unittest.TestCase):
    def test_publishing_plan_counts(self) -> None:
        brief = normalize_brief({"topic": "cold brew coffee", "keywords": "cold brew"})
        category = get_category("food_and_drink")
        plan = plan_publishing(brief, category, analyze_niche(brief, category))

        self.assertEqual(plan.best_publish_windows, BEST_PUBLISH_WINDOWS)
        self.assertEqual(len(plan.community_prompts), 3)
        self.assertEqual(len(plan.cross_promotion), 3)
        for text in (*plan.community_prompts, *plan.cross_promotion):
            self.assertNotIn("{", text)


if __name__ == "__main__":
    unittest.main()
