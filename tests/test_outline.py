from __future__ import annotations

import unittest

from schemas.brief import MAX_MINUTES, MIN_MINUTES
from styles.category_heuristics import SECTION_ARCHETYPES, get_category
from video_factory.normalizer import normalize_brief
from video_factory.outline import apportion_minutes, build_outline, select_archetypes


class TestApportionMinutes(unittest.TestCase):
    def test_default_weights_every_supported_runtime(self) -> None:
        for minutes in range(MIN_MINUTES, MAX_MINUTES + 1):
            archetypes = select_archetypes(minutes)
            durations = apportion_minutes(minutes, [a["weight"] for a in archetypes])
            self.assertEqual(sum(durations), minutes, minutes)
            self.assertTrue(all(d >= 1 for d in durations), (minutes, durations))

    def test_arbitrary_weights_sum_exactly(self) -> None:
        weight_sets = [
            [1],
            [1, 1, 1],
            [7, 3],
            [33, 33, 34],
            [0, 5, 0, 5],
            [0, 0, 0],
            [97, 1, 1, 1],
            [13, 17, 19, 23, 29],
        ]
        for weights in weight_sets:
            for total in range(len(weights), 40):
                durations = apportion_minutes(total, weights)
                self.assertEqual(sum(durations), total, (weights, total))
                self.assertEqual(len(durations), len(weights))
                self.assertTrue(all(d >= 1 for d in durations), (weights, total, durations))

    def test_known_split_for_ten_minutes(self) -> None:
        weights = [a["weight"] for a in SECTION_ARCHETYPES]
        self.assertEqual(apportion_minutes(10, weights), [1, 2, 2, 2, 1, 2])

    def test_remainder_tie_goes_to_earlier_position(self) -> None:
        self.assertEqual(apportion_minutes(4, [1, 1, 1]), [2, 1, 1])

    def test_heavier_weight_gets_more(self) -> None:
        d = apportion_minutes(25, [a["weight"] for a in SECTION_ARCHETYPES])
        self.assertEqual(max(d), d[2])

    def test_rejects_impossible_requests(self) -> None:
        with self.assertRaises(ValueError):
            apportion_minutes(2, [1, 1, 1])
        with self.assertRaises(ValueError):
            apportion_minutes(5, [])
        with self.assertRaises(ValueError):
            apportion_minutes(5, [1, -1])


class TestSelectArchetypes(unittest.TestCase):
    def test_all_archetypes_kept_when_minutes_allow(self) -> None:
        self.assertEqual(len(select_archetypes(6)), len(SECTION_ARCHETYPES))

    def test_lightest_later_archetype_dropped_first(self) -> None:
        kept = [a["id"] for a in select_archetypes(5)]
        self.assertEqual(kept, ["hook", "context", "framework", "proof", "recap"])

        kept = [a["id"] for a in select_archetypes(3)]
        self.assertEqual(kept, ["context", "framework", "proof"])


class TestBuildOutline(unittest.TestCase):
    def test_outline_sums_to_runtime_for_every_minutes_value(self) -> None:
        category = get_category("food_and_drink")
        for minutes in range(MIN_MINUTES, MAX_MINUTES + 1):
            brief = normalize_brief({"topic": "cold brew coffee", "minutes": minutes, "keywords": "cold brew, coffee"})
            outline = build_outline(brief, category)
            self.assertTrue(outline)
            self.assertEqual(sum(s.estimated_duration for s in outline), minutes)
            self.assertTrue(all(s.estimated_duration >= 1 for s in outline))

    def test_titles_unique_and_points_filled(self) -> None:
        brief = normalize_brief({"topic": "cold brew coffee", "minutes": 12, "keywords": "cold brew, coffee"})
        outline = build_outline(brief, get_category("food_and_drink"))

        titles = [s.title for s in outline]
        self.assertEqual(len(titles), len(set(titles)))
        self.assertIn("Side-by-Side Taste Test", titles)
        self.assertEqual(titles[1], "Why Cold Brew Coffee Matters Now")

        for s in outline:
            self.assertEqual(len(s.talking_points), 3)
            self.assertNotIn("{", s.purpose)
            for p in s.talking_points:
                self.assertNotIn("{", p)

    def test_outline_is_deterministic(self) -> None:
        brief = normalize_brief({"topic": "index funds", "minutes": 17})
        category = get_category("personal_finance")
        self.assertEqual(build_outline(brief, category), build_outline(brief, category))


if __name__ == "__main__":
    unittest.main()
