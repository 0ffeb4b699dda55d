from __future__ import annotations

import unittest

from styles.category_heuristics import CATEGORIES, GENERAL_CATEGORY_ID
from video_factory.category_resolver import resolve_category, score_category


class TestCategoryResolver(unittest.TestCase):
    def test_cold_brew_resolves_to_food(self) -> None:
        c = resolve_category("cold brew coffee", ["cold brew", "coffee"])
        self.assertEqual(c["id"], "food_and_drink")

    def test_topic_outweighs_keywords(self) -> None:
        c = resolve_category("AI-assisted design systems", ["design tokens", "figma automation", "design ops"])
        self.assertEqual(c["id"], "design_and_creative")

    def test_word_boundaries_and_plurals(self) -> None:
        # "tea" must not fire inside "team"; "recipes" matches "recipe".
        self.assertEqual(resolve_category("team rituals", [])["id"], GENERAL_CATEGORY_ID)
        self.assertEqual(resolve_category("weeknight recipes", [])["id"], "food_and_drink")

    def test_no_match_falls_back_to_general(self) -> None:
        c = resolve_category("quiet afternoons", ["stillness"])
        self.assertEqual(c["id"], GENERAL_CATEGORY_ID)

    def test_ties_go_to_first_declared_category(self) -> None:
        # One topic hit each for technology ("software") and finance ("budget").
        order = [c["id"] for c in CATEGORIES]
        c = resolve_category("software budget", [])
        self.assertEqual(c["id"], "technology")
        self.assertLess(order.index("technology"), order.index("personal_finance"))

    def test_scores(self) -> None:
        food = next(c for c in CATEGORIES if c["id"] == "food_and_drink")
        # topic: coffee + cold brew (2 each); keywords: cold brew, coffee (1 each)
        self.assertEqual(score_category(food, "cold brew coffee", ["cold brew", "coffee"]), 6)

    def test_general_is_declared_last(self) -> None:
        self.assertEqual(CATEGORIES[-1]["id"], GENERAL_CATEGORY_ID)


if __name__ == "__main__":
    unittest.main()
