from __future__ import annotations

import unittest

from schemas.brief import MAX_MINUTES, MIN_MINUTES
from schemas.common import ProductionPhase
from styles.category_heuristics import get_category
from video_factory.normalizer import normalize_brief
from video_factory.outline import build_outline
from video_factory.production import phase_windows, plan_production, timeline_for_minutes


def _plan(minutes: int):
    brief = normalize_brief({"topic": "cold brew coffee", "minutes": minutes, "keywords": "cold brew, coffee"})
    category = get_category("food_and_drink")
    return plan_production(brief, category, build_outline(brief, category))


class TestProductionPlanner(unittest.TestCase):
    def test_timeline_step_function(self) -> None:
        expected = {5: (1, 1, 1), 8: (1, 1, 1), 9: (1, 2, 2), 12: (1, 2, 2), 13: (2, 2, 3), 18: (2, 2, 3), 19: (2, 3, 4), 25: (2, 3, 4)}
        for minutes, days in expected.items():
            t = timeline_for_minutes(minutes)
            self.assertEqual((t.pre_production, t.production, t.post_production), days, minutes)

    def test_timeline_is_monotonic(self) -> None:
        previous = None
        for minutes in range(MIN_MINUTES, MAX_MINUTES + 1):
            t = timeline_for_minutes(minutes)
            current = (t.pre_production, t.production, t.post_production)
            self.assertTrue(all(d >= 1 for d in current))
            if previous is not None:
                self.assertTrue(all(c >= p for c, p in zip(current, previous)), minutes)
            previous = current

    def test_checklist_ids_phases_and_due_hours(self) -> None:
        for minutes in (MIN_MINUTES, 10, 15, MAX_MINUTES):
            plan = _plan(minutes)
            ids = [t.id for t in plan.checklist]
            self.assertEqual(len(ids), len(set(ids)))
            self.assertEqual(ids[0], "pre-01")
            self.assertEqual(len(plan.checklist), 11)

            windows = phase_windows(plan.timeline_days)
            for phase in ProductionPhase:
                tasks = [t for t in plan.checklist if t.phase == phase]
                self.assertTrue(tasks)
                hours = [t.due_after_hours for t in tasks]
                self.assertEqual(hours, sorted(set(hours)))
                start, end = windows[phase]
                self.assertGreater(hours[0], start)
                self.assertEqual(hours[-1], end)

    def test_short_video_due_hours(self) -> None:
        plan = _plan(5)
        self.assertEqual([t.due_after_hours for t in plan.checklist], [8, 16, 24, 32, 40, 48, 52, 57, 62, 67, 72])

    def test_asset_requests(self) -> None:
        plan = _plan(10)
        self.assertEqual(
            [a.label for a in plan.asset_requests],
            ["B-roll", "Motion graphics", "Music bed", "Thumbnail photography"],
        )
        self.assertIn("cold brew coffee", plan.asset_requests[0].notes)
        self.assertIn("cold brew", plan.asset_requests[1].notes)


if __name__ == "__main__":
    unittest.main()
