import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.display import potential_improvement, score_band  # noqa: E402


class ScoreBandTests(unittest.TestCase):
    def test_band_thresholds(self):
        self.assertEqual(score_band(100), "strong")
        self.assertEqual(score_band(80), "strong")
        self.assertEqual(score_band(79), "moderate")
        self.assertEqual(score_band(60), "moderate")
        self.assertEqual(score_band(59), "weak")
        self.assertEqual(score_band(0), "weak")


class PotentialImprovementTests(unittest.TestCase):
    def test_seeded_source_is_reproducible(self):
        first = potential_improvement(50, random.Random(7))
        second = potential_improvement(50, random.Random(7))
        self.assertEqual(first, second)
        self.assertGreaterEqual(first, 10)
        self.assertLessEqual(first, 35)

    def test_bounded_by_headroom(self):
        self.assertEqual(potential_improvement(100, random.Random(1)), 0)
        self.assertEqual(potential_improvement(95, random.Random(1)), 5)
        for seed in range(20):
            self.assertLessEqual(potential_improvement(80, random.Random(seed)), 20)


if __name__ == "__main__":
    unittest.main()
