import random
import unittest
from collections import Counter

from corenotes.constants import TASK_AVAILABLE_COLORS, pick_task_color
from corenotes.ids import TASK_ID_PATTERN, new_task_id


class PaletteTests(unittest.TestCase):
    def test_every_color_reachable(self):
        rng = random.Random(1234)
        counts = Counter(pick_task_color(rng) for _ in range(4000))
        self.assertEqual(set(counts), set(TASK_AVAILABLE_COLORS))
        # Uniform: the edge colors are not under-sampled.
        expected = 4000 / len(TASK_AVAILABLE_COLORS)
        for color in TASK_AVAILABLE_COLORS:
            self.assertGreater(counts[color], expected * 0.7)


class TaskIdTests(unittest.TestCase):
    def test_new_ids_are_well_formed_and_unique(self):
        ids = {new_task_id() for _ in range(100)}
        self.assertEqual(len(ids), 100)
        for task_id in ids:
            self.assertRegex(task_id, TASK_ID_PATTERN)


if __name__ == "__main__":
    unittest.main()
