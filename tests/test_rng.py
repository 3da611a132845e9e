import unittest
from collections import Counter

from rng import RandomSource, create_rng


class RandomSourceTestCase(unittest.TestCase):
    def test_same_seed_gives_same_sequence(self):
        a = create_rng(42)
        b = create_rng(42)
        self.assertEqual([a.next_int(0, 1000) for _ in range(20)], [b.next_int(0, 1000) for _ in range(20)])

    def test_next_int_stays_in_inclusive_range(self):
        rng = create_rng("range")
        seen = {rng.next_int(1, 3) for _ in range(300)}
        self.assertEqual({1, 2, 3}, seen)

    def test_next_int_rejects_empty_range(self):
        with self.assertRaises(ValueError):
            create_rng(1).next_int(5, 4)

    def test_shuffle_preserves_duplicates_for_many_seeds(self):
        pool = [n for n in range(1, 11) for _ in range(2)]
        for seed in range(50):
            shuffled = create_rng(seed).shuffle(pool)
            self.assertEqual(Counter(pool), Counter(shuffled))

    def test_shuffle_leaves_input_untouched(self):
        pool = (1, 1, 2, 3)
        items = list(pool)
        create_rng(9).shuffle(items)
        self.assertEqual(list(pool), items)

    def test_fresh_seed_is_minted_and_exposed(self):
        rng = create_rng()
        self.assertIsInstance(rng.seed, str)
        self.assertEqual(16, len(rng.seed))
        replay = create_rng(rng.seed)
        self.assertEqual(rng.shuffle(range(10)), replay.shuffle(range(10)))

    def test_rejects_unusable_seed(self):
        with self.assertRaises(TypeError):
            RandomSource(True)
        with self.assertRaises(TypeError):
            RandomSource(1.5)


if __name__ == "__main__":
    unittest.main()
