import unittest

from components.bench import COLUMNS, OPERATIONS, BenchConfig, run_benchmarks


class TestBench(unittest.TestCase):
    def test_run_benchmarks_table(self):
        df = run_benchmarks(BenchConfig(sizes=[10, 20], iterations=2, seed=1))
        self.assertEqual(list(df.columns), COLUMNS)
        self.assertEqual(len(df), len(OPERATIONS) * 2)
        self.assertTrue((df["mean_ms"] >= 0).all())
        self.assertTrue((df["std_ms"] >= 0).all())
        self.assertEqual(set(df["structure"]), {"heap", "trie"})

    def test_single_iteration_has_zero_std(self):
        df = run_benchmarks(BenchConfig(sizes=[5], iterations=1, seed=None))
        self.assertTrue((df["std_ms"] == 0.0).all())

    def test_invalid_config(self):
        with self.assertRaises(ValueError):
            BenchConfig(sizes=[])
        with self.assertRaises(ValueError):
            BenchConfig(sizes=[0])
        with self.assertRaises(ValueError):
            BenchConfig(iterations=0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
