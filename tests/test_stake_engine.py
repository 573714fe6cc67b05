import math
import unittest
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from src.StakeEngine.calculator import (
    aggregate_stake,
    net_profit,
    outcome_return,
    per_outcome_stake,
    round2,
    round_half_up,
    safe_divide,
    split_stake,
    StakeSplit,
)

class TestRounding(unittest.TestCase):

    def test_ties_round_up(self):
        # 0.125 is exact in binary, so this is a real tie
        self.assertEqual(round_half_up(0.125), 0.13)
        self.assertEqual(round_half_up(-0.125), -0.13)

    def test_rounds_exact_binary_value(self):
        # 2.675 is stored as 2.67499999...
        self.assertEqual(round_half_up(2.675), 2.67)
        # 666.67 * 1.5 is stored as 1000.00499999...
        self.assertEqual(round_half_up(666.67 * 1.5), 1000.0)

    def test_round_half_up_passes_non_finite(self):
        self.assertTrue(math.isinf(round_half_up(float("inf"))))
        self.assertTrue(math.isnan(round_half_up(float("nan"))))

    def test_round2_collapses_non_finite(self):
        self.assertEqual(round2(float("inf")), 0.0)
        self.assertEqual(round2(float("-inf")), 0.0)
        self.assertEqual(round2(float("nan")), 0.0)

    def test_large_values(self):
        self.assertEqual(round2(1e300), 1e300)

class TestSafeDivide(unittest.TestCase):

    def test_divide_by_zero(self):
        for numerator in (0.0, 1.0, 1000.0, 999999.99):
            self.assertEqual(safe_divide(numerator, 0), 0.0)

    def test_non_finite_operands(self):
        self.assertEqual(safe_divide(float("inf"), 2.0), 0.0)
        self.assertEqual(safe_divide(10.0, float("inf")), 0.0)
        self.assertEqual(safe_divide(float("nan"), 2.0), 0.0)
        self.assertEqual(safe_divide(10.0, float("nan")), 0.0)

    def test_rounded_quotient(self):
        self.assertEqual(safe_divide(1000.0, 3.0), 333.33)
        self.assertEqual(safe_divide(2.0, 3.0), 0.67)
        self.assertEqual(safe_divide(1000.0, 1.5), 666.67)

class TestStakeSplit(unittest.TestCase):

    def test_unset_multiplier(self):
        self.assertEqual(per_outcome_stake(1000.0, 0.0), 0.0)
        self.assertEqual(per_outcome_stake(1000.0, -2.0), 0.0)
        self.assertEqual(outcome_return(1000.0, 0.0), 0.0)

    def test_even_split(self):
        # 1000 / 2 = 500 on each side, each returns 1000
        self.assertEqual(per_outcome_stake(1000.0, 2.0), 500.0)
        self.assertEqual(outcome_return(1000.0, 2.0), 1000.0)
        self.assertEqual(net_profit(1000.0, 2.0), 500.0)

    def test_larger_multiplier_gets_smaller_stake(self):
        self.assertEqual(per_outcome_stake(1000.0, 1.5), 666.67)
        self.assertEqual(per_outcome_stake(1000.0, 3.0), 333.33)
        self.assertGreater(per_outcome_stake(1000.0, 1.5), per_outcome_stake(1000.0, 3.0))

    def test_returns_with_rounding(self):
        self.assertEqual(outcome_return(1000.0, 1.5), 1000.0)
        self.assertEqual(outcome_return(1000.0, 3.0), 999.99)
        self.assertEqual(outcome_return(500.0, 4.0), 500.0)

    def test_zero_stake(self):
        for multiplier in (0.0, 1.5, 2.0, 1000.0):
            self.assertEqual(per_outcome_stake(0.0, multiplier), 0.0)
            self.assertEqual(outcome_return(0.0, multiplier), 0.0)

    def test_return_matches_stake_times_multiplier(self):
        for stake in (1.0, 10.0, 333.0, 1000.0, 12345.67, 1_000_000.0):
            for multiplier in (1.01, 1.5, 2.0, 3.3, 7.77, 1000.0):
                expected = per_outcome_stake(stake, multiplier) * multiplier
                self.assertLessEqual(abs(expected - outcome_return(stake, multiplier)), 0.01 + 1e-9)

    def test_split_stake_model(self):
        split = split_stake(500.0, 4.0)
        self.assertIsInstance(split, StakeSplit)
        self.assertEqual(split.stake, 125.0)
        self.assertEqual(split.returns, 500.0)
        self.assertEqual(split.net_profit, 375.0)

class TestAggregateStake(unittest.TestCase):

    def test_sum_is_rounded(self):
        self.assertEqual(aggregate_stake(666.67, 333.33), 1000.0)
        self.assertEqual(aggregate_stake(0.0, 125.0), 125.0)

    def test_non_finite_passes_through(self):
        self.assertTrue(math.isinf(aggregate_stake(float("inf"), 1.0)))

    def test_monotonic_in_stake(self):
        previous = 0.0
        for step in range(0, 300):
            stake = step * 37.0
            total = aggregate_stake(per_outcome_stake(stake, 1.7), per_outcome_stake(stake, 2.3))
            self.assertGreaterEqual(total, previous)
            previous = total

if __name__ == '__main__':
    unittest.main()
