#!/usr/bin/env python3
"""Calculate balanced stakes for a two-outcome hedge"""
import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent))

from src.SessionEngine.service import StakeSession


def calculate_stakes(stake, multiplier_a, multiplier_b) -> int:
    """Print the stake split for one set of inputs. Returns an exit code."""
    session = StakeSession()
    session.set_target_stake(stake)
    session.set_multiplier_a(multiplier_a)
    session.set_multiplier_b(multiplier_b)
    summary = session.get_summary()

    if summary.errors:
        for field, message in summary.errors.items():
            print(f"ERROR {field.value}: {message}")
        return 1

    print("=== HEDGE CALCULATION ===")
    print(f"Target stake: {summary.target_stake:.2f}")
    print(f"Multiplier A: {summary.multiplier_a}")
    print(f"Multiplier B: {summary.multiplier_b}")
    print()
    print(f"STAKE ON A: {summary.stake_a:.2f}")
    print(f"STAKE ON B: {summary.stake_b:.2f}")
    print(f"Total staked: {summary.committed_stake:.2f}")
    print()
    print(f"If A wins: {summary.return_a:.2f} (net: {summary.net_profit_a:+.2f})")
    print(f"If B wins: {summary.return_b:.2f} (net: {summary.net_profit_b:+.2f})")
    if summary.threshold_exceeded_a or summary.threshold_exceeded_b:
        print("WARNING: Returns exceed the bonus risk threshold")
    print()
    print(f"Best case profit: {summary.best_case_profit:+.2f}")
    label = "PROFIT" if summary.worst_case_is_profit else "LOSS"
    print(f"Worst case: {summary.worst_case:+.2f} ({label})")
    if summary.both_guaranteed_profit:
        print("Both multipliers are greater than 1")

    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Split a stake across two outcomes.")
    parser.add_argument("--stake", required=True, help="Total amount to commit.")
    parser.add_argument("--a", required=True, help="Payout multiplier for outcome A.")
    parser.add_argument("--b", required=True, help="Payout multiplier for outcome B.")
    args = parser.parse_args()
    sys.exit(calculate_stakes(args.stake, args.a, args.b))
