from pydantic import BaseModel, Field

from src.StakeEngine.calculator import round2
from . import config

class OutcomeReport(BaseModel):
    best_case_profit: float = Field(..., description="Sum of both returns minus committed stake")
    worst_case: float = Field(..., description="Smallest configured return minus committed stake")
    worst_case_is_profit: bool = Field(..., description="True if the worst case still nets >= 0")
    threshold_exceeded_a: bool = Field(default=False, description="Return on A above the bonus risk threshold")
    threshold_exceeded_b: bool = Field(default=False, description="Return on B above the bonus risk threshold")
    both_guaranteed_profit: bool = Field(default=False, description="Both multipliers above 1")

    def __str__(self):
        label = "Profit" if self.worst_case_is_profit else "Loss"
        return f"Best: {self.best_case_profit:.2f} | Worst: {self.worst_case:.2f} ({label})"

def best_case_profit(return_a: float, return_b: float, committed_stake: float) -> float:
    """
    Formula: best = (return_a + return_b) - committed_stake

    Zero while neither outcome returns anything.
    """
    total_returns = return_a + return_b
    if total_returns > 0:
        return round2(total_returns - committed_stake)
    return 0.0

def worst_case(
    multiplier_a: float,
    multiplier_b: float,
    return_a: float,
    return_b: float,
    committed_stake: float,
) -> float:
    """
    Smallest realizable return minus committed stake.

    Only configured outcomes (multiplier > 0) are considered; with neither
    configured the minimum return is 0.
    """
    if multiplier_a > 0 and multiplier_b > 0:
        min_returns = min(return_a, return_b)
    elif multiplier_a > 0:
        min_returns = return_a
    elif multiplier_b > 0:
        min_returns = return_b
    else:
        min_returns = 0.0

    return round2(min_returns - committed_stake)

def is_worst_case_profit(worst: float) -> bool:
    return worst >= 0

def returns_exceed_threshold(outcome_return: float) -> bool:
    # Advisory flag, never blocks a calculation
    return outcome_return > config.RETURN_THRESHOLD

def both_guaranteed_profit(multiplier_a: float, multiplier_b: float) -> bool:
    limit = config.GUARANTEED_PROFIT_MULTIPLIER
    return multiplier_a > limit and multiplier_b > limit

def classify(
    multiplier_a: float,
    multiplier_b: float,
    return_a: float,
    return_b: float,
    committed_stake: float,
) -> OutcomeReport:
    """
    Build the full profit/loss classification for one stake split.

    Args:
        multiplier_a: Multiplier on outcome A (0 = unset)
        multiplier_b: Multiplier on outcome B (0 = unset)
        return_a: Payout if A wins
        return_b: Payout if B wins
        committed_stake: Total placed across both outcomes

    Returns:
        OutcomeReport with best/worst case and advisory flags
    """
    worst = worst_case(multiplier_a, multiplier_b, return_a, return_b, committed_stake)

    return OutcomeReport(
        best_case_profit=best_case_profit(return_a, return_b, committed_stake),
        worst_case=worst,
        worst_case_is_profit=is_worst_case_profit(worst),
        threshold_exceeded_a=returns_exceed_threshold(return_a),
        threshold_exceeded_b=returns_exceed_threshold(return_b),
        both_guaranteed_profit=both_guaranteed_profit(multiplier_a, multiplier_b),
    )
