from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field

class StakeField(str, Enum):
    MULTIPLIER_A = "multiplier_a"
    MULTIPLIER_B = "multiplier_b"
    TARGET_STAKE = "target_stake"

class StakeState(BaseModel):
    """Snapshot of the raw inputs and the committed stake derived from them."""
    multiplier_a: float = 0.0
    multiplier_b: float = 0.0
    target_stake: float = 0.0
    committed_stake: float = 0.0

class SetResult(BaseModel):
    accepted: bool = Field(..., description="True if the field was updated")
    error: Optional[str] = Field(default=None, description="Bound violation message when rejected")

class StakeSummary(BaseModel):
    """Everything the presentation layer reads back after a change."""
    multiplier_a: float
    multiplier_b: float
    target_stake: float
    committed_stake: float
    stake_a: float
    stake_b: float
    return_a: float
    return_b: float
    net_profit_a: float
    net_profit_b: float
    best_case_profit: float
    worst_case: float
    worst_case_is_profit: bool
    threshold_exceeded_a: bool
    threshold_exceeded_b: bool
    both_guaranteed_profit: bool
    errors: Dict[StakeField, str] = Field(default_factory=dict)
