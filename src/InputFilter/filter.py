import math
import re
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from . import config

# Longest numeric prefix accepted, same shape a browser's parseFloat reads
NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

class InputKind(str, Enum):
    MULTIPLIER = "multiplier"
    STAKE = "stake"

class ValidationResult(BaseModel):
    accepted: bool = Field(..., description="Whether the value is within domain bounds")
    value: float = Field(..., description="The sanitized value that was checked")
    error: Optional[str] = Field(default=None, description="Reason for rejection")

def safe_parse(raw: Union[str, float, int, None]) -> float:
    """
    Convert raw input to a finite, non-negative number.

    Text is read like parseFloat: leading whitespace is skipped and the
    longest numeric prefix wins ("12abc" -> 12.0). Anything that fails to
    parse, is negative, or is not finite becomes 0.
    """
    if raw is None or isinstance(raw, bool):
        return config.FALLBACK_VALUE

    if isinstance(raw, (int, float)):
        candidate = raw
    else:
        match = NUMERIC_PREFIX.match(str(raw).lstrip())
        if not match:
            return config.FALLBACK_VALUE
        candidate = match.group(0)

    try:
        value = float(candidate)
    except (ValueError, OverflowError):
        return config.FALLBACK_VALUE

    if not math.isfinite(value) or value < 0:
        return config.FALLBACK_VALUE
    return value

def validate(value: float, kind: InputKind) -> ValidationResult:
    """
    Check a sanitized value against the domain bounds for its kind.

    Rules are checked in order and the first match wins:
    negative -> reject, multiplier above max -> reject,
    stake above max -> reject, otherwise accept.

    Raises:
        ValueError: If kind is not a known InputKind.
    """
    try:
        kind = InputKind(kind)
    except ValueError:
        raise ValueError(f"Invalid input kind: {kind}")

    # Rule 1: Negative values
    if value < 0:
        return ValidationResult(accepted=False, value=value, error="Value cannot be negative")

    # Rule 2: Multiplier ceiling
    if kind == InputKind.MULTIPLIER and value > config.MAX_MULTIPLIER:
        return ValidationResult(
            accepted=False,
            value=value,
            error=f"Multiplier cannot exceed {config.MAX_MULTIPLIER}"
        )

    # Rule 3: Stake ceiling
    if kind == InputKind.STAKE and value > config.MAX_STAKE:
        return ValidationResult(
            accepted=False,
            value=value,
            error=f"Stake cannot exceed {config.MAX_STAKE:,}"
        )

    return ValidationResult(accepted=True, value=value)
