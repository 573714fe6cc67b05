import math
import threading
import uuid
from typing import Dict, Optional, Union
import logging

from src.InputFilter.filter import InputKind, safe_parse, validate
from src.OutcomeEngine.classifier import classify
from src.StakeEngine import calculator
from . import config
from .models import SetResult, StakeField, StakeState, StakeSummary

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("StakeSession")
registry_logger = logging.getLogger("SessionRegistry")

FIELD_KINDS = {
    StakeField.MULTIPLIER_A: InputKind.MULTIPLIER,
    StakeField.MULTIPLIER_B: InputKind.MULTIPLIER,
    StakeField.TARGET_STAKE: InputKind.STAKE,
}

RawInput = Union[str, float, int, None]

class StakeSession:
    """
    One hedge calculation: two multipliers and a target stake.

    Principles:
    1. Raw inputs change only through validated setters
    2. Committed stake is recomputed from the full input triple after every accepted change
    3. A rejected input leaves the session exactly as it was
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = StakeState()
        self._errors: Dict[StakeField, str] = {}

    def reset(self):
        """Back to all zeros with no errors."""
        with self._lock:
            self._state = StakeState()
            self._errors = {}
        logger.info("Session reset")

    @property
    def state(self) -> StakeState:
        with self._lock:
            return self._state.model_copy()

    @property
    def errors(self) -> Dict[StakeField, str]:
        with self._lock:
            return dict(self._errors)

    def set_multiplier_a(self, raw: RawInput) -> SetResult:
        return self._set_field(StakeField.MULTIPLIER_A, raw)

    def set_multiplier_b(self, raw: RawInput) -> SetResult:
        return self._set_field(StakeField.MULTIPLIER_B, raw)

    def set_target_stake(self, raw: RawInput) -> SetResult:
        return self._set_field(StakeField.TARGET_STAKE, raw)

    def _set_field(self, field: StakeField, raw: RawInput) -> SetResult:
        value = safe_parse(raw)
        result = validate(value, FIELD_KINDS[field])

        with self._lock:
            if not result.accepted:
                self._errors[field] = result.error
                logger.warning(f"Rejected {field.value}={value}: {result.error}")
                return SetResult(accepted=False, error=result.error)

            self._errors.pop(field, None)
            setattr(self._state, field.value, value)
            self._recompute()

        logger.info(f"{field.value} set to {value}")
        return SetResult(accepted=True)

    def _recompute(self):
        """Refresh committed stake from the current multipliers and target stake. Caller holds the lock."""
        state = self._state
        stake_a = calculator.per_outcome_stake(state.target_stake, state.multiplier_a)
        stake_b = calculator.per_outcome_stake(state.target_stake, state.multiplier_b)
        committed = calculator.aggregate_stake(stake_a, stake_b)

        # Non-finite total keeps the previous committed stake
        if not math.isfinite(committed):
            logger.warning(f"Committed stake recompute gave {committed}; keeping {state.committed_stake}")
            return

        state.committed_stake = committed

    def get_summary(self) -> StakeSummary:
        with self._lock:
            state = self._state.model_copy()
            errors = dict(self._errors)

        split_a = calculator.split_stake(state.target_stake, state.multiplier_a)
        split_b = calculator.split_stake(state.target_stake, state.multiplier_b)
        report = classify(
            state.multiplier_a,
            state.multiplier_b,
            split_a.returns,
            split_b.returns,
            state.committed_stake,
        )

        return StakeSummary(
            multiplier_a=state.multiplier_a,
            multiplier_b=state.multiplier_b,
            target_stake=state.target_stake,
            committed_stake=state.committed_stake,
            stake_a=split_a.stake,
            stake_b=split_b.stake,
            return_a=split_a.returns,
            return_b=split_b.returns,
            net_profit_a=split_a.net_profit,
            net_profit_b=split_b.net_profit,
            best_case_profit=report.best_case_profit,
            worst_case=report.worst_case,
            worst_case_is_profit=report.worst_case_is_profit,
            threshold_exceeded_a=report.threshold_exceeded_a,
            threshold_exceeded_b=report.threshold_exceeded_b,
            both_guaranteed_profit=report.both_guaranteed_profit,
            errors=errors,
        )

class SessionRegistry:
    """
    Singleton in-memory store of live sessions, keyed by id.
    Nothing is persisted; sessions vanish on restart.
    At most config.MAX_SESSIONS are kept; the oldest is evicted first.
    """
    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super(SessionRegistry, cls).__new__(cls)
                cls._instance._sessions = {}
        return cls._instance

    def create(self) -> str:
        session_id = uuid.uuid4().hex
        evicted = []
        with self._lock:
            # Dicts keep insertion order, so the first key is the oldest session
            while self._sessions and len(self._sessions) >= config.MAX_SESSIONS:
                oldest = next(iter(self._sessions))
                del self._sessions[oldest]
                evicted.append(oldest)
            self._sessions[session_id] = StakeSession()

        for oldest in evicted:
            registry_logger.warning(f"Session {oldest} evicted (limit {config.MAX_SESSIONS})")
        registry_logger.info(f"Session {session_id} created")
        return session_id

    def get(self, session_id: str) -> Optional[StakeSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            registry_logger.info(f"Session {session_id} removed")
        return removed

    def clear(self):
        with self._lock:
            self._sessions.clear()

    def __len__(self):
        with self._lock:
            return len(self._sessions)

# Global Accessor
def get_session_registry():
    return SessionRegistry()
