"""
Session Manager for PocketCalc
Saves and restores the calculator session as a single JSON snapshot
"""
import json
import math

import config
from calculator import (AwaitingOperand, CalculatorSession, Failed, Idle,
                        OperandEntry, OperationPending, OPERATORS)
from formatting import ERROR_TEXT, parse_display
from history_manager import HistoryManager
from logging_config import get_logger

logger = get_logger(__name__)

_history = HistoryManager()


def to_snapshot(session):
    """Return the JSON-serializable snapshot of a session"""
    return {
        'display': session.display,
        'currentValue': session.accumulator,
        'operation': session.pending_operator,
        'memory': session.memory,
        'isDarkMode': session.dark_mode,
        'history': list(session.history),
        'soundEnabled': session.sound_enabled,
        'waitingForOperand': session.awaiting_fresh_operand,
    }


def _number(value, name):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{name} is not a finite number: {value!r}")
    return float(value)


def _flag(value, default):
    return value if isinstance(value, bool) else default


def _input_state(data):
    display = data.get('display', "0")
    if not isinstance(display, str) or not display:
        raise ValueError(f"Bad display: {display!r}")
    if display == ERROR_TEXT:
        return Failed()
    if not math.isfinite(parse_display(display)):
        raise ValueError(f"Bad display: {display!r}")

    accumulator = _number(data.get('currentValue'), 'currentValue')
    operation = data.get('operation')
    waiting = _flag(data.get('waitingForOperand'), False)

    if accumulator is not None and operation in OPERATORS:
        return OperationPending(accumulator, operation, display,
                                _flag(data.get('waitingForOperand'), True))
    if accumulator is not None or operation is not None:
        logger.warning("Dropping incomplete pending operation from snapshot")
    if waiting:
        return AwaitingOperand(display)
    if display == "0":
        return Idle()
    return OperandEntry(display)


def from_snapshot(data):
    """Build a session from a snapshot dict.

    Raises ValueError or TypeError if the snapshot is unusable.
    """
    if not isinstance(data, dict):
        raise TypeError(f"Snapshot must be an object, got {type(data).__name__}")
    history = data.get('history') or []
    if not isinstance(history, list):
        raise ValueError("history must be a list")
    return CalculatorSession(
        state=_input_state(data),
        memory=_number(data.get('memory'), 'memory'),
        history=_history.trim(history),
        sound_enabled=_flag(data.get('soundEnabled'), True),
        dark_mode=_flag(data.get('isDarkMode'), False),
    )


class SessionManager:
    def __init__(self, db, key=config.SESSION_KEY):
        self.db = db
        self.key = key

    def load(self):
        """Load the saved session, or a fresh one if nothing usable is stored"""
        raw = self.db.get_value(self.key)
        if raw is None:
            logger.info("No saved session, starting fresh")
            return CalculatorSession()
        try:
            session = from_snapshot(json.loads(raw))
        except (ValueError, TypeError) as e:
            logger.warning(f"Saved session is unusable, starting fresh: {e}")
            return CalculatorSession()
        logger.info("Restored saved session")
        return session

    def save(self, session):
        """Store the session snapshot"""
        self.db.set_value(self.key, json.dumps(to_snapshot(session)))
        logger.debug("Session saved")

    def reset(self):
        """Forget the saved session"""
        self.db.delete_value(self.key)
        logger.info("Saved session cleared")
