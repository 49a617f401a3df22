"""
Calculator Engine for PocketCalc
Turns a stream of button/key events into a running calculator session.

The engine is pure: `transition` maps (session, event) to the next session
plus a list of effect intents (sound, clipboard, notifications, save) that
the caller executes. Operators fold left to right with no precedence.
"""
import enum
import math
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from effects import CopyToClipboard, Notify, PlaySound, SaveSession
from formatting import ERROR, ERROR_TEXT, format_number, is_plain, parse_display
from history_manager import HistoryManager
from logging_config import get_logger

logger = get_logger(__name__)

OPERATORS = ("+", "-", "*", "/")
DIGITS = "0123456789."


# ── Events ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Digit:
    """A digit 0-9 or the decimal point"""
    char: str

    def __post_init__(self):
        if len(self.char) != 1 or self.char not in DIGITS:
            raise ValueError(f"Not a digit: {self.char!r}")


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __post_init__(self):
        if self.symbol not in OPERATORS:
            raise ValueError(f"Unknown operator: {self.symbol!r}")


class Command(enum.Enum):
    EQUALS = "="
    CLEAR = "C"
    ALL_CLEAR = "AC"
    TOGGLE_SIGN = "+/-"
    PERCENT = "%"
    MEMORY_ADD = "M+"
    MEMORY_SUBTRACT = "M-"
    MEMORY_RECALL = "MR"
    MEMORY_CLEAR = "MC"
    BACKSPACE = "⌫"
    COPY = "Copy"
    TOGGLE_SOUND = "Sound"
    TOGGLE_DARK_MODE = "Dark"


Event = Union[Digit, Operator, Command]

# Events still accepted while the display shows "Error"
_ERROR_SAFE = (Command.CLEAR, Command.ALL_CLEAR, Command.COPY,
               Command.TOGGLE_SOUND, Command.TOGGLE_DARK_MODE)


# ── Input states ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    """Nothing typed since start or the last clear"""
    display: str = "0"


@dataclass(frozen=True)
class OperandEntry:
    """Digits are being typed, no operation in flight"""
    display: str


@dataclass(frozen=True)
class AwaitingOperand:
    """A result is shown; the next digit starts a new number"""
    display: str


@dataclass(frozen=True)
class OperationPending:
    """Left operand and operator held, right operand pending or being typed"""
    accumulator: float
    operator: str
    display: str
    awaiting_operand: bool = True


@dataclass(frozen=True)
class Failed:
    """Division by zero; only a clear gets out of here"""
    display: str = field(default=ERROR_TEXT, init=False)


InputState = Union[Idle, OperandEntry, AwaitingOperand, OperationPending, Failed]


@dataclass(frozen=True)
class CalculatorSession:
    state: InputState = field(default_factory=Idle)
    memory: Optional[float] = None
    history: tuple = ()
    sound_enabled: bool = True
    dark_mode: bool = False

    @property
    def display(self) -> str:
        return self.state.display

    @property
    def accumulator(self) -> Optional[float]:
        if isinstance(self.state, OperationPending):
            return self.state.accumulator
        return None

    @property
    def pending_operator(self) -> Optional[str]:
        if isinstance(self.state, OperationPending):
            return self.state.operator
        return None

    @property
    def awaiting_fresh_operand(self) -> bool:
        if isinstance(self.state, OperationPending):
            return self.state.awaiting_operand
        return isinstance(self.state, AwaitingOperand)

    @property
    def is_error(self) -> bool:
        return isinstance(self.state, Failed)


# ── Arithmetic ─────────────────────────────────────────────────────────────

def apply_operator(operator, lhs, rhs):
    """Apply a binary operator. Division by zero and overflow give ERROR."""
    if operator == "+":
        result = lhs + rhs
    elif operator == "-":
        result = lhs - rhs
    elif operator == "*":
        result = lhs * rhs
    elif operator == "/":
        if rhs == 0:
            return ERROR
        result = lhs / rhs
    else:
        raise ValueError(f"Unknown operator: {operator!r}")

    if not math.isfinite(result):
        return ERROR
    return result


_history = HistoryManager()


def _resolve(session, state):
    """Fold the pending operation with the number on the display"""
    operand = parse_display(state.display)
    result = apply_operator(state.operator, state.accumulator, operand)
    history = _history.add_calculation(session.history, state.accumulator,
                                       state.operator, operand, result)
    return replace(session, history=history), result


def _with_entry(session, text):
    """Put freshly typed text on the display"""
    state = session.state
    if isinstance(state, OperationPending):
        return replace(session, state=replace(state, display=text, awaiting_operand=False))
    if text == "0":
        return replace(session, state=Idle())
    return replace(session, state=OperandEntry(text))


def _show(session, text):
    """Replace the display text, keeping the input mode"""
    if text == ERROR_TEXT:
        return replace(session, state=Failed())
    state = session.state
    if isinstance(state, (Idle, OperandEntry)):
        return _with_entry(session, text)
    return replace(session, state=replace(state, display=text))


# ── Event handlers ─────────────────────────────────────────────────────────

def _on_digit(session, char, effects):
    if session.awaiting_fresh_operand:
        return _with_entry(session, "0." if char == "." else char)

    display = session.display
    if not is_plain(display):
        # An exponential value can't be extended digit by digit
        text = "0." if char == "." else char
    elif char == "." and "." in display:
        return session
    elif display == "0" and char != ".":
        text = char
    else:
        text = display + char
    if not math.isfinite(float(text)):
        # Too many digits to hold as a number
        return session
    return _with_entry(session, text)


def _on_operator(session, symbol, effects):
    state = session.state
    if isinstance(state, OperationPending):
        session, result = _resolve(session, state)
        if result is ERROR:
            logger.debug("Division by zero while chaining %s", symbol)
            return replace(session, state=Failed())
        return replace(session, state=OperationPending(result, symbol, format_number(result)))
    accumulator = parse_display(state.display)
    return replace(session, state=OperationPending(accumulator, symbol, state.display))


def _on_equals(session, effects):
    state = session.state
    if not isinstance(state, OperationPending):
        return session
    session, result = _resolve(session, state)
    if result is ERROR:
        logger.debug("Division by zero")
        return replace(session, state=Failed())
    return replace(session, state=AwaitingOperand(format_number(result)))


def _on_backspace(session, effects):
    state = session.state
    if session.awaiting_fresh_operand or isinstance(state, (Idle, Failed)):
        return session
    text = state.display[:-1] if is_plain(state.display) else ""
    if text in ("", "-"):
        text = "0"
    return _show(session, text)


def _on_memory_write(session, sign, effects):
    value = parse_display(session.display)
    memory = (session.memory or 0) + sign * value
    if not math.isfinite(memory):
        effects.append(Notify("Memory overflow", "error"))
        return session
    verb = "Added {} to memory" if sign > 0 else "Subtracted {} from memory"
    effects.append(Notify(verb.format(session.display), "info"))
    return replace(session, memory=memory)


def _on_memory_recall(session, effects):
    if session.memory is None:
        return session
    text = format_number(session.memory)
    state = session.state
    if isinstance(state, OperationPending):
        return replace(session, state=replace(state, display=text, awaiting_operand=True))
    return replace(session, state=AwaitingOperand(text))


def _on_command(session, command, effects):
    state = session.state
    if command is Command.EQUALS:
        return _on_equals(session, effects)
    if command is Command.CLEAR:
        return replace(session, state=Idle())
    if command is Command.ALL_CLEAR:
        return replace(session, state=Idle(), history=_history.clear_calculation_history())
    if command is Command.TOGGLE_SIGN:
        return _show(session, format_number(-parse_display(state.display)))
    if command is Command.PERCENT:
        return _show(session, format_number(parse_display(state.display) / 100))
    if command is Command.MEMORY_ADD:
        return _on_memory_write(session, 1, effects)
    if command is Command.MEMORY_SUBTRACT:
        return _on_memory_write(session, -1, effects)
    if command is Command.MEMORY_RECALL:
        return _on_memory_recall(session, effects)
    if command is Command.MEMORY_CLEAR:
        if session.memory is None:
            return session
        effects.append(Notify("Memory cleared", "info"))
        return replace(session, memory=None)
    if command is Command.BACKSPACE:
        return _on_backspace(session, effects)
    if command is Command.COPY:
        effects.append(CopyToClipboard(session.display))
        effects.append(Notify("Copied to clipboard"))
        return session
    if command is Command.TOGGLE_SOUND:
        return replace(session, sound_enabled=not session.sound_enabled)
    if command is Command.TOGGLE_DARK_MODE:
        return replace(session, dark_mode=not session.dark_mode)
    raise ValueError(f"Unhandled command: {command!r}")


def _sound_cue(before, after, event):
    if after.is_error and not before.is_error:
        return "error"
    if event in (Command.CLEAR, Command.ALL_CLEAR):
        return "clear"
    if after.history != before.history:
        return "result"
    return "click"


def transition(session, event):
    """Apply one event to a session.

    Returns (next_session, effects). Events that make no sense in the
    current state leave the session unchanged and produce no effects.
    """
    if session.is_error and event not in _ERROR_SAFE:
        return session, []

    effects = []
    if isinstance(event, Digit):
        next_session = _on_digit(session, event.char, effects)
    elif isinstance(event, Operator):
        next_session = _on_operator(session, event.symbol, effects)
    elif isinstance(event, Command):
        next_session = _on_command(session, event, effects)
    else:
        logger.debug("Ignoring unknown event %r", event)
        return session, []

    changed = next_session != session
    if not changed and not effects:
        return session, []

    if next_session.sound_enabled:
        effects.insert(0, PlaySound(_sound_cue(session, next_session, event)))
    if changed:
        effects.append(SaveSession(next_session))
    return next_session, effects


class CalculatorEngine:
    """Holds the current session and applies events one at a time"""

    def __init__(self, session=None, on_effect=None):
        self._session = session if session is not None else CalculatorSession()
        self.on_effect = on_effect
        self.last_effects = []

    def current_state(self):
        """Read-only snapshot of the current session"""
        return self._session

    def submit(self, event):
        """Apply an event, run its effects through on_effect, return the new session"""
        self._session, self.last_effects = transition(self._session, event)
        if self.on_effect:
            for effect in self.last_effects:
                self.on_effect(effect)
        return self._session

    def reset(self, session=None):
        """Replace the whole session (fresh start or hydrate from storage)"""
        self._session = session if session is not None else CalculatorSession()
        self.last_effects = []
        return self._session
