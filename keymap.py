"""
Input mapping for PocketCalc
Translates keypad button labels and keyboard keys into engine events
"""
from calculator import Command, Digit, Operator, DIGITS

# Display symbols on the keypad -> engine operators
OPERATOR_SYMBOLS = {
    "+": "+",
    "-": "-",
    "−": "-",
    "*": "*",
    "×": "*",
    "/": "/",
    "÷": "/",
}

BUTTON_COMMANDS = {command.value: command for command in Command}
BUTTON_COMMANDS.update({
    "CE": Command.CLEAR,
    "±": Command.TOGGLE_SIGN,
    "BS": Command.BACKSPACE,
})

# Tk keysyms that don't carry a printable char
KEYSYM_COMMANDS = {
    "Return": Command.EQUALS,
    "KP_Enter": Command.EQUALS,
    "Enter": Command.EQUALS,
    "Escape": Command.CLEAR,
    "Delete": Command.CLEAR,
    "BackSpace": Command.BACKSPACE,
    "Backspace": Command.BACKSPACE,
}

CHAR_COMMANDS = {
    "=": Command.EQUALS,
    "\r": Command.EQUALS,
    "\n": Command.EQUALS,
    "%": Command.PERCENT,
    "c": Command.COPY,
    "\x03": Command.COPY,    # Ctrl+C
    "\x1b": Command.CLEAR,
    "\x08": Command.BACKSPACE,
}


def event_for_button(label):
    """Return the event for a keypad button label, or None if unknown"""
    if not isinstance(label, str) or not label:
        return None
    if len(label) == 1 and label in DIGITS:
        return Digit(label)
    if label in OPERATOR_SYMBOLS:
        return Operator(OPERATOR_SYMBOLS[label])
    return BUTTON_COMMANDS.get(label)


def event_for_key(char, keysym=""):
    """Return the event for a keyboard key press, or None if unknown"""
    if keysym in KEYSYM_COMMANDS:
        return KEYSYM_COMMANDS[keysym]
    if not char:
        return None
    if len(char) == 1 and char in DIGITS:
        return Digit(char)
    if char in OPERATOR_SYMBOLS:
        return Operator(OPERATOR_SYMBOLS[char])
    return CHAR_COMMANDS.get(char)
