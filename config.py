"""
PocketCalc Configuration Settings
"""
import os
import sys

# Application Settings
APP_NAME = "PocketCalc"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 340
WINDOW_HEIGHT = 560
DISPLAY_FONT = ("Consolas", 30, "bold")   # LCD/segmented-style font
BUTTON_FONT = ("Segoe UI", 14)
LABEL_FONT = ("Segoe UI", 10)

# ── Palettes ───────────────────────────────────────────────────────────────────

# LIGHT palette
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # slightly darker variant (inset feel)
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # LCD dark on light
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#C76A12",   # orange operators
    "equals_bg":    "#E08A1E",
    "equals_fg":    "#FFFFFF",
    "memory_fg":    "#2C5F8A",
    "accent":       "#E08A1E",
    "success":      "#2E8B57",
    "danger":       "#B03A2E",
    "info":         "#2C5F8A",
    "listbox_bg":   "#C8D4DF",
    "listbox_fg":   "#1A2332",
}

# DARK palette
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # LCD green-on-dark
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#F0A040",
    "equals_bg":    "#C8781A",
    "equals_fg":    "#FFFFFF",
    "memory_fg":    "#5E8FC8",
    "accent":       "#F0A040",
    "success":      "#4DB888",
    "danger":       "#E55A4E",
    "info":         "#5E8FC8",
    "listbox_bg":   "#161C26",
    "listbox_fg":   "#9ADDB0",
}


def get_theme(dark: bool) -> dict:
    """Return the active colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# Database Settings
DB_PATH = os.path.join(os.path.dirname(__file__), "pocketcalc.db")
SESSION_KEY = "calculator_state"

# Calculator Settings
MAX_HISTORY_ITEMS = 10
MAX_DISPLAY_LENGTH = 10     # characters before switching to exponential form
SIGNIFICANT_DIGITS = 12
EXPONENT_DIGITS = 5         # fractional digits in exponential form

# Keypad layout, row by row
KEYPAD_ROWS = [
    ["MC", "MR", "M-", "M+"],
    ["AC", "+/-", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "−"],
    ["1", "2", "3", "+"],
    ["0", ".", "⌫", "="],
]
OPERATOR_BUTTONS = ["÷", "×", "−", "+"]
MEMORY_BUTTONS = ["MC", "MR", "M-", "M+"]

# Toast settings
TOAST_DURATION = 2000

# Logging
LOG_FILE = None

# Web Portal settings
WEB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "web")
if not os.path.isdir(WEB_DIR):
    # Installed copy, see [tool.setuptools.data-files] in pyproject.toml
    WEB_DIR = os.path.join(sys.prefix, "share", "pocketcalc", "web")
WEB_HOST = '127.0.0.1'
WEB_PORT = 8888
