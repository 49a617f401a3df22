"""
GUI for PocketCalc
Tkinter-based calculator window. It feeds button and key presses to the
engine, renders the resulting session and carries out the engine's effects.
"""
import tkinter as tk
from tkinter import ttk

import config
from calculator import CalculatorEngine, Command
from effects import CopyToClipboard, Notify, PlaySound, SaveSession
from history_manager import HistoryManager
from keymap import event_for_button, event_for_key
from logging_config import get_logger

logger = get_logger(__name__)


class PocketCalcGUI:
    def __init__(self, root, session_manager):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        # Initialize components
        self.session_manager = session_manager
        self.history_manager = HistoryManager()
        self.engine = CalculatorEngine(session_manager.load(), on_effect=self.run_effect)

        # ── Theme state (load before any widget is created) ───────────────
        self.T: dict = config.get_theme(self.engine.current_state().dark_mode)
        self._apply_ttk_styles()
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.render()

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def _apply_ttk_styles(self):
        """Configure ttk widget styles for the active palette."""
        T = self.T
        style = ttk.Style()
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        style.configure("Vertical.TScrollbar",
                        background=T["shadow_dark"], troughcolor=T["display_bg"],
                        borderwidth=0, relief="flat", width=10, arrowsize=0)
        style.map("Vertical.TScrollbar",
                  background=[("active", T["accent"]), ("pressed", T["accent"])])

    def apply_theme(self):
        """Refresh T, re-style ttk, then destroy+rebuild all widgets."""
        self.T = config.get_theme(self.engine.current_state().dark_mode)
        self._apply_ttk_styles()
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()
        self.render()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a flat keypad button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["accent"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "memory":
            bg, fg, abg = T["bg_dark"], T["memory_fg"], T["shadow_dark"]
        elif kind == "danger":
            bg, fg, abg = T["danger"], "#FFFFFF", T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    # ── Inline toast (replaces messagebox popups) ────────────────────────
    def _show_toast(self, msg, kind="success", duration=config.TOAST_DURATION):
        """Show an inline toast banner at the top of the window.
        kind: 'success' | 'error' | 'info'
        """
        T = self.T
        colours = {
            "success": T["success"],
            "error":   T["danger"],
            "info":    T["info"],
        }
        icons = {"success": "✓", "error": "✗", "info": "ℹ"}
        bg = colours.get(kind, colours["info"])
        toast = tk.Frame(self.root, bg=bg)
        toast.place(relx=0.05, y=8, relwidth=0.9, height=34)
        toast.lift()
        tk.Label(toast, text=f"  {icons.get(kind, '')}  {msg}",
                 font=(config.BUTTON_FONT[0], 9, "bold"),
                 bg=bg, fg="#FFFFFF", anchor="w").pack(side=tk.LEFT, fill=tk.X, expand=True)
        tk.Button(toast, text="✕", font=(config.BUTTON_FONT[0], 8),
                  bg=bg, fg="#FFFFFF", relief=tk.FLAT, bd=0,
                  command=toast.destroy, cursor="hand2",
                  activebackground=bg).pack(side=tk.RIGHT, padx=4)
        self.root.after(duration, lambda: toast.destroy() if toast.winfo_exists() else None)

    def create_widgets(self):
        """Create main UI components"""
        T = self.T

        # Top bar: memory indicator and preference toggles
        top_frame = tk.Frame(self.root, bg=T["bg"])
        top_frame.pack(fill=tk.X, padx=6, pady=(6, 2))

        self.memory_label = tk.Label(top_frame, text="", font=(config.LABEL_FONT[0], 10, "bold"),
                                     bg=T["bg"], fg=T["memory_fg"], width=3, anchor=tk.W)
        self.memory_label.pack(side=tk.LEFT)

        self.dark_btn = self._neu_btn(top_frame, "", font=config.LABEL_FONT,
                                      command=lambda: self.submit(Command.TOGGLE_DARK_MODE))
        self.dark_btn.pack(side=tk.RIGHT, padx=2)
        self.sound_btn = self._neu_btn(top_frame, "", font=config.LABEL_FONT,
                                       command=lambda: self.submit(Command.TOGGLE_SOUND))
        self.sound_btn.pack(side=tk.RIGHT, padx=2)
        self._neu_btn(top_frame, "Copy", font=config.LABEL_FONT,
                      command=lambda: self.submit(Command.COPY)).pack(side=tk.RIGHT, padx=2)

        # Display area with LCD-style font
        display_frame = tk.Frame(self.root, bg=T["display_bg"], height=70)
        display_frame.pack(fill=tk.X, padx=6, pady=4)
        display_frame.pack_propagate(False)

        self.display = tk.Label(
            display_frame, text="0",
            font=config.DISPLAY_FONT,
            bg=T["display_bg"], fg=T["display_fg"],
            anchor=tk.E, padx=12
        )
        self.display.pack(fill=tk.BOTH, expand=True)

        # Keypad
        keypad = tk.Frame(self.root, bg=T["bg"])
        keypad.pack(fill=tk.BOTH, expand=True, padx=6, pady=2)
        for r, row in enumerate(config.KEYPAD_ROWS):
            keypad.rowconfigure(r, weight=1)
            for c, label in enumerate(row):
                keypad.columnconfigure(c, weight=1)
                if label == "=":
                    kind = "equals"
                elif label in config.OPERATOR_BUTTONS:
                    kind = "operator"
                elif label in config.MEMORY_BUTTONS:
                    kind = "memory"
                elif label == "AC":
                    kind = "danger"
                else:
                    kind = "normal"
                btn = self._neu_btn(keypad, label, kind=kind,
                                    command=lambda b=label: self.calculator_button_click(b))
                btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)

        # History list
        history_frame = tk.Frame(self.root, bg=T["bg"])
        history_frame.pack(fill=tk.BOTH, padx=6, pady=(2, 6))
        self.history_list = tk.Listbox(history_frame, height=5, font=config.LABEL_FONT,
                                       bg=T["listbox_bg"], fg=T["listbox_fg"],
                                       relief=tk.FLAT, bd=0, highlightthickness=0)
        sb = ttk.Scrollbar(history_frame, orient=tk.VERTICAL, command=self.history_list.yview)
        self.history_list.configure(yscrollcommand=sb.set)
        self.history_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        sb.pack(side=tk.RIGHT, fill=tk.Y)

    def render(self):
        """Draw the current session"""
        session = self.engine.current_state()
        self.display.config(text=session.display)
        self.memory_label.config(text="M" if session.memory is not None else "")
        self.sound_btn.config(text="Sound on" if session.sound_enabled else "Sound off")
        self.dark_btn.config(text="Light" if session.dark_mode else "Dark")

        self.history_list.delete(0, tk.END)
        for line in self.history_manager.format_calculation_history(session.history):
            self.history_list.insert(tk.END, line)

    def submit(self, event):
        """Send one event to the engine and redraw"""
        dark_before = self.engine.current_state().dark_mode
        session = self.engine.submit(event)
        if session.dark_mode != dark_before:
            self.apply_theme()
        else:
            self.render()

    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        event = event_for_button(button)
        if event is not None:
            self.submit(event)

    def on_key_press(self, event):
        """Handle keyboard input"""
        calc_event = event_for_key(event.char, event.keysym)
        if calc_event is not None:
            self.submit(calc_event)

    # ── Effects ──────────────────────────────────────────────────────────
    def run_effect(self, effect):
        """Carry out one effect requested by the engine"""
        if isinstance(effect, SaveSession):
            self.session_manager.save(effect.session)
        elif isinstance(effect, PlaySound):
            self.root.bell()
        elif isinstance(effect, CopyToClipboard):
            self.root.clipboard_clear()
            self.root.clipboard_append(effect.text)
        elif isinstance(effect, Notify):
            self._show_toast(effect.message, kind=effect.kind)
        else:
            logger.warning(f"Unknown effect: {effect!r}")
