"""
Effect intents for PocketCalc
The engine never plays sounds, touches the clipboard or saves anything.
It returns these values and the caller carries them out.
"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PlaySound:
    cue: str                   # 'click' | 'result' | 'error' | 'clear'


@dataclass(frozen=True)
class CopyToClipboard:
    text: str


@dataclass(frozen=True)
class Notify:
    message: str
    kind: str = "success"      # 'success' | 'error' | 'info'


@dataclass(frozen=True)
class SaveSession:
    session: Any


def describe(effect):
    """Return a JSON-friendly dict for an effect the browser can act on.

    SaveSession is handled on the server and is not described.
    """
    if isinstance(effect, PlaySound):
        return {"type": "sound", "cue": effect.cue}
    if isinstance(effect, CopyToClipboard):
        return {"type": "copy", "text": effect.text}
    if isinstance(effect, Notify):
        return {"type": "notify", "message": effect.message, "kind": effect.kind}
    return None
