# utils/share_utils.py
"""Share text for workout records and a best-effort clipboard copy."""
import shutil
import subprocess
import sys
from typing import Any, Callable, List, Mapping, Optional, Sequence
from urllib.parse import quote

SHARE_TEMPLATE = (
    "💪 Completed {exercise_name} today: {weight}kg × {reps} reps × {sets} sets!\n\n"
    "Tracking my fitness progress with FitTrack 📊"
)
SHARE_LINK_BASE = "https://twitter.com/intent/tweet?text="

# (command, args) pairs tried in order
CLIPBOARD_COMMANDS: Sequence[Sequence[str]] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def format_weight(weight: Any) -> str:
    """80.0 -> "80", 82.5 -> "82.5"."""
    number = float(weight)
    if number.is_integer():
        return str(int(number))
    return f"{number:g}"


def generate_share_text(workout: Mapping[str, Any]) -> str:
    return SHARE_TEMPLATE.format(
        exercise_name=workout["exercise_name"],
        weight=format_weight(workout["weight"]),
        reps=workout["reps"],
        sets=workout["sets"],
    )


def generate_share_link(workout: Mapping[str, Any]) -> str:
    return SHARE_LINK_BASE + quote(generate_share_text(workout), safe="")


def _copy_with_command(text: str) -> bool:
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        try:
            subprocess.run(
                list(command),
                input=text.encode("utf-8"),
                check=True,
                timeout=5,
            )
            return True
        except (OSError, subprocess.SubprocessError) as e:
            print(f"⚠️ Clipboard command {command[0]} failed: {e}")
    return False


def _copy_with_tk(text: str) -> bool:
    import tkinter

    root = tkinter.Tk()
    try:
        root.withdraw()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
        return True
    finally:
        root.destroy()


def copy_to_clipboard(text: str,
                      strategies: Optional[List[Callable[[str], bool]]] = None) -> bool:
    """
    Copy text to the system clipboard.
    Tries the platform clipboard command first, then the Tk selection
    clipboard. Returns False instead of raising when nothing worked.
    """
    if strategies is None:
        strategies = [_copy_with_command, _copy_with_tk]

    for strategy in strategies:
        try:
            if strategy(text):
                return True
        except Exception as e:
            print(f"⚠️ Clipboard copy via {getattr(strategy, '__name__', strategy)} failed: {e}")

    print(f"❌ Copy to clipboard failed on {sys.platform}")
    return False
