"""Auto-completion helpers and shared parsers for the kblo shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hardware import LABELS, KeyboardHardware

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from repl.shell import KbloShell


def list_hardware_names(shell: "KbloShell", prefix: str = "") -> list[str]:
    """Return all built-in keyboard names, matching the optional prefix."""

    return [name for name in KeyboardHardware.names() if name.startswith(prefix)]


def list_labels(shell: "KbloShell", prefix: str = "") -> list[str]:
    return [label for label in LABELS if label.startswith(prefix)]


def parse_hardware_and_rest(shell: "KbloShell", arg: str) -> tuple[KeyboardHardware | None, list[str]]:
    """Split off an optional leading keyboard name; fall back to the current keyboard.

    The hardware is None, after a warning, when the named keyboard cannot be loaded.
    """

    args = shell._split_args(arg)
    if args and args[0] in KeyboardHardware.names():
        hardware = shell._hardware_or_current(args[0])
        return hardware, args[1:]
    return shell.hardware, args
