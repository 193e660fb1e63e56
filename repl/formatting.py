"""Text output for the kblo shell: keyboard grids, key tables and help pages."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable

from tabulate import tabulate

from distances import DivergentPair
from hardware import Key, KeyboardHardware

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import Command, KbloSettings

HELP_WIDTH = 80


def format_table(rows: list[list[Any]], headers: list[str] | None = None, tablefmt: str = "simple") -> str:
    if headers is None:
        return tabulate(rows, tablefmt=tablefmt, floatfmt=".2f")
    return tabulate(rows, headers=headers, tablefmt=tablefmt, floatfmt=".2f")


def format_key(key: Key) -> str:
    """Short form of a key, e.g. `LPointer (4,0)`."""
    return f"{key.hand.value[0]}{key.finger.value} ({key.matrix_position.col},{key.matrix_position.row})"


def format_hardware_display(hardware: KeyboardHardware, label: str) -> str:
    return f"{hardware.name} ({len(hardware)} keys)\n\n{hardware.str(label=label)}"


def format_keys_table(hardware: KeyboardHardware) -> str:
    rows = [
        [
            key.matrix_position.col,
            key.matrix_position.row,
            key.hand.value,
            key.finger.value,
            key.position.x,
            key.position.y,
        ]
        for key in hardware.keys
    ]
    return format_table(rows, headers=["col", "row", "hand", "finger", "x", "y"])


def format_divergent_pairs(pairs: list[DivergentPair], near: float, far: int) -> str:
    """Tabulate divergent pairs, or say there are none for these thresholds."""
    if not pairs:
        return f"no divergent pairs (near <= {near:g}, far >= {far})"

    rows = [[format_key(pair.a), format_key(pair.b), pair.physical, pair.matrix] for pair in pairs]
    return format_table(rows, headers=["key", "key", "physical", "matrix"])


def format_command_help(command: "Command") -> str:
    """
    Help page for one command: usage line, description, arguments, examples.
    """
    usage = " ".join(["usage:", command.name] + [argument.syntax for argument in command.arguments])
    arguments = [
        textwrap.fill(f"{argument.name}: {argument.description}", width=HELP_WIDTH, initial_indent="  ", subsequent_indent="    ")
        for argument in command.arguments
    ] or ["  none"]
    examples = [f"  {command.name} {example}".rstrip() for example in command.examples]

    return "\n".join(
        ["", usage, "", textwrap.fill(command.description, width=HELP_WIDTH), "", "Arguments:"]
        + arguments
        + ["", "Examples:"]
        + examples
        + [""]
    )


def format_help_summary(commands: Iterable["Command"], categories: tuple[str, ...]) -> str:
    """One table of commands and their short descriptions per category, in the given category order."""
    lines = ["", "Type `help <command>` to get help on a specific command.", ""]
    commands = sorted(commands, key=lambda command: command.name)
    for category in categories:
        rows = [[command.name, command.short_description] for command in commands if command.category == category]
        if rows:
            lines.append(f"{category}:")
            lines.append(textwrap.indent(format_table(rows, tablefmt="plain"), "  "))
            lines.append("")
    return "\n".join(lines)


def format_settings(config_path: Path, settings: "KbloSettings", hardware: KeyboardHardware) -> str:
    return "\n".join([
        f"loaded settings from {config_path}:",
        f"hardware = '{hardware.name}'",
        f"label = '{settings.label}'",
        f"near = {settings.near:g}",
        f"far = {settings.far}",
        "",
    ])


def format_intro(settings_str: str) -> str:
    return "\n".join([
        "",
        "kblo -- keyboard layout geometry",
        "",
        settings_str,
        "Tab completes keyboard names. Type `help` to list commands.",
        "",
    ])
