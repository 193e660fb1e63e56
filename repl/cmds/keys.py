"""`keys` command for the kblo shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repl.completers import list_hardware_names, parse_hardware_and_rest
from repl.formatting import format_keys_table
from repl.shell import Command, CommandArgument

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import KbloShell


def desc() -> Command:
    return Command(
        name="keys",
        description="Tabulates every key of a keyboard hardware: its matrix column and row, hand, finger and physical position.",
        arguments=(
            CommandArgument(
                "keyboard",
                "[<keyboard>]",
                "the keyboard hardware to list, defaults to the current hardware.",
            ),
        ),
        examples=("", "ortho_thumb"),
        category="analysis",
        short_description="list the keys of a keyboard hardware",
    )


def complete(shell: "KbloShell", text: str, line: str, begidx: int, endidx: int) -> list[str]:
    return list_hardware_names(shell, text)


def exec(shell: "KbloShell", arg: str) -> None:
    hardware, rest = parse_hardware_and_rest(shell, arg)
    if hardware is None:
        return
    if rest:
        shell._warn("usage: keys [<keyboard>]")
        return

    shell._info(format_keys_table(hardware))
