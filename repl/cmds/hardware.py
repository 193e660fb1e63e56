"""`hardware` command for the kblo shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repl.completers import list_hardware_names
from repl.shell import Command, CommandArgument
from hardware import KeyboardHardware

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import KbloShell


def desc() -> Command:
    return Command(
        name="hardware",
        description="Shows or changes the current keyboard hardware, used by the other commands when no keyboard is named. ",
        arguments=(
            CommandArgument(
                "name",
                "[<name>]",
                "when specified, sets the current hardware to the given name in ./keebs/<name>.py. If not specified, shows the current hardware and lists the available ones.",
            ),
        ),
        examples=("", "ansi", "split_ortho"),
        category="configuration",
        short_description="view or update the current keyboard hardware",
    )


def complete(shell: "KbloShell", text: str, line: str, begidx: int, endidx: int) -> list[str]:
    return list_hardware_names(shell, text)


def exec(shell: "KbloShell", arg: str) -> None:
    arg = arg.strip()
    if not arg:
        shell._info(f"Current hardware: {shell.hardware.name}")
        shell._info(f"Available: {', '.join(KeyboardHardware.names())}")
        return

    try:
        new_hardware = KeyboardHardware.from_name(arg)
    except ValueError as e:
        shell._warn(f"error loading hardware: {e}")
        return

    shell._change_settings(hardware=new_hardware)
    shell._info(f"Updated hardware to: {new_hardware.name}")
