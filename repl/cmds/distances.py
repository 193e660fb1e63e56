"""`distances` command for the kblo shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from distances import divergent_pairs
from repl.completers import list_hardware_names, parse_hardware_and_rest
from repl.formatting import format_divergent_pairs
from repl.shell import Command, CommandArgument

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import KbloShell


def desc() -> Command:
    return Command(
        name="distances",
        description=(
            "Lists the key pairs where physical and matrix distance disagree: keys that are physically "
            "near but several matrix steps apart, and matrix neighbours that are physically far apart."
        ),
        arguments=(
            CommandArgument(
                "keyboard",
                "[<keyboard>]",
                "the keyboard hardware to analyze, defaults to the current hardware.",
            ),
            CommandArgument(
                "near",
                "[<near>]",
                "physical distance at or below which two keys are near, defaults to the `near` setting.",
            ),
            CommandArgument(
                "far",
                "[<far>]",
                "matrix distance at or above which two keys are far, defaults to the `far` setting.",
            ),
        ),
        examples=("", "split_ortho", "ansi 1.2 2"),
        category="analysis",
        short_description="list key pairs where physical and matrix distance disagree",
    )


def complete(shell: "KbloShell", text: str, line: str, begidx: int, endidx: int) -> list[str]:
    if shell._arg_num_at_index(line, begidx, endidx) == 1:
        return list_hardware_names(shell, text)
    return []


def exec(shell: "KbloShell", arg: str) -> None:
    hardware, rest = parse_hardware_and_rest(shell, arg)
    if hardware is None:
        return
    if len(rest) > 2:
        shell._warn("usage: distances [<keyboard>] [<near>] [<far>]")
        return

    try:
        near = float(rest[0]) if len(rest) > 0 else shell.settings.near
        far = int(rest[1]) if len(rest) > 1 else shell.settings.far
        pairs = divergent_pairs(hardware, near=near, far=far)
    except ValueError as e:
        shell._warn(f"error: {e}")
        return

    shell._info(format_divergent_pairs(pairs, near, far))
