"""`quit` command for the kblo shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repl.shell import Command

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import KbloShell


def desc() -> Command:
    return Command(
        name="quit",
        description="Quits kblo.",
        arguments=(),
        examples=("",),
        category="commands",
        short_description="quits kblo",
    )


def exec(shell: "KbloShell", arg: str) -> bool:
    shell._info("Exiting kblo. Bye bye.")
    shell._info("")
    return True
