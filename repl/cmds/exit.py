"""`exit` command for the kblo shell."""



from typing import TYPE_CHECKING

from repl.shell import Command
from . import quit as quit_cmd

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import KbloShell


def desc() -> Command:
    return Command(
        name="exit",
        description="Quits kblo.",
        arguments=(),
        examples=("",),
        category="commands",
        short_description="quits kblo",
    )


def exec(shell: "KbloShell", arg: str) -> bool:
    return quit_cmd.exec(shell, arg)
