"""`show` command for the kblo shell."""



from typing import TYPE_CHECKING

from hardware import LABELS
from repl.completers import list_hardware_names, list_labels, parse_hardware_and_rest
from repl.formatting import format_hardware_display
from repl.shell import Command, CommandArgument

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import KbloShell


def desc() -> Command:
    return Command(
        name="show",
        description="Shows the given keyboard hardware as a grid of its switch matrix, labelling each key with its finger, hand, or both.",
        arguments=(
            CommandArgument(
                "keyboard",
                "[<keyboard>]",
                "the keyboard hardware to show, defaults to the current hardware.",
            ),
            CommandArgument(
                "label",
                "[none|finger|hand|both]",
                "what to print for each key, defaults to the `label` setting in config.toml. "
                "Fingers are T(humb), P(ointer), M(iddle), R(ing), (pin)K(y); hands are L and R.",
            ),
        ),
        examples=("", "ortho_thumb", "ansi both", "hand"),
        category="analysis",
        short_description="show a keyboard hardware grid",
    )


def complete(shell: "KbloShell", text: str, line: str, begidx: int, endidx: int) -> list[str]:
    if shell._arg_num_at_index(line, begidx, endidx) == 1:
        return list_hardware_names(shell, text) + list_labels(shell, text)
    return list_labels(shell, text)


def exec(shell: "KbloShell", arg: str) -> None:
    hardware, rest = parse_hardware_and_rest(shell, arg)
    if hardware is None:
        return
    if len(rest) > 1 or (rest and rest[0] not in LABELS):
        shell._warn("usage: show [<keyboard>] [none|finger|hand|both]")
        return

    label = rest[0] if rest else shell.settings.label

    shell._info("")
    shell._info(format_hardware_display(hardware, label))
    shell._info("")
