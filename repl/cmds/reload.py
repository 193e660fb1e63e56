"""`reload` command for the kblo shell."""



from typing import TYPE_CHECKING

from repl.shell import Command

if TYPE_CHECKING:  # pragma: no cover
    from repl.shell import KbloShell


def desc() -> Command:
    return Command(
        name="reload",
        description="Reload the settings from the config.toml file. Resets the current hardware, label, and distance thresholds. On error the previous settings stay in place.",
        arguments=(),
        examples=("",),
        category="configuration",
        short_description="reload the settings from the config.toml file",
    )


def exec(shell: "KbloShell", arg: str) -> None:
    try:
        shell._load_settings()
    except (OSError, ValueError) as e:
        shell._warn(f"error reloading settings: {e}")
        return
    shell._info(shell._settings_str())
