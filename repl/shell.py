"""The kblo shell: settings, command registration and the shared helpers commands use."""



import cmd
import dataclasses
import importlib
import pkgutil
import re
import shlex
import sys
import types
from pathlib import Path
from typing import List, Optional

from hardware import LABELS, KeyboardHardware
from repl.formatting import (
    format_command_help,
    format_help_summary,
    format_intro,
    format_settings,
)


try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11 fallback
    import tomli as tomllib  # type: ignore[no-redef]


@dataclasses.dataclass(slots=True, frozen=True)
class CommandArgument:
    """Metadata for a command argument."""

    name: str
    syntax: str
    description: str


@dataclasses.dataclass(slots=True, frozen=True)
class Command:
    """Metadata for a shell command."""

    name: str
    description: str
    arguments: tuple[CommandArgument, ...]
    examples: tuple[str, ...]
    category: str
    short_description: str


# help lists categories in this order
CATEGORIES = ("analysis", "configuration", "commands")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config.toml"
DEFAULT_CONFIG = """
hardware = "ansi"
label = "finger"
near = 1.5
far = 3
"""


def _configure_readline() -> None:
    """Keep command history in ~/.kblo_history and complete with tab, where readline exists."""

    try:
        import readline
    except ImportError:  # pragma: no cover - Windows
        return

    import atexit

    history = Path.home() / ".kblo_history"
    readline.parse_and_bind("tab: complete")
    try:
        readline.read_history_file(history)
    except OSError:
        pass
    atexit.register(readline.write_history_file, history)


@dataclasses.dataclass(slots=True, frozen=True)
class KbloSettings:
    hardware: str
    label: str
    near: float
    far: int

    @classmethod
    def from_dict(cls, data: dict) -> "KbloSettings":
        """Validate the settings read from config.toml; missing entries take their defaults."""
        hardware = data.get("hardware", "ansi")
        label = data.get("label", "finger")
        near = data.get("near", 1.5)
        far = data.get("far", 3)

        if not isinstance(hardware, str):
            raise ValueError(f"hardware must be a keyboard name, got {hardware!r}")
        if label not in LABELS:
            raise ValueError(f"label must be one of {', '.join(LABELS)}, got {label!r}")
        if isinstance(near, bool) or not isinstance(near, (int, float)):
            raise ValueError(f"near must be a number, got {near!r}")
        if isinstance(far, bool) or not isinstance(far, int):
            raise ValueError(f"far must be an integer, got {far!r}")
        return cls(hardware=hardware, label=label, near=float(near), far=far)


def read_settings(config_path: Path) -> KbloSettings:
    """
    Read config.toml, writing the default one first if there is none.

    Raises ValueError when the file cannot be parsed or holds invalid settings.
    """
    if not config_path.exists():
        print(f"warning: config file not found at {config_path}, creating default config", file=sys.stderr)
        config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")

    with config_path.open("rb") as fh:
        try:
            data = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"malformed config in {config_path}: {exc}") from exc
    return KbloSettings.from_dict(data)


class KbloShell(cmd.Cmd):
    """Interactive shell for exploring keyboard hardware."""

    prompt = "kblo> "

    def __init__(self, config_path: Optional[Path] = None, hardware: str | None = None) -> None:
        """
        hardware: start on this keyboard instead of the one named in the config file
        """
        super().__init__()
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.commands: dict[str, Command] = {}

        self._load_settings()
        if hardware is not None:
            self.hardware = KeyboardHardware.from_name(hardware)
        self._register_builtin_commands()

    # ----- lifecycle hooks -------------------------------------------------
    def preloop(self) -> None:
        self._info(format_intro(format_settings(self.config_path, self.settings, self.hardware)))

    def precmd(self, line: str) -> str:
        # `#` starts a comment unless escaped
        return re.sub(r"(?<!\\)#.*", "", line)

    def emptyline(self) -> bool:
        return False

    def script(self, script: str) -> None:
        """Run each line of the script as a command, stopping at `quit`."""
        for line in script.splitlines():
            line = self.precmd(line).strip()
            if not line:
                continue
            stop = self.onecmd(line)
            self._info("")
            if stop:
                break

    # ----- command registration -------------------------------------------
    def _register_builtin_commands(self) -> None:
        """Bind `exec` and `complete` of every module in repl/cmds as do_<name> and complete_<name>."""
        from repl import cmds as cmds_pkg

        for module_info in pkgutil.iter_modules(cmds_pkg.__path__):
            module = importlib.import_module(f"{cmds_pkg.__name__}.{module_info.name}")
            command = module.desc()
            self.commands[command.name] = command
            setattr(self, f"do_{command.name}", types.MethodType(module.exec, self))
            if hasattr(module, "complete"):
                setattr(self, f"complete_{command.name}", types.MethodType(module.complete, self))

    def get_names(self) -> list[str]:
        return dir(self)

    # ----- settings and hardware ------------------------------------------
    def _load_settings(self) -> None:
        settings = read_settings(self.config_path)
        hardware = KeyboardHardware.from_name(settings.hardware)
        self.settings, self.hardware = settings, hardware

    def _settings_str(self) -> str:
        return format_settings(self.config_path, self.settings, self.hardware)

    def _change_settings(self, hardware: KeyboardHardware | None = None) -> None:
        self.hardware = hardware or self.hardware

    def _hardware_or_current(self, name: str | None) -> KeyboardHardware | None:
        """Resolve a keyboard name, or the current keyboard when no name is given."""
        if not name:
            return self.hardware
        try:
            return KeyboardHardware.from_name(name)
        except ValueError as e:
            self._warn(f"error loading hardware: {e}")
            return None

    # ----- message helpers -------------------------------------------------
    def _info(self, message: str) -> None:
        print(message)

    @staticmethod
    def _warn(message: str) -> None:
        print(message, file=sys.stderr)

    # ----- parsing helpers ------------------------------------------------
    def _split_args(self, arg: str) -> List[str]:
        try:
            return shlex.split(arg)
        except ValueError as exc:
            self._warn(f"error parsing arguments: {exc}")
            return []

    def _arg_num_at_index(self, line: str, begidx: int, endidx: int) -> int | None:
        """Index of the argument being completed, counting the command name as 0."""
        try:
            return len(shlex.split(line[:begidx]))
        except ValueError:
            return None

    # ----- help ------------------------------------------------------------
    def do_help(self, arg: str) -> None:  # type: ignore[override]
        """help with any command, try `help show`"""
        arg = arg.strip()
        if not arg:
            self._info(format_help_summary(self.commands.values(), CATEGORIES))
        elif arg in self.commands:
            self._info(format_command_help(self.commands[arg]))
        else:
            self._warn(f"no such command: {arg}")


__all__ = [
    "Command",
    "CommandArgument",
    "KbloShell",
    "KbloSettings",
    "read_settings",
    "_configure_readline",
    "DEFAULT_CONFIG_PATH",
]
