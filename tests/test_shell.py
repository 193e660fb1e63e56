import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from repl.shell import KbloSettings, KbloShell


@pytest.fixture()
def shell(tmp_path) -> KbloShell:
    config = tmp_path / "config.toml"
    config.write_text('hardware = "ortho"\nlabel = "finger"\nnear = 1.5\nfar = 3\n', encoding="utf-8")
    return KbloShell(config_path=config)


def test_settings_defaults():
    settings = KbloSettings.from_dict({})
    assert settings == KbloSettings(hardware="ansi", label="finger", near=1.5, far=3)


def test_settings_reject_unknown_label():
    with pytest.raises(ValueError):
        KbloSettings.from_dict({"label": "colour"})


def test_missing_config_is_created(tmp_path, capsys):
    config = tmp_path / "config.toml"
    shell = KbloShell(config_path=config)
    assert config.exists()
    assert shell.hardware.name == "ansi"
    assert "creating default config" in capsys.readouterr().err


def test_malformed_config_raises(tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('label = "colour"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        KbloShell(config_path=config)


def test_unparseable_config_raises(tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('hardware = \n', encoding="utf-8")
    with pytest.raises(ValueError, match="malformed config"):
        KbloShell(config_path=config)


@pytest.mark.parametrize(
    "data",
    [
        {"far": 3.7},
        {"far": True},
        {"far": "3"},
        {"near": True},
        {"near": "1.5"},
        {"hardware": 3},
    ],
)
def test_settings_reject_wrong_types(data):
    with pytest.raises(ValueError):
        KbloSettings.from_dict(data)


def test_settings_accept_integer_near():
    assert KbloSettings.from_dict({"near": 2}).near == 2.0


def test_hardware_override(tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('hardware = "ortho"\n', encoding="utf-8")
    shell = KbloShell(config_path=config, hardware="split_ortho")
    assert shell.hardware.name == "split_ortho"
    assert shell.settings.hardware == "ortho"


def test_reload_keeps_previous_settings_on_error(tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text('hardware = "ortho"\nlabel = "finger"\nfar = 3\n', encoding="utf-8")
    shell = KbloShell(config_path=config)
    config.write_text('hardware = "nope"\nlabel = "hand"\nfar = 5\n', encoding="utf-8")
    shell.onecmd("reload")
    assert "error reloading settings" in capsys.readouterr().err
    assert shell.hardware.name == "ortho"
    assert shell.settings.label == "finger"
    assert shell.settings.far == 3


def test_commands_are_registered(shell):
    for name in ["hardware", "show", "keys", "distances", "reload", "quit", "exit"]:
        assert name in shell.commands
        assert hasattr(shell, f"do_{name}")


def test_show_current(shell, capsys):
    shell.onecmd("show")
    out = capsys.readouterr().out
    assert "ortho (30 keys)" in out
    assert "K R M P P   P P M R K" in out


def test_show_named_with_label(shell, capsys):
    shell.onecmd("show ansi both")
    out = capsys.readouterr().out
    assert "ansi (30 keys)" in out
    assert "LK LR LM LP LP   RP RP RM RR RK" in out


def test_show_label_only(shell, capsys):
    shell.onecmd("show hand")
    assert "L L L L L   R R R R R" in capsys.readouterr().out


def test_show_bad_label(shell, capsys):
    shell.onecmd("show ortho colour")
    assert "usage: show" in capsys.readouterr().err


def test_hardware_change(shell, capsys):
    shell.onecmd("hardware split_ortho")
    assert shell.hardware.name == "split_ortho"
    assert "Updated hardware to: split_ortho" in capsys.readouterr().out


def test_hardware_unknown(shell, capsys):
    shell.onecmd("hardware nope")
    assert shell.hardware.name == "ortho"
    assert "error loading hardware" in capsys.readouterr().err


def test_keys(shell, capsys):
    shell.onecmd("keys ortho_thumb")
    out = capsys.readouterr().out
    assert "finger" in out
    assert "Thumb" in out
    # header, separator and one line per key
    assert len(out.strip().split("\n")) == 2 + 32


def test_distances(shell, capsys):
    shell.onecmd("distances split_ortho")
    out = capsys.readouterr().out
    assert "LPointer (4,0)" in out
    assert "RPointer (5,0)" in out


def test_distances_none(shell, capsys):
    shell.onecmd("distances")
    assert "no divergent pairs" in capsys.readouterr().out


def test_distances_bad_threshold(shell, capsys):
    shell.onecmd("distances ortho -1")
    assert "error" in capsys.readouterr().err


def test_script_stops_at_quit(shell, capsys):
    shell.script("hardware ansi\nquit\nhardware ortho\n")
    assert shell.hardware.name == "ansi"
    assert "Bye bye" in capsys.readouterr().out


def test_comments_are_ignored(shell):
    shell.script("hardware split_ortho # try the split board\n# hardware ansi\n")
    assert shell.hardware.name == "split_ortho"


def test_reload(shell):
    shell.onecmd("hardware ansi")
    shell.onecmd("reload")
    assert shell.hardware.name == "ortho"


def test_help(shell, capsys):
    shell.onecmd("help")
    out = capsys.readouterr().out
    assert "analysis:" in out
    assert "distances" in out
    shell.onecmd("help show")
    assert "usage: show" in capsys.readouterr().out


def test_help_unknown_command(shell, capsys):
    shell.onecmd("help nope")
    assert "no such command: nope" in capsys.readouterr().err
