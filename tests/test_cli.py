import io
import json
import os
import shlex
import sys

import pytest

from deskmenu import cli, launcher
from deskmenu.config import parse_config
from deskmenu.models import EntryField


def _picker_printing(line: str) -> str:
    code = f"import sys; sys.stdin.read(); print({line!r})"
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"


@pytest.fixture
def apps(tmp_path, write_entry, xdg_env):
    user = tmp_path / "home" / "applications"
    system = tmp_path / "sys1" / "applications"
    write_entry(user, "htop", Name="Htop", Exec="htop", Terminal="true")
    write_entry(system, "firefox", Name="firefox", Exec="firefox %u")
    write_entry(system, "Zed", Name="Zed", Exec="zed")
    write_entry(system, "secret", Name="Secret", Exec="secret", NoDisplay="true")
    write_entry(system, "gone", Name="Gone", Exec="gone", TryExec="/nonexistent/deskmenu-no-such-tool")
    env = dict(xdg_env)
    env["PATH"] = os.environ.get("PATH", "")
    return env


@pytest.fixture
def spawned(monkeypatch):
    calls = []
    monkeypatch.setattr(launcher, "spawn_detached", lambda argv, cwd=None: calls.append((list(argv), cwd)))
    return calls


def _run(args, env):
    out, err = io.StringIO(), io.StringIO()
    code = cli.main(args, env=env, stdout=out, stderr=err)
    return code, out.getvalue(), err.getvalue()


def test_print_mode_lists_visible_entries(apps):
    code, out, _ = _run([], apps)
    assert code == 0
    assert out == "firefox\nHtop\nZed\n"


def test_print_mode_identifier_and_command(apps):
    assert _run(["--entry-type", "identifier"], apps)[1] == "firefox\nhtop\nZed\n"
    assert _run(["--entry-type", "filename"], apps)[1] == "firefox\nhtop\nZed\n"
    assert _run(["--entry-type", "command"], apps)[1] == "firefox\nhtop\nzed\n"


def test_picker_choice_launches_in_terminal(apps, spawned):
    code, out, _ = _run(["--dmenu", _picker_printing("Htop"), "--terminal", "xterm -e {}"], apps)
    assert code == 0
    assert out == ""
    assert spawned == [(["xterm", "-e", "htop"], None)]


def test_unmatched_choice_runs_as_command(apps, spawned):
    code, out, err = _run(["--dmenu", _picker_printing("echo hi")], apps)
    assert code == 0
    assert out == "hi\n"
    assert "Command exited with status 0" in err
    assert spawned == []


def test_hidden_entry_cannot_be_picked_by_name(apps, spawned):
    # "Secret" is not in the menu, so it falls back to running `Secret` as a command
    code, _, err = _run(["--dmenu", _picker_printing("Secret")], apps)
    assert code == 1
    assert err.startswith("error: Invalid command.")
    assert spawned == []


def test_missing_placeholder_is_fatal(apps, spawned):
    code, _, err = _run(["--dmenu", _picker_printing("Htop"), "--terminal", "xterm -e"], apps)
    assert code == 1
    assert "Invalid terminal command" in err
    assert spawned == []


def test_invalid_picker_command(apps):
    code, _, err = _run(["--dmenu", "dmenu 'oops"], apps)
    assert code == 1
    assert "Invalid dmenu command." in err


def test_no_home_directory(tmp_path):
    code, out, err = _run([], {"XDG_DATA_DIRS": str(tmp_path)})
    assert code == 1
    assert out == ""
    assert err.startswith("error: ")


def test_spawn_failure_still_exits_zero(apps, write_entry, tmp_path):
    write_entry(tmp_path / "home" / "applications", "broken", Name="Broken", Exec=str(tmp_path / "no-binary"))
    code, _, err = _run(["--dmenu", _picker_printing("Broken")], apps)
    assert code == 0
    assert "Application exited with error:" in err


def test_usage_log_orders_menu_and_records_launch(apps, spawned, tmp_path):
    log = tmp_path / "state" / "usage.json"
    log.parent.mkdir()
    log.write_text(json.dumps({"Zed": 4}))

    assert _run(["--usage-log", str(log)], apps)[1] == "Zed\nfirefox\nHtop\n"

    _run(["--usage-log", str(log), "--dmenu", _picker_printing("firefox")], apps)
    assert spawned == [(["firefox", "%u"], None)]
    assert json.loads(log.read_text()) == {"Zed": 4, "firefox": 1}


def test_parse_config_defaults():
    cfg = parse_config([])
    assert cfg.field is EntryField.NAME
    assert cfg.dmenu is None and cfg.terminal is None and cfg.usage_log is None


def test_empty_dmenu_is_invalid(apps):
    code, out, err = _run(["--dmenu", ""], apps)
    assert code == 1
    assert out == ""
    assert "Invalid dmenu command." in err


def test_empty_terminal_template_is_fatal(apps, spawned):
    code, _, err = _run(["--dmenu", _picker_printing("Htop"), "--terminal", ""], apps)
    assert code == 1
    assert "Invalid terminal command" in err
    assert spawned == []


def test_fallback_does_not_touch_usage_log(apps, spawned, tmp_path):
    log = tmp_path / "usage.json"
    _run(["--usage-log", str(log), "--dmenu", _picker_printing("echo hi")], apps)
    assert not log.exists()
