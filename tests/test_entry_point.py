import pytest

import endless_terrain
from endless_terrain import __main__ as entry
from endless_terrain.terrain import TerrainConfigError


def test_dependency_check_passes():
    assert endless_terrain.check_dependencies() is True
    assert endless_terrain.is_compatible is True


def test_keyboard_interrupt_exits_cleanly(monkeypatch, capsys):
    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(entry, "main", interrupted)

    with pytest.raises(SystemExit) as exc_info:
        entry.run_application()

    assert exc_info.value.code == 0
    assert "Goodbye" in capsys.readouterr().out


def test_config_error_exit_code(monkeypatch, capsys):
    def misconfigured():
        raise TerrainConfigError("screen_width must be positive, got 0")

    monkeypatch.setattr(entry, "main", misconfigured)

    with pytest.raises(SystemExit) as exc_info:
        entry.run_application()

    assert exc_info.value.code == 2
    assert "screen_width" in capsys.readouterr().err


def test_unexpected_error_exit_code(monkeypatch, capsys):
    def crashing():
        raise RuntimeError("boom")

    monkeypatch.setattr(entry, "main", crashing)

    with pytest.raises(SystemExit) as exc_info:
        entry.run_application()

    assert exc_info.value.code == 1
    assert "boom" in capsys.readouterr().err


def test_incompatible_environment_refuses_to_start(monkeypatch):
    monkeypatch.setattr(entry, "is_compatible", False)
    monkeypatch.setattr(entry, "main", lambda: pytest.fail("main should not run"))

    with pytest.raises(SystemExit) as exc_info:
        entry.run_application()

    assert exc_info.value.code == 1
