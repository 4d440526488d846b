"""Tests for sample_app.cli — entrypoint, argument parsing and commands."""

import pytest

from sample_app.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_run_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "sample-app" in capsys.readouterr().out


class TestCLIRoutes:
    def test_lists_default_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "sample_app.pages:create_app"])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["METHOD", "PATH", "HANDLER"]
        for path in (
            "/static_pages/home",
            "/static_pages/help",
            "/static_pages/about",
            "/static_pages/contact",
        ):
            assert path in out
        assert "landing" in out

    def test_bad_import_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "no_such_module_for_sample_app:app"])
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_non_app_attribute_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "sample_app.pages:PAGES"])
        assert exc_info.value.code == 1
        assert "not a sample_app.App" in capsys.readouterr().err


class TestCLIRun:
    def test_run_passes_host_and_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[str, int, dict[str, object]]] = []

        def fake_run_server(app, host, port, **kwargs):
            calls.append((host, port, kwargs))

        monkeypatch.setattr("sample_app.server.dev.run_server", fake_run_server)
        main(["run", "sample_app.pages:create_app", "--host", "0.0.0.0", "--port", "9000"])

        assert calls == [("0.0.0.0", 9000, {"workers": 1, "reload": False})]

    def test_run_defaults_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[str, int]] = []

        def fake_run_server(app, host, port, **kwargs):
            calls.append((host, port))

        monkeypatch.setattr("sample_app.server.dev.run_server", fake_run_server)
        main(["run", "sample_app.pages:create_app"])

        assert calls == [("127.0.0.1", 8000)]
