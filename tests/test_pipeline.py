"""
CLI pipeline stage tests

Stages are run directly on a ProgramState; the network-facing export is
replaced with a stub.
"""

from argparse import Namespace

import pytest

import swingpen.__main__ as cli
from swingpen.lib.manifest import ManifestParseError
from swingpen.models import ExportResult, PenDefinition, ProgramState, pipeline


def state_make(inputdir, outputdir, **options) -> ProgramState:
    namespace = Namespace(swingDir=".", openBrowser=False, verbosity=1, unrelated="x")
    for key, value in options.items():
        setattr(namespace, key, value)
    return ProgramState.state_createFromNamespace(namespace, inputdir=inputdir, outputdir=outputdir)


def result_make() -> ExportResult:
    pen = PenDefinition(title="clock", description="clock", tags=["codeswing"], html="<p/>", html_pre_processor="none")
    return ExportResult(pen=pen, link="https://paste.test/x", url="https://viewer.test/?pen=https%3A%2F%2Fpaste.test%2Fx")


class TestProgramState:

    def test_unknown_options_dropped(self, tmp_path):
        state = state_make(tmp_path, tmp_path / "out", swingDir="clock")
        assert state.swingDir == "clock"
        assert not hasattr(state, "unrelated")

    def test_copy_is_independent(self, tmp_path):
        state = state_make(tmp_path, tmp_path)
        clone = state.copy()
        clone.swingDir = "other"
        assert state.swingDir == "."


class TestStages:

    def test_env_check_resolves_swing(self, tmp_path, swing_make):
        swing = swing_make({"index.html": ""}, name="clock")
        state = cli.env_check(state_make(tmp_path, tmp_path / "out", swingDir="clock"))

        assert state.envOK is True
        assert state.swingPath == swing
        assert (tmp_path / "out").is_dir()

    def test_env_check_missing_swing_exits(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            cli.env_check(state_make(tmp_path, tmp_path / "out", swingDir="nope"))
        assert excinfo.value.code == 1

    def test_pen_export_failure_exits(self, tmp_path, monkeypatch):
        async def failing_export(directory):
            raise ManifestParseError()

        monkeypatch.setattr(cli, "swing_export", failing_export)
        state = state_make(tmp_path, tmp_path)
        state.swingPath = tmp_path

        with pytest.raises(SystemExit):
            cli.pen_export(state)

    def test_full_pipeline_writes_outputs(self, tmp_path, swing_make, monkeypatch):
        swing_make({"index.html": "<p/>"}, name="clock")
        seen = []

        async def fake_export(directory):
            seen.append(directory)
            return result_make()

        monkeypatch.setattr(cli, "swing_export", fake_export)
        outputdir = tmp_path / "out"

        state = pipeline(
            state_make(tmp_path, outputdir, swingDir="clock"),
            cli.env_check,
            cli.pen_export,
            cli.results_save,
            cli.results_report,
        )

        assert seen == [tmp_path / "clock"]
        assert state.exportResult.link == "https://paste.test/x"
        assert (outputdir / "pen_url.txt").read_text().strip() == result_make().url
        assert '"title": "clock"' in (outputdir / "pen.json").read_text()

    def test_report_opens_browser(self, tmp_path, monkeypatch):
        opened = []
        monkeypatch.setattr(cli.webbrowser, "open", opened.append)

        state = state_make(tmp_path, tmp_path, openBrowser=True)
        state.exportResult = result_make()
        cli.results_report(state)

        assert opened == [result_make().url]
