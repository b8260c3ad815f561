#!/usr/bin/env python3
"""
报告生成器与命令行入口测试
"""

import json

import pytest

import run_demos
from creational.demos import DemoRegistry
from creational.exceptions import DemoError, DemoNotFound, ReportError
from utils.report_generator import ReportGenerator

TRANSCRIPTS = {
    "prototype": ["===== Prototype Pattern Demo ======", "Original: Person: John Doe, Age: 30"],
    "factory_method": ["===== Factory Method Pattern Demo =====", "The car is being driven"],
}


class TestReportGenerator:
    def test_text_report(self):
        text = ReportGenerator(title="Demo Run").render(TRANSCRIPTS, "text")
        assert text.startswith("Demo Run")
        assert "Demos: 2 | Lines: 4" in text
        assert "--- prototype ---" in text
        assert "The car is being driven" in text

    def test_markdown_report(self):
        md = ReportGenerator().render(TRANSCRIPTS, "markdown")
        assert md.startswith("# Creational Patterns Demo Report")
        assert "## factory_method" in md
        assert "```" in md

    def test_json_report(self):
        data = json.loads(ReportGenerator().render(TRANSCRIPTS, "json"))
        assert data["demo_count"] == 2
        assert data["demos"][0]["name"] == "prototype"
        assert data["demos"][1]["line_count"] == 2

    def test_unsupported_format(self):
        with pytest.raises(ReportError) as exc_info:
            ReportGenerator().render(TRANSCRIPTS, "pdf")
        assert exc_info.value.format == "pdf"

    def test_save_infers_format(self, tmp_path):
        target = tmp_path / "nested" / "report.json"
        path = ReportGenerator().save(TRANSCRIPTS, str(target))
        assert path == str(target)
        assert json.loads(target.read_text(encoding="utf-8"))["total_lines"] == 4

    def test_save_failure_wrapped(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(ReportError):
            ReportGenerator().save(TRANSCRIPTS, str(blocker / "report.md"))


class TestCommandLine:
    def test_list(self, capsys):
        assert run_demos.main(["--list"]) == run_demos.EXIT_OK
        out = capsys.readouterr().out
        assert "builder (aliases: house)" in out
        assert "singleton" in out

    def test_run_selected_text(self, capsys):
        assert run_demos.main(["prototype"]) == run_demos.EXIT_OK
        out = capsys.readouterr().out
        assert "Clone:    Person: Jane Doe, Age: 30" in out

    def test_markdown_to_stdout(self, capsys):
        assert run_demos.main(["fm", "--format", "markdown"]) == run_demos.EXIT_OK
        out = capsys.readouterr().out
        assert "## factory_method" in out

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "demo.json"
        code = run_demos.main(["builder", "--quiet", "--format", "json", "--output", str(target)])
        assert code == run_demos.EXIT_OK
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["demos"][0]["name"] == "builder"
        assert capsys.readouterr().out == ""

    def test_unknown_demo(self):
        assert run_demos.main(["adapter"]) == run_demos.EXIT_USAGE

    def test_demo_failure_exits_failed(self, monkeypatch):
        def broken(echo=print):
            return {}["missing-part"]

        monkeypatch.setitem(DemoRegistry._registry, "broken", broken)
        assert run_demos.main(["broken", "--quiet"]) == run_demos.EXIT_FAILED

    def test_lookup_error_inside_demo_is_not_unknown_demo(self, monkeypatch):
        def broken(echo=print):
            return [][1]

        monkeypatch.setitem(DemoRegistry._registry, "broken", broken)
        with pytest.raises(DemoError) as exc_info:
            run_demos.run_selected(["broken"], quiet=True)
        assert not isinstance(exc_info.value, DemoNotFound)
        assert isinstance(exc_info.value.cause, IndexError)
