"""End-to-end tests for the PaddyDoc orchestrator and text rendering."""

from paddydoc import PaddyDoc, render_text
from paddydoc.config import AnalyzerConfig
from paddydoc.types import ErrorReport, HealthyReport, Section, StructuredReport


class StubAnalyzer:
    def __init__(self, text):
        self._text = text
        self.paths = []

    def analyze(self, image_path):
        self.paths.append(image_path)
        return self._text


def test_run_classifies_analyzer_output():
    analyzer = StubAnalyzer("1. Disease Name: Blast\n2. Severity: severe")
    doc = PaddyDoc(AnalyzerConfig(), analyzer=analyzer)

    report = doc.run("leaf.jpg")

    assert analyzer.paths == ["leaf.jpg"]
    assert report == StructuredReport(
        sections=(Section("Disease Name", "Blast"), Section("Severity", "severe"))
    )


def test_run_surfaces_service_errors():
    doc = PaddyDoc(analyzer=StubAnalyzer("Error analyzing image: 503 overloaded"))
    assert doc.run("leaf.jpg") == ErrorReport(message="503 overloaded")


def test_diagnose_needs_no_api_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)
    report = PaddyDoc().diagnose("It looks healthy.")
    assert report == HealthyReport(message="It looks healthy.")


def test_render_structured_report():
    report = StructuredReport(
        sections=(
            Section("Overview", "Summary line"),
            Section("Disease Name", "Blast"),
            Section("", "Check the symptoms"),
        )
    )
    assert render_text(report) == (
        "Overview:\nSummary line\n\nDisease Name:\nBlast\n\nCheck the symptoms"
    )


def test_render_terminal_reports():
    assert render_text(ErrorReport("timeout")) == "Analysis failed:\ntimeout"
    assert render_text(HealthyReport("Looks healthy")) == "Plant looks healthy:\nLooks healthy"
    assert render_text(StructuredReport()) == "No diagnosis found in the model response."


def test_to_dict_shapes():
    assert ErrorReport("x").to_dict() == {
        "kind": "error",
        "message": "x",
        "sections": [{"title": "Error", "content": "x"}],
    }
    assert StructuredReport(sections=(Section("Severity", "mild"),)).to_dict() == {
        "kind": "structured",
        "sections": [{"title": "Severity", "content": "mild"}],
    }
