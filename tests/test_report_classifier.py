"""Tests for classifying raw vision-model text into report variants."""

import pytest

from paddydoc.report import classify
from paddydoc.types import ErrorReport, HealthyReport, Section, StructuredReport


SCENARIO_C = (
    "1. **Disease Name**: Bacterial Leaf Blight\n"
    "2. Severity: Moderate\n"
    "3. Symptoms: Yellowing leaves with water-soaked lesions\n"
    "4. Recommended treatment: Apply copper-based bactericide"
)


class TestErrorReports:
    def test_error_prefix_strips_message(self):
        report = classify("Error analyzing image: network timeout")
        assert report == ErrorReport(message="network timeout")

    def test_error_wins_over_healthy_and_numbering(self):
        text = "Error analyzing image: healthy\n1. Disease Name: Blast"
        report = classify(text)
        assert isinstance(report, ErrorReport)
        assert report.message == "healthy\n1. Disease Name: Blast"

    def test_error_has_single_section(self):
        report = classify("Error analyzing image: quota exceeded")
        assert report.sections == (Section(title="Error", content="quota exceeded"),)

    def test_prefix_must_be_at_start(self):
        report = classify("  Error analyzing image: boom")
        assert not isinstance(report, ErrorReport)

    def test_bare_prefix_gives_empty_message(self):
        assert classify("Error analyzing image:") == ErrorReport(message="")


class TestHealthyReports:
    def test_healthy_keeps_text_verbatim(self):
        text = "The plant appears healthy and shows no signs of disease."
        report = classify(text)
        assert report == HealthyReport(message=text)

    @pytest.mark.parametrize("word", ["HEALTHY", "Healthy", "unhealthy"])
    def test_healthy_match_is_case_insensitive_substring(self, word):
        text = f"1. Disease Name: Blast\nThe leaf looks {word} otherwise."
        report = classify(text)
        assert isinstance(report, HealthyReport)
        assert report.message == text

    def test_healthy_has_single_section(self):
        report = classify("Looks healthy.")
        assert len(report.sections) == 1
        assert report.sections[0].content == "Looks healthy."


class TestStructuredReports:
    def test_numbered_report(self):
        report = classify(SCENARIO_C)
        assert isinstance(report, StructuredReport)
        assert report.sections == (
            Section("Disease Name", "Bacterial Leaf Blight"),
            Section("Severity", "Moderate"),
            Section("Symptoms", "Yellowing leaves with water-soaked lesions"),
            Section("Recommended treatment", "Apply copper-based bactericide"),
        )

    def test_leading_line_becomes_overview(self):
        report = classify("Here is the analysis:\n1. Disease Name: Blast\n2. Severity: severe")
        assert report.sections == (
            Section("Overview", "Here is the analysis:"),
            Section("Disease Name", "Blast"),
            Section("Severity", "severe"),
        )

    def test_continuation_line_joins_section(self):
        report = classify(
            "1. Disease Name: Blast\nAdditional details about blast disease\n2. Severity: severe"
        )
        assert report.sections[0].content == "Blast\nAdditional details about blast disease"
        assert report.sections[1] == Section("Severity", "severe")

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
    def test_empty_input_gives_no_sections(self, text):
        report = classify(text)
        assert report == StructuredReport(sections=())

    def test_classification_is_deterministic(self):
        assert classify(SCENARIO_C) == classify(SCENARIO_C)
        assert classify(SCENARIO_C).to_dict() == classify(SCENARIO_C).to_dict()


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Error analyzing image: x",
        "healthy",
        "random words",
        "**bold** :: colons : everywhere",
        "1.\n2.\n3. ",
        "\r\n1. Disease Name\r\nSeverity",
    ],
)
def test_classification_is_total(text):
    report = classify(text)
    assert isinstance(report, (ErrorReport, HealthyReport, StructuredReport))
    assert report.kind in {"error", "healthy", "structured"}
