import pytest

from edaitorial.features.analysis.schemas.analysis import AnalysisResult, AnalysisSource, ScoreClass
from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import (
    CATEGORIES,
    Impact,
    IssueRecord,
    Severity,
)
from edaitorial.features.analysis.utils.fingerprint import content_fingerprint


class TestIssueRecord:
    """Coercion of loosely typed backend issues into IssueRecord"""

    def test_from_raw_full_object(self):
        issue = IssueRecord.from_raw({
            "description": "Missing meta description",
            "type": "SEO",
            "severity": "Critical",
            "impact": "High",
        })

        assert issue.description == "Missing meta description"
        assert issue.type == "SEO"
        assert issue.severity == Severity.critical
        assert issue.impact == Impact.high

    def test_from_raw_empty_object_uses_defaults(self):
        issue = IssueRecord.from_raw({})

        assert issue.description == "Unknown issue"
        assert issue.type == "Content"
        assert issue.severity == Severity.low
        assert issue.impact == Impact.low

    @pytest.mark.parametrize("severity", ["urgent", "critical", "HIGH", "", 3, None])
    def test_unrecognized_severity_becomes_low(self, severity):
        issue = IssueRecord.from_raw({"type": "SEO", "severity": severity})
        assert issue.severity == Severity.low

    def test_unrecognized_impact_becomes_low(self):
        issue = IssueRecord.from_raw({"impact": "Enormous"})
        assert issue.impact == Impact.low

    def test_non_string_fields_are_stringified(self):
        issue = IssueRecord.from_raw({"description": 42, "type": 7})

        assert issue.description == "42"
        assert issue.type == "7"

    def test_extra_keys_are_ignored(self):
        issue = IssueRecord.from_raw({"description": "x", "line": 12, "confidence": 0.9})
        assert issue.description == "x"

    def test_record_is_immutable(self):
        issue = IssueRecord(description="x", type="SEO", severity=Severity.high)
        with pytest.raises(Exception):
            issue.severity = Severity.low


class TestContentItem:
    def test_body_text_strips_markup(self):
        item = ContentItem(title="t", body="<p>Hello <strong>world</strong></p>")

        assert item.body_text == "Hello world"
        assert item.word_count == 2

    def test_block_tags_separate_words(self):
        item = ContentItem(body="<h2>Intro</h2><p>Body text</p><ul><li>one</li><li>two</li></ul>")

        assert item.body_text == "Intro Body text one two"
        assert item.word_count == 5

    def test_numbers_are_not_words(self):
        item = ContentItem(body="Released 2024 with 3 new features")
        assert item.word_count == 4

    def test_available_nodes_coerced_to_strings(self):
        item = ContentItem(available_nodes=[1, "/node/2", None])
        assert item.available_nodes == ["1", "/node/2"]

    def test_available_nodes_none_is_empty(self):
        assert ContentItem(available_nodes=None).available_nodes == []

    def test_available_nodes_sample_is_limited(self):
        item = ContentItem(available_nodes=["/node/1", "/node/2", "/node/3"])

        assert item.available_nodes_sample(2) == "/node/1, /node/2"
        assert item.available_nodes_sample(None) == "/node/1, /node/2, /node/3"
        assert item.available_nodes_sample(0) == ""


class TestAnalysisResult:
    def test_failed_result_is_zero_everywhere(self):
        result = AnalysisResult.failed("abc")

        assert result.overall_score == 0
        assert result.score_class == ScoreClass.critical
        assert result.category_scores == {category: 0 for category in CATEGORIES}
        assert result.issues == []
        assert result.suggestions == []
        assert result.source == AnalysisSource.failed
        assert result.fingerprint == "abc"

    def test_grouped_issues_by_type(self):
        result = AnalysisResult(
            overall_score=80,
            score_class=ScoreClass.good,
            category_scores={},
            issues=[
                IssueRecord(type="SEO", description="a"),
                IssueRecord(type="Typos", description="b"),
                IssueRecord(type="SEO", description="c"),
                IssueRecord(type="", description="d"),
            ],
            source=AnalysisSource.batch,
        )

        grouped = result.grouped_issues
        assert list(grouped) == ["SEO", "Typos", "Other"]
        assert [issue.description for issue in grouped["SEO"]] == ["a", "c"]

    def test_grouped_issues_are_serialized(self):
        result = AnalysisResult(
            overall_score=90,
            score_class=ScoreClass.excellent,
            category_scores={},
            issues=[IssueRecord(type="SEO", description="a"), IssueRecord(type="Links", description="b")],
            source=AnalysisSource.batch,
        )

        dumped = result.model_dump(mode="json")
        assert list(dumped["grouped_issues"]) == ["SEO", "Links"]
        assert dumped["grouped_issues"]["Links"][0]["description"] == "b"
        assert '"grouped_issues"' in result.model_dump_json()

        assert AnalysisResult.model_validate_json(result.model_dump_json()) == result

    def test_out_of_range_score_is_rejected(self):
        with pytest.raises(ValueError):
            AnalysisResult(
                overall_score=101,
                score_class=ScoreClass.excellent,
                category_scores={},
                source=AnalysisSource.batch,
            )


class TestFingerprint:
    def test_same_input_same_fingerprint(self):
        assert content_fingerprint("Title", "Body") == content_fingerprint("Title", "Body")

    def test_title_body_boundary_matters(self):
        assert content_fingerprint("ab", "c") != content_fingerprint("a", "bc")

    def test_none_treated_as_empty(self):
        assert content_fingerprint(None, None) == content_fingerprint("", "")

    def test_is_sha256_hex(self):
        fingerprint = content_fingerprint("Title", "Body")
        assert len(fingerprint) == 64
        int(fingerprint, 16)
