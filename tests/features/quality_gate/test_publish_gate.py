from unittest.mock import MagicMock

import pytest

from edaitorial.features.analysis.schemas.analysis import AnalysisResult, AnalysisSource
from edaitorial.features.analysis.schemas.issue import IssueRecord, Severity
from edaitorial.features.analysis.services.analyzer import ContentAnalyzer
from edaitorial.features.analysis.services.scoring import get_score_class
from edaitorial.features.quality_gate.dependencies.gate import get_publish_gate
from edaitorial.features.quality_gate.services import PublishGate, get_score_message, summarize_issues
from edaitorial.platform.exceptions import PublishBlockedError


def analysis(score, issues=None):
    return AnalysisResult(
        overall_score=score,
        score_class=get_score_class(score),
        category_scores={"seo": score, "accessibility": score, "typos": score, "links": score, "content": score},
        issues=issues or [],
        source=AnalysisSource.batch,
    )


@pytest.fixture
def analyzer():
    return MagicMock(spec=ContentAnalyzer)


class TestPublishGate:
    """Blocking the publish transition on low scores"""

    def test_passing_content_is_allowed(self, settings, analyzer):
        analyzer.analyze.return_value = analysis(92)

        decision = PublishGate(settings, analyzer).evaluate("Title", "Body")

        assert decision.allowed
        assert decision.checked
        assert decision.passed
        assert decision.score == 92
        assert decision.message == "Excellent! Your content meets high quality standards."

    def test_score_equal_to_threshold_passes(self, make_settings, analyzer):
        analyzer.analyze.return_value = analysis(80)
        decision = PublishGate(make_settings(MIN_SCORE=80), analyzer).evaluate("Title", "Body")

        assert decision.allowed
        assert decision.passed

    def test_below_threshold_is_blocked(self, settings, analyzer):
        analyzer.analyze.return_value = analysis(62, [
            IssueRecord(description="low", type="Content", severity=Severity.low),
            IssueRecord(description="crit", type="SEO", severity=Severity.critical),
        ])

        decision = PublishGate(settings, analyzer).evaluate("Title", "Body")

        assert not decision.allowed
        assert not decision.passed
        assert decision.min_score == 80
        assert decision.message == "Fair content. Several improvements recommended."
        assert [issue.description for issue in decision.issues] == ["crit", "low"]

    def test_below_threshold_allowed_when_blocking_off(self, make_settings, analyzer):
        analyzer.analyze.return_value = analysis(40)
        settings = make_settings(BLOCK_PUBLISHING_BELOW_THRESHOLD=False)

        decision = PublishGate(settings, analyzer).evaluate("Title", "Body")

        assert decision.allowed
        assert not decision.passed

    def test_disabled_gate_skips_analysis(self, make_settings, analyzer):
        decision = PublishGate(make_settings(ENABLE_QUALITY_GATE=False), analyzer).evaluate("Title", "Body")

        analyzer.analyze.assert_not_called()
        assert decision.allowed
        assert not decision.checked
        assert decision.score is None

    def test_uncovered_content_type_skips_analysis(self, settings, analyzer):
        decision = PublishGate(settings, analyzer).evaluate("Title", "Body", content_type="landing")

        analyzer.analyze.assert_not_called()
        assert decision.message == "Quality gate does not apply to 'landing' content."

    def test_empty_content_type_list_covers_everything(self, make_settings, analyzer):
        analyzer.analyze.return_value = analysis(100)
        gate = PublishGate(make_settings(ENABLED_CONTENT_TYPES=[]), analyzer)

        assert gate.evaluate("Title", "Body", content_type="landing").checked

    def test_arguments_forwarded_to_analyzer(self, settings, analyzer):
        analyzer.analyze.return_value = analysis(100)

        PublishGate(settings, analyzer).evaluate(
            "Title", "Body", "page", available_nodes=["/node/1"], url="/about")

        analyzer.analyze.assert_called_once_with(
            "Title", "Body", "page", available_nodes=["/node/1"], url="/about")

    def test_enforce_raises_when_blocked(self, settings, analyzer):
        analyzer.analyze.return_value = analysis(30, [IssueRecord(description="crit", severity=Severity.critical)])

        with pytest.raises(PublishBlockedError) as exc_info:
            PublishGate(settings, analyzer).enforce("Title", "Body")

        assert exc_info.value.score == 30
        assert exc_info.value.min_score == 80
        assert exc_info.value.issues == ["crit"]
        assert str(exc_info.value) == "Content score 30/100 is below the minimum of 80 required to publish"

    def test_enforce_returns_decision_when_allowed(self, settings, analyzer):
        analyzer.analyze.return_value = analysis(95)
        assert PublishGate(settings, analyzer).enforce("Title", "Body").allowed

    def test_failed_analysis_blocks(self, settings, analyzer):
        analyzer.analyze.return_value = AnalysisResult.failed()

        decision = PublishGate(settings, analyzer).evaluate("Title", "Body")

        assert not decision.allowed
        assert decision.score == 0


class TestGateHelpers:
    @pytest.mark.parametrize("score,prefix", [
        (90, "Excellent"),
        (89, "Good"),
        (75, "Good"),
        (74, "Fair"),
        (50, "Fair"),
        (49, "Needs work"),
        (25, "Needs work"),
        (24, "Critical"),
    ])
    def test_score_message(self, score, prefix):
        assert get_score_message(score).startswith(prefix)

    def test_summarize_issues_limit_and_order(self):
        issues = [IssueRecord(description=str(i), severity=Severity.low) for i in range(6)]
        issues.append(IssueRecord(description="high", severity=Severity.high))

        summary = summarize_issues(issues, limit=3)

        assert [item.description for item in summary] == ["high", "0", "1"]
        assert summary[0].severity == "High"


def test_gate_wired_end_to_end_without_ai(make_settings):
    settings = make_settings(USE_AI=False, CACHE_ANALYSIS_RESULTS=False, MIN_SCORE=98)

    decision = get_publish_gate(settings).evaluate("Short", "A handful of words")

    # Medium title + Low word count issues: seo 85, overall 97
    assert decision.score == 97
    assert not decision.allowed
