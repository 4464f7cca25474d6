import pytest

from edaitorial.features.analysis.schemas.analysis import ScoreClass, SuggestionPriority
from edaitorial.features.analysis.schemas.issue import Category, IssueRecord, Severity
from edaitorial.features.analysis.services.classifier import classify_issue_type
from edaitorial.features.analysis.services.scoring import (
    calculate_category_scores,
    calculate_overall_score,
    get_score_class,
    round_half_up,
    severity_deduction,
)
from edaitorial.features.analysis.services.suggestions import generate_suggestions


class TestClassifier:
    @pytest.mark.parametrize("issue_type,expected", [
        ("SEO", Category.seo),
        ("Meta SEO tags", Category.seo),
        ("WCAG", Category.accessibility),
        ("WCAG contrast", Category.accessibility),
        ("unknown-xyz", Category.content),
        ("Accessibility", Category.accessibility),
        ("Typos", Category.typos),
        ("Spelling", Category.typos),
        ("Broken link", Category.links),
        ("Links", Category.links),
        ("Content", Category.content),
        ("Readability", Category.content),
        ("", Category.content),
        (None, Category.content),
    ])
    def test_classify(self, issue_type, expected):
        assert classify_issue_type(issue_type) == expected

    def test_seo_wins_over_links(self):
        assert classify_issue_type("SEO link structure") == Category.seo

    def test_accessibility_wins_over_typos(self):
        assert classify_issue_type("WCAG spelling of labels") == Category.accessibility

    def test_case_insensitive(self):
        assert classify_issue_type("wcag AA contrast") == Category.accessibility


class TestSeverityDeduction:
    @pytest.mark.parametrize("severity,points", [
        (Severity.critical, 25),
        (Severity.high, 15),
        (Severity.medium, 10),
        (Severity.low, 5),
        ("High", 15),
        ("urgent", 5),
        (None, 5),
    ])
    def test_deduction(self, severity, points):
        assert severity_deduction(severity) == points


class TestCategoryScores:
    def test_no_issues_all_categories_perfect(self):
        scores = calculate_category_scores([])
        assert scores == {"seo": 100, "accessibility": 100, "typos": 100, "links": 100, "content": 100}

    def test_single_critical_seo_issue(self):
        scores = calculate_category_scores([IssueRecord(type="SEO", severity=Severity.critical)])

        assert scores["seo"] == 75
        assert calculate_overall_score(scores) == 95

    def test_deductions_accumulate_per_category(self):
        scores = calculate_category_scores([
            IssueRecord(type="Typos", severity=Severity.high),
            IssueRecord(type="Spelling", severity=Severity.medium),
            IssueRecord(type="Broken link", severity=Severity.low),
        ])

        assert scores["typos"] == 75
        assert scores["links"] == 95
        assert scores["seo"] == 100

    def test_category_floor_is_zero(self):
        issues = [IssueRecord(type="SEO", severity=Severity.critical)] * 6
        assert calculate_category_scores(issues)["seo"] == 0

    def test_unknown_types_count_against_content(self):
        scores = calculate_category_scores([IssueRecord(type="Tone", severity=Severity.high)])
        assert scores["content"] == 85

    @pytest.mark.parametrize("issues", [
        [],
        [IssueRecord(type="SEO", severity=Severity.low)],
        [IssueRecord(type="WCAG", severity=Severity.critical)] * 3,
        [IssueRecord(type=t, severity=Severity.high) for t in ("SEO", "WCAG", "Typos", "Links", "Tone")],
        [IssueRecord(type="Links", severity=Severity.critical)] * 10,
    ])
    def test_overall_is_rounded_mean_and_in_range(self, issues):
        scores = calculate_category_scores(issues)
        overall = calculate_overall_score(scores)

        assert all(0 <= value <= 100 for value in scores.values())
        assert overall == round_half_up(sum(scores.values()) / len(scores))
        assert 0 <= overall <= 100


class TestOverallScore:
    def test_empty_map_scores_100(self):
        assert calculate_overall_score({}) == 100

    def test_half_rounds_up(self):
        # Built-in round() would give 92
        assert calculate_overall_score({"seo": 85, "content": 100}) == 93

    def test_round_half_up(self):
        assert round_half_up(97.5) == 98
        assert round_half_up(96.4) == 96
        assert round_half_up(0.5) == 1


class TestScoreClass:
    @pytest.mark.parametrize("score,expected", [
        (100, ScoreClass.excellent),
        (90, ScoreClass.excellent),
        (89, ScoreClass.good),
        (75, ScoreClass.good),
        (74, ScoreClass.fair),
        (50, ScoreClass.fair),
        (49, ScoreClass.poor),
        (25, ScoreClass.poor),
        (24, ScoreClass.critical),
        (0, ScoreClass.critical),
    ])
    def test_thresholds(self, score, expected):
        assert get_score_class(score) == expected


class TestSuggestions:
    def test_no_issues_only_banded_suggestion(self):
        suggestions = generate_suggestions([], 100)

        assert len(suggestions) == 1
        assert suggestions[0].priority == SuggestionPriority.low

    @pytest.mark.parametrize("score,priority", [
        (90, SuggestionPriority.low),
        (89, SuggestionPriority.medium),
        (75, SuggestionPriority.medium),
        (74, SuggestionPriority.high),
    ])
    def test_banded_priority(self, score, priority):
        assert generate_suggestions([], score)[0].priority == priority

    def test_one_suggestion_per_present_category(self):
        issues = [
            IssueRecord(type="Links"),
            IssueRecord(type="SEO"),
            IssueRecord(type="SEO title"),
        ]

        suggestions = generate_suggestions(issues, 80)

        assert len(suggestions) == 3
        assert "search engines" in suggestions[1].text
        assert suggestions[2].priority == SuggestionPriority.medium
