import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import List, Optional, Sequence, Tuple

from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.checkers.registry import build_checkers
from edaitorial.features.analysis.schemas.analysis import AnalysisResult, AnalysisSource
from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import IssueRecord
from edaitorial.features.analysis.schemas.outcome import CheckOutcome, OutcomeStatus
from edaitorial.features.analysis.services.checking import request_issues
from edaitorial.features.analysis.services.fallback import rule_based_issues
from edaitorial.features.analysis.services.scoring import (
    calculate_category_scores,
    calculate_overall_score,
    get_score_class,
)
from edaitorial.features.analysis.services.suggestions import generate_suggestions
from edaitorial.features.analysis.utils.fingerprint import content_fingerprint
from edaitorial.features.analysis.utils.prompt import render_prompt
from edaitorial.platform.cache import AnalysisCache
from edaitorial.platform.config import Settings
from edaitorial.platform.exceptions import CacheError
from edaitorial.platform.llm import ChatBackend

logger = logging.getLogger(__name__)


class ContentAnalyzer:
    """
    Runs the full analysis pipeline for one content item.

    Fallback chain:
    1. Batch: one backend call covering every check
    2. Individual: each enabled checker in weight order
    3. Rule-based: title length and word count, no network

    Always returns a well-formed AnalysisResult; unexpected errors become
    the fail-safe zero-score result.
    """

    def __init__(
        self,
        settings: Settings,
        backend: Optional[ChatBackend] = None,
        cache: Optional[AnalysisCache] = None,
        checkers: Optional[Sequence[BaseChecker]] = None,
    ):
        self.settings = settings
        self.backend = backend
        self.cache = cache
        if checkers is None:
            checkers = build_checkers(settings, backend)
        self.checkers = sorted(checkers, key=lambda checker: (checker.weight, checker.id))

    def analyze(
        self,
        title: str,
        body: str,
        content_type: str = "article",
        available_nodes: Optional[List[str]] = None,
        url: str = "",
    ) -> AnalysisResult:
        """
        Analyze content and return score, category scores, issues and
        suggestions.

        Identical title/body within the cache TTL returns the stored result
        unchanged, since the backend is not deterministic.
        """
        fingerprint = content_fingerprint(title, body)

        cached = self._cache_lookup(fingerprint)
        if cached is not None:
            logger.info(f"[{fingerprint[:12]}] Returning cached analysis: score={cached.overall_score}")
            return cached

        try:
            content = ContentItem(
                title=title or "",
                body=body or "",
                content_type=content_type or "article",
                url=url or "",
                available_nodes=list(available_nodes or []),
            )
            result = self._run_with_deadline(content, fingerprint)
        except Exception as e:
            logger.error(f"[{fingerprint[:12]}] Analysis failed: {str(e)}", exc_info=True)
            return AnalysisResult.failed(fingerprint)

        if result.source != AnalysisSource.failed:
            self._cache_store(fingerprint, result)

        return result

    def _run_with_deadline(self, content: ContentItem, fingerprint: str) -> AnalysisResult:
        deadline = self.settings.ANALYSIS_DEADLINE
        if not deadline:
            return self._run_pipeline(content, fingerprint)

        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self._run_pipeline, content, fingerprint)
            return future.result(timeout=deadline)
        except FutureTimeoutError:
            logger.warning(f"[{fingerprint[:12]}] Analysis exceeded deadline of {deadline}s")
            return AnalysisResult.failed(fingerprint)
        finally:
            # The worker thread cannot be interrupted; let it finish on its own
            executor.shutdown(wait=False)

    def _run_pipeline(self, content: ContentItem, fingerprint: str) -> AnalysisResult:
        issues, source = self._collect_issues(content)

        category_scores = calculate_category_scores(issues)
        score = calculate_overall_score(category_scores)

        result = AnalysisResult(
            overall_score=score,
            score_class=get_score_class(score),
            category_scores=category_scores,
            issues=issues,
            suggestions=generate_suggestions(issues, score),
            source=source,
            fingerprint=fingerprint,
        )

        logger.info(
            f"[{fingerprint[:12]}] Analysis result: score={score}, source={source.value}, "
            f"categories={category_scores}, issues={len(issues)}")
        return result

    def _collect_issues(self, content: ContentItem) -> Tuple[List[IssueRecord], AnalysisSource]:
        if not self.settings.USE_AI or self.backend is None:
            return self._rule_based_analyze(content), AnalysisSource.rule_based

        batch = self._batch_analyze(content)
        if batch.status == OutcomeStatus.ok:
            return batch.issues, AnalysisSource.batch

        issues, checkers_responded = self._individual_analyze(content)
        if batch.responded or checkers_responded:
            return issues, AnalysisSource.individual

        logger.warning("No AI analysis path produced a response, using rule-based checks")
        return self._rule_based_analyze(content), AnalysisSource.rule_based

    def _batch_analyze(self, content: ContentItem) -> CheckOutcome:
        """Single backend call for all checks."""
        template = self.settings.BATCH_ANALYSIS_PROMPT
        if not template or not template.strip():
            logger.info("Batch prompt not configured, using individual checkers")
            return CheckOutcome.skipped("Batch prompt not configured", source="batch")

        prompt = render_prompt(template, {
            "title": content.title,
            "body": content.body_text,
            "url": content.url,
            "word_count": content.word_count,
            "available_nodes": content.available_nodes_sample(self.settings.AVAILABLE_NODES_LIMIT),
        })
        return request_issues(self.backend, prompt, source="batch")

    def _individual_analyze(self, content: ContentItem) -> Tuple[List[IssueRecord], bool]:
        """Run each enabled checker; one failing checker never aborts the others."""
        all_issues: List[IssueRecord] = []
        responded = False

        for checker in self.checkers:
            if not checker.is_enabled():
                continue
            try:
                outcome = checker.analyze(content)
            except Exception as e:
                logger.error(f"Error running checker {checker.id}: {str(e)}", exc_info=True)
                continue

            responded = responded or outcome.responded
            all_issues.extend(outcome.issues)

        return all_issues, responded

    def _rule_based_analyze(self, content: ContentItem) -> List[IssueRecord]:
        issues = rule_based_issues(content, self.settings)

        if self.settings.RULE_BASED_CHECKERS:
            for checker in self.checkers:
                if not checker.offline_in_fallback or not checker.is_enabled():
                    continue
                try:
                    issues.extend(checker.analyze_offline(content))
                except Exception as e:
                    logger.error(f"Error running offline checks for {checker.id}: {str(e)}")

        return issues

    def _cache_lookup(self, fingerprint: str) -> Optional[AnalysisResult]:
        if not self.settings.CACHE_ANALYSIS_RESULTS or self.cache is None:
            return None
        try:
            return self.cache.get(fingerprint)
        except CacheError as e:
            logger.warning(f"[{fingerprint[:12]}] Cache read failed, analyzing afresh: {str(e)}")
        except Exception as e:
            logger.error(f"[{fingerprint[:12]}] Unexpected cache read error, analyzing afresh: {str(e)}", exc_info=True)
        return None

    def _cache_store(self, fingerprint: str, result: AnalysisResult) -> None:
        if not self.settings.CACHE_ANALYSIS_RESULTS or self.cache is None:
            return
        try:
            self.cache.set(fingerprint, result, self.settings.CACHE_TTL)
        except CacheError as e:
            logger.warning(f"[{fingerprint[:12]}] Cache write failed: {str(e)}")
        except Exception as e:
            logger.error(f"[{fingerprint[:12]}] Unexpected cache write error: {str(e)}", exc_info=True)
