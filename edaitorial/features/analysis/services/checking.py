import logging

from edaitorial.features.analysis.schemas.outcome import CheckOutcome
from edaitorial.features.analysis.utils.response_parser import parse_issue_payload, validate_issues
from edaitorial.platform.exceptions import BackendUnavailableError, MalformedResponseError
from edaitorial.platform.llm import ChatBackend

logger = logging.getLogger(__name__)


def request_issues(backend: ChatBackend, prompt: str, source: str) -> CheckOutcome:
    """
    Send one prompt to the checking backend and turn the answer into an
    outcome. Unreachable/timeout and malformed answers are soft failures.
    """
    try:
        response = backend.complete(prompt)
    except BackendUnavailableError as e:
        logger.error(f"[{source}] Backend unavailable: {str(e)}")
        return CheckOutcome.unavailable(str(e), source=source)

    try:
        raw_issues = parse_issue_payload(response)
    except MalformedResponseError as e:
        logger.warning(f"[{source}] Failed to parse backend response: {str(e)}. Response: {e.sample}")
        return CheckOutcome.malformed(str(e), source=source)

    issues = validate_issues(raw_issues)
    logger.info(f"[{source}] Backend returned {len(issues)} issue(s)")
    return CheckOutcome.ok(issues, source=source)
