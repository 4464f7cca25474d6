import json
import logging
from typing import Any, Iterable, List, Mapping

from edaitorial.features.analysis.schemas.issue import IssueRecord
from edaitorial.features.analysis.utils.text import strip_code_fences, truncate
from edaitorial.platform.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)


def parse_issue_payload(response: str) -> List[Any]:
    """
    Extract the JSON array of issue-like objects from free backend text.

    Tolerates markdown code fences and prose around the array. Raises
    MalformedResponseError when no JSON array can be recovered.
    """
    if not response or not response.strip():
        raise MalformedResponseError("Empty response from backend")

    cleaned = strip_code_fences(response)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as json_err:
        # Try to recover the outermost [...] from text with leading/trailing prose
        start = cleaned.find("[")
        end = cleaned.rfind("]")
        if start == -1 or end <= start:
            raise MalformedResponseError(
                f"Invalid JSON: {json_err}", sample=truncate(response)) from json_err
        try:
            data = json.loads(cleaned[start:end + 1])
        except json.JSONDecodeError as inner_err:
            raise MalformedResponseError(
                f"Invalid JSON: {inner_err}", sample=truncate(response)) from inner_err

    if not isinstance(data, list):
        raise MalformedResponseError(
            f"Expected a JSON array, got {type(data).__name__}", sample=truncate(response))

    return data


def validate_issues(raw_issues: Iterable[Any]) -> List[IssueRecord]:
    """Coerce raw issue objects into IssueRecords, dropping non-objects."""
    validated = []
    for raw in raw_issues:
        if not isinstance(raw, Mapping):
            logger.debug(f"Discarding non-object issue entry: {truncate(repr(raw), 80)}")
            continue
        validated.append(IssueRecord.from_raw(raw))
    return validated
