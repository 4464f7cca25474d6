from edaitorial.features.quality_gate.services.publish_gate import (
    PublishGate,
    get_score_message,
    summarize_issues,
)

__all__ = [
    "PublishGate",
    "get_score_message",
    "summarize_issues",
]
