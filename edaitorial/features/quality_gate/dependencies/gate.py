from typing import Optional

from edaitorial.features.analysis.dependencies.analyzer import get_content_analyzer
from edaitorial.features.quality_gate.services.publish_gate import PublishGate
from edaitorial.platform.config import Settings, get_settings


def get_publish_gate(settings: Optional[Settings] = None) -> PublishGate:
    settings = settings or get_settings()
    return PublishGate(settings, get_content_analyzer(settings))
