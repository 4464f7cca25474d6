from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from edaitorial.features.analysis.utils.text import strip_tags, count_words


class ContentItem(BaseModel):
    """Raw content handed over by the content source."""
    title: str = ""
    body: str = ""
    content_type: str = "article"
    url: str = ""
    # Other known content identifiers, most recent first
    available_nodes: List[str] = Field(default_factory=list)

    @field_validator("available_nodes", mode="before")
    @classmethod
    def _coerce_nodes(cls, value: Any) -> List[str]:
        # Node ids often arrive as ints
        if value is None:
            return []
        return [str(node) for node in value if node is not None]

    @property
    def body_text(self) -> str:
        return strip_tags(self.body)

    @property
    def word_count(self) -> int:
        return count_words(self.body_text)

    def available_nodes_sample(self, limit: Optional[int]) -> str:
        nodes = self.available_nodes if limit is None else self.available_nodes[:max(limit, 0)]
        return ", ".join(nodes)
