from html.parser import HTMLParser
from typing import Dict, List, Optional, Set, Tuple

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
FORM_CONTROL_TAGS = ("input", "textarea", "select")
# Input types that carry no user-entered value and need no label
UNLABELLED_INPUT_TYPES = ("hidden", "submit", "button", "reset", "image")


class MarkupParser(HTMLParser):
    """
    Collects the parts of a content body the offline checkers look at:
    images, links with their text, form controls and labels, headings
    and lists.

    Attribute names are lower-cased; an attribute without a value is
    recorded as "".
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)

        self.images: List[Dict[str, str]] = []
        self.links: List[Dict[str, str]] = []  # [{"href": ..., "text": ...}, ...]
        self.heading_levels: List[int] = []  # e.g. [2, 3, 3, 2]
        self.list_count = 0

        # (attrs, inside a <label>)
        self.controls: List[Tuple[Dict[str, str], bool]] = []
        self.label_targets: Set[str] = set()
        self._label_depth = 0

        self._current_link: Optional[Dict[str, str]] = None
        self._link_text: List[str] = []

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        tag = tag.lower()
        attrs_dict = {name.lower(): (value or "") for name, value in attrs}

        if tag == "img":
            self.images.append(attrs_dict)

        elif tag == "a":
            # Anchors without href are not links
            if "href" in attrs_dict:
                self._finish_link()
                self._current_link = {"href": attrs_dict["href"], "text": ""}
                self._link_text = []

        elif tag in FORM_CONTROL_TAGS:
            input_type = attrs_dict.get("type", "text").strip().lower()
            if tag == "input" and input_type in UNLABELLED_INPUT_TYPES:
                return
            self.controls.append((attrs_dict, self._label_depth > 0))

        elif tag == "label":
            self._label_depth += 1
            if attrs_dict.get("for"):
                self.label_targets.add(attrs_dict["for"])

        elif tag in HEADING_TAGS:
            self.heading_levels.append(int(tag[1]))

        elif tag in ("ul", "ol"):
            self.list_count += 1

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        if tag == "a":
            self._finish_link()
        elif tag == "label" and self._label_depth:
            self._label_depth -= 1

    def handle_data(self, data: str) -> None:
        if self._current_link is not None:
            self._link_text.append(data)

    def close(self) -> None:
        super().close()
        self._finish_link()

    def _finish_link(self) -> None:
        if self._current_link is None:
            return
        self._current_link["text"] = " ".join("".join(self._link_text).split())
        self.links.append(self._current_link)
        self._current_link = None
        self._link_text = []

    @property
    def hrefs(self) -> List[str]:
        return [link["href"] for link in self.links]

    def unlabelled_controls(self) -> int:
        count = 0
        for attrs, inside_label in self.controls:
            if inside_label or attrs.get("aria-label", "").strip() or attrs.get("aria-labelledby"):
                continue
            if attrs.get("id") and attrs["id"] in self.label_targets:
                continue
            count += 1
        return count


def parse_markup(html: Optional[str]) -> MarkupParser:
    parser = MarkupParser()
    parser.feed(html or "")
    parser.close()
    return parser
