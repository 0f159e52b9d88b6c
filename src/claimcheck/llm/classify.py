"""Maps free-text judge replies to a verdict category.

First match wins over VERDICT_PRECEDENCE. The reply's leading label is tried
before the full text so that e.g. "Supported. The source is not insufficient"
still classifies as Supported. The label is matched case-insensitively, the
body is not.
"""

import re
from typing import List, Tuple

from ..schemas.verdict import VerdictCategory

VERDICT_PRECEDENCE: List[Tuple[str, VerdictCategory]] = [
    ("Contradicted", VerdictCategory.CONTRADICTED),
    ("False", VerdictCategory.CONTRADICTED),
    ("Partially", VerdictCategory.PARTIALLY_SUPPORTED),
    ("Insufficient", VerdictCategory.INSUFFICIENT_EVIDENCE),
    ("Supported", VerdictCategory.SUPPORTED),
    ("True", VerdictCategory.SUPPORTED),
]

# Markdown emphasis, "Verdict:" prefixes and the like before the label
_LEAD_NOISE = re.compile(r"^[\s*_#>`\"']*(?:verdict\s*[:\-]\s*)?[\s*_`\"']*", re.IGNORECASE)


def leading_label(text: str) -> str:
    """The first line of the reply with decoration stripped, up to the first sentence break."""
    first_line = text.strip().splitlines()[0] if text.strip() else ""
    first_line = _LEAD_NOISE.sub("", first_line)
    label = re.split(r"[.:;\-–—(]", first_line, maxsplit=1)[0]
    return label.strip(" *_`\"'")


def _first_match(text: str, ignore_case: bool = False) -> VerdictCategory | None:
    if ignore_case:
        text = text.lower()
    for needle, category in VERDICT_PRECEDENCE:
        if (needle.lower() if ignore_case else needle) in text:
            return category
    return None


def classify_verdict(text: str) -> VerdictCategory:
    category = _first_match(leading_label(text), ignore_case=True)
    if category is not None:
        return category
    category = _first_match(text)
    return category or VerdictCategory.SUPPORTED
