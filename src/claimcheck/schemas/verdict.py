"""Pydantic schema for the judge's verdict."""

from enum import Enum
from pydantic import BaseModel


class VerdictCategory(str, Enum):
    SUPPORTED = "Supported"
    CONTRADICTED = "Contradicted"
    PARTIALLY_SUPPORTED = "Partially Supported"
    INSUFFICIENT_EVIDENCE = "Insufficient Evidence"


class Verdict(BaseModel):
    category: VerdictCategory
    explanation: str
    model: str = ""
    source_count: int = 0
