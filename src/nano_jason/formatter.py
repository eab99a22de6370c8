import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from .classifier import ClassificationResult
from .rewriter import OptimizationLog

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a trailing Z for UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Formatter:
    """Builds the jason document and its serialized text."""

    def __init__(self, version: str, doc_type: str, creator: str,
                 metadata: Optional[Dict[str, str]] = None,
                 clock: Optional[Clock] = None,
                 indent: int = 2):
        self.version = version
        self.doc_type = doc_type
        self.creator = creator
        self.metadata = metadata or {}
        self.clock = clock or utc_now
        self.indent = indent

    def build(self, prompt: str, optimization: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "prompt": prompt,
            "version": self.version,
            "type": self.doc_type,
        }
        if optimization is not None:
            document["optimization"] = optimization
        metadata = {"created_by": self.creator}
        metadata.update(self.metadata)
        metadata["timestamp"] = iso_timestamp(self.clock())
        document["metadata"] = metadata
        return document

    def serialize(self, document: Dict[str, Any]) -> str:
        return json.dumps(document, indent=self.indent, ensure_ascii=False)

    @staticmethod
    def parse(text: str) -> Dict[str, Any]:
        return json.loads(text)

    def format(self, prompt: str, optimization: Optional[Dict[str, Any]] = None) -> Tuple[Dict[str, Any], str]:
        document = self.build(prompt, optimization)
        return document, self.serialize(document)


@dataclass(frozen=True)
class TipTemplates:
    # Facet whose value selects a block of tips (e.g. "style", "domain")
    facet: Optional[str] = None
    by_value: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    # (log category, tip) pairs, emitted in order when the category was logged
    by_category: Tuple[Tuple[str, str], ...] = ()
    # (substring, tip) pairs, emitted in order when any log description contains the substring
    by_text: Tuple[Tuple[str, str], ...] = ()


class TipGenerator:
    def __init__(self, templates: TipTemplates):
        self.templates = templates

    def generate(self, classification: ClassificationResult, log: OptimizationLog) -> List[str]:
        tips: List[str] = []
        if self.templates.facet:
            value = classification.facet(self.templates.facet)
            tips.extend(self.templates.by_value.get(value, ()))
        for category, tip in self.templates.by_category:
            if log.has(category):
                tips.append(tip)
        descriptions = log.descriptions()
        for needle, tip in self.templates.by_text:
            if any(needle in description for description in descriptions):
                tips.append(tip)
        return tips
