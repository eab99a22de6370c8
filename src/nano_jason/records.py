import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .classifier import ClassificationResult
from .rewriter import OptimizationLog


@dataclass(frozen=True)
class PipelineRun:
    """Everything one pipeline invocation produced; the mode record is built from this."""
    original: str
    text: str
    classification: ClassificationResult
    log: OptimizationLog
    document: Dict[str, Any]
    jason_text: str
    score: Optional[int] = None
    tips: List[str] = field(default_factory=list)


class RecordMixin:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


@dataclass(frozen=True)
class JasonFormat(RecordMixin):
    jason_text: str
    style: str
    mood: str
    characters: List[str]
    items: List[str]
    setting: Optional[str] = None
    action: Optional[str] = None
    color_palette: List[str] = field(default_factory=list)
    composition: Optional[str] = None
    lighting: Optional[str] = None
    quality: str = "high"


@dataclass(frozen=True)
class NanoPromptResult(RecordMixin):
    original_prompt: str
    nano_prompt: str
    jason_format: str
    optimizations_applied: List[str]
    accuracy_score: int
    performance_tips: List[str]


@dataclass(frozen=True)
class NanoCoderResult(RecordMixin):
    original_prompt: str
    nano_coder_prompt: str
    jason_format: str
    technical_specifications: List[str]
    accuracy_score: int
    performance_tips: List[str]
    code_context: List[str]


def build_jason_format(run: PipelineRun) -> JasonFormat:
    facets = run.classification
    return JasonFormat(
        jason_text=run.jason_text,
        style=facets.facet("style"),
        mood=facets.facet("mood"),
        characters=facets.collection("characters"),
        items=facets.collection("items"),
        setting=facets.facet("setting"),
        action=facets.facet("action"),
        color_palette=facets.collection("color_palette"),
        composition=facets.facet("composition"),
        lighting=facets.facet("lighting"),
    )


def build_nano_prompt_result(run: PipelineRun) -> NanoPromptResult:
    return NanoPromptResult(
        original_prompt=run.original,
        nano_prompt=run.text,
        jason_format=run.jason_text,
        optimizations_applied=run.log.descriptions(),
        accuracy_score=run.score,
        performance_tips=list(run.tips),
    )


def build_nano_coder_result(run: PipelineRun) -> NanoCoderResult:
    return NanoCoderResult(
        original_prompt=run.original,
        nano_coder_prompt=run.text,
        jason_format=run.jason_text,
        technical_specifications=run.log.descriptions(),
        accuracy_score=run.score,
        performance_tips=list(run.tips),
        code_context=run.classification.collection("code_context"),
    )


def validate_jason_format(record: JasonFormat):
    """
    Advisory check of a Jason format record.

    Returns (is_valid, errors). A missing character is reported like the
    other problems but never raises; callers decide what to do with it.
    """
    errors = []

    if not record.jason_text or record.jason_text.strip() == "":
        errors.append("Jason text is required")

    if not record.style:
        errors.append("Style is required")

    if not record.mood:
        errors.append("Mood is required")

    if not record.characters:
        errors.append("At least one character is recommended")

    return len(errors) == 0, errors
