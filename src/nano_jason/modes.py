"""
Mode configurations.

A mode is the whole parameterization of the shared pipeline: keyword tables,
rewrite steps, score bounds, document tags, tips and quick templates.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from . import tables
from .exceptions import ConfigurationError
from .formatter import TipTemplates
from .records import (
    PipelineRun, build_jason_format, build_nano_coder_result, build_nano_prompt_result
)
from .rewriter import DomainStep, InjectStep, StyleStep, SubstitutionStep, TieredStep
from .tables import KeywordTable


@dataclass(frozen=True)
class FacetRef:
    """Placeholder in an optimization block, resolved from the classification."""
    name: str
    default: Optional[str] = None
    collection: bool = False


@dataclass(frozen=True)
class ModeConfig:
    name: str
    title: str
    version: str
    doc_type: str
    creator: str
    record_builder: Callable[[PipelineRun], Any]
    single_tables: Tuple[KeywordTable, ...] = ()
    multi_tables: Tuple[KeywordTable, ...] = ()
    context_tables: Tuple[KeywordTable, ...] = ()
    context_limit: int = 5
    substitution: Optional[SubstitutionStep] = None
    steps: Tuple[Any, ...] = ()
    lowercase: bool = True
    score_floor: Optional[int] = None
    score_ceiling: Optional[int] = None
    score_weights: Dict[str, int] = field(default_factory=dict)
    score_default_weight: int = 0
    score_bonus: int = 0
    optimization: Optional[Dict[str, Any]] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    tips: TipTemplates = field(default_factory=TipTemplates)
    templates: Dict[str, str] = field(default_factory=dict)
    artifact_prefix: str = "jason-format"

    @property
    def scored(self) -> bool:
        return self.score_floor is not None and self.score_ceiling is not None


GENERAL = ModeConfig(
    name="general",
    title="Jason Translator",
    version="1.0",
    doc_type="image_generation",
    creator="NanoJason",
    record_builder=build_jason_format,
    single_tables=(
        tables.STYLE_TABLE, tables.MOOD_TABLE, tables.SETTING_TABLE, tables.ACTION_TABLE,
        tables.COMPOSITION_TABLE, tables.LIGHTING_TABLE,
    ),
    multi_tables=(tables.CHARACTER_TABLE, tables.ITEM_TABLE, tables.COLOR_TABLE),
    lowercase=False,
    templates=tables.GENERAL_TEMPLATES,
    artifact_prefix="jason-format",
)

PROMPT = ModeConfig(
    name="prompt",
    title="NanoPrompt",
    version="2.0",
    doc_type="optimized_image_generation",
    creator="NanoPrompt",
    record_builder=build_nano_prompt_result,
    single_tables=(tables.PROMPT_STYLE_TABLE,),
    substitution=SubstitutionStep(tables.PATTERN_MAPPINGS),
    steps=(
        StyleStep(tables.PROMPT_STYLE_POOLS),
        InjectStep("quality", "Quality enhancement", tables.QUALITY_POOL, ("quality",), skip_if_present=True),
        InjectStep("composition", "Composition optimization", tables.COMPOSITION_POOL, ("composition", "framing")),
        InjectStep("lighting", "Lighting enhancement", tables.LIGHTING_POOL, ("lighting", "light")),
        InjectStep("color", "Color optimization", tables.COLOR_POOL, ("color", "saturation")),
        InjectStep("detail", "Detail enhancement", tables.DETAIL_POOL, ("detail", "texture")),
        InjectStep("error_prevention", "Error prevention", tables.ERROR_PREVENTION_POOL, ("no", "without")),
    ),
    score_floor=60,
    score_ceiling=95,
    score_weights={
        "pattern": 5,
        "style": 8,
        "quality": 10,
        "composition": 7,
        "lighting": 6,
        "color": 5,
        "detail": 8,
        "error_prevention": 6,
    },
    optimization={
        "style": FacetRef("style", "realistic"),
        "quality": "maximum",
        "accuracy": "enhanced",
        "error_reduction": "active",
    },
    metadata={"optimization_level": "deep_reverse_engineered"},
    tips=TipTemplates(
        facet="style",
        by_value={
            "realistic": (
                "Use specific camera settings for photorealistic results",
                "Include lighting direction information",
            ),
            "anime": (
                "Specify art style (e.g., Studio Ghibli, Makoto Shinkai)",
                "Include character design elements",
            ),
            "fantasy": (
                "Add magical element descriptions",
                "Specify atmosphere and mood details",
            ),
        },
        by_category=(
            ("quality", "High quality descriptors increase rendering time but improve results"),
            ("error_prevention", "Error prevention keywords reduce common AI generation issues"),
            ("composition", "Composition keywords help with framing and balance"),
        ),
    ),
    templates=tables.PROMPT_TEMPLATES,
    artifact_prefix="nano-prompt",
)

TECHNICAL = ModeConfig(
    name="technical",
    title="NanoCoder",
    version="3.0",
    doc_type="technical_optimization",
    creator="NanoCoder",
    record_builder=build_nano_coder_result,
    single_tables=(tables.DOMAIN_TABLE,),
    context_tables=(tables.LANGUAGE_TABLE, tables.FRAMEWORK_TABLE),
    context_limit=5,
    steps=(
        DomainStep(tables.DOMAIN_ENHANCEMENTS),
        InjectStep("pattern", "Programming pattern", tables.PROGRAMMING_PATTERN_POOL, verb="Applied", skip_if_present=True),
        TieredStep(tables.TECHNICAL_OPTIMIZATION_POOLS),
    ),
    score_floor=70,
    score_ceiling=98,
    score_default_weight=5,
    # Domain recognition bonus, applied unconditionally
    score_bonus=10,
    optimization={
        "domain": FacetRef("domain", "general"),
        "technical_level": "advanced",
        "context": FacetRef("code_context", collection=True),
        "focus": "technical_excellence",
    },
    metadata={"optimization_level": "deep_reverse_engineered_technical"},
    tips=TipTemplates(
        facet="domain",
        by_value={
            "programming": (
                "Focus on clean, readable code with proper error handling",
                "Consider testing strategies from the beginning",
            ),
            "architecture": (
                "Plan for scalability and future requirements",
                "Consider security implications of architectural decisions",
            ),
            "webdev": (
                "Ensure cross-browser compatibility and responsive design",
                "Optimize for performance and user experience",
            ),
            "mobile": (
                "Consider platform-specific guidelines and user experience",
                "Optimize for mobile performance and battery usage",
            ),
            "dataai": (
                "Ensure data quality and proper validation",
                "Consider ethical implications and data privacy",
            ),
        },
        # Matched against every specification line, so domain enhancements count too
        by_text=(
            ("quality", "Code quality improvements reduce maintenance costs"),
            ("performance", "Performance optimizations should be measured and tested"),
            ("security", "Security should be implemented throughout the development lifecycle"),
        ),
    ),
    templates=tables.TECHNICAL_TEMPLATES,
    artifact_prefix="nano-coder",
)

MODES: Dict[str, ModeConfig] = {mode.name: mode for mode in (GENERAL, PROMPT, TECHNICAL)}


def get_mode(name: str) -> ModeConfig:
    try:
        return MODES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown mode: {name} (expected one of {', '.join(MODES)})", config_key="mode"
        ) from None
