import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from .classifier import ClassificationResult, Classifier
from .exceptions import InvalidInputError, UnknownTemplateError
from .formatter import Clock, Formatter, TipGenerator
from .modes import FacetRef, ModeConfig
from .records import PipelineRun
from .rewriter import OptimizationLog, Picker, RandomPicker, Rewriter
from .scorer import Scorer

logger = logging.getLogger(__name__)


class Pipeline:
    """
    Classifier -> Rewriter -> Scorer -> Formatter, parameterized by a ModeConfig.

    Every call builds its own log, classification and document; the only thing
    shared between calls is the picker.
    """

    def __init__(self, config: ModeConfig, picker: Optional[Picker] = None, clock: Optional[Clock] = None,
                 indent: int = 2, show_progress: bool = False):
        self.config = config
        self.show_progress = show_progress
        self.classifier = Classifier(
            single_tables=config.single_tables,
            multi_tables=config.multi_tables,
            context_tables=config.context_tables,
            context_limit=config.context_limit,
        )
        self.rewriter = Rewriter(config.substitution, config.steps, picker or RandomPicker())
        self.scorer = None
        if config.scored:
            self.scorer = Scorer(
                floor=config.score_floor,
                ceiling=config.score_ceiling,
                weights=config.score_weights,
                default_weight=config.score_default_weight,
                bonus=config.score_bonus,
            )
        self.formatter = Formatter(
            version=config.version,
            doc_type=config.doc_type,
            creator=config.creator,
            metadata=config.metadata,
            clock=clock,
            indent=indent,
        )
        self.tips = TipGenerator(config.tips)

    def _resolve_optimization(self, classification: ClassificationResult) -> Optional[Dict[str, Any]]:
        if self.config.optimization is None:
            return None
        resolved = {}
        for key, value in self.config.optimization.items():
            if isinstance(value, FacetRef):
                if value.collection:
                    value = classification.collection(value.name)
                else:
                    value = classification.facet(value.name, value.default)
            resolved[key] = value
        return resolved

    def process(self, text: str) -> PipelineRun:
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError(details={"mode": self.config.name})

        working = text.lower() if self.config.lowercase else text
        log = OptimizationLog()

        # 1. Pattern substitution
        working = self.rewriter.substitute(working, log)

        # 2. Classification
        classification = self.classifier.classify(working)

        # 3. Injection steps
        working = self.rewriter.inject(working, classification, log)

        # 4. Code context is read from the rewritten text
        if self.config.context_tables:
            classification = classification.with_collection("code_context", self.classifier.extract_context(working))

        # 5. Score, document, tips
        score = self.scorer.score(log) if self.scorer else None
        document, jason_text = self.formatter.format(working, self._resolve_optimization(classification))
        tips = self.tips.generate(classification, log)

        logger.debug(f"[{self.config.name}] {len(log)} optimizations applied, score={score}")
        return PipelineRun(
            original=text,
            text=working,
            classification=classification,
            log=log,
            document=document,
            jason_text=jason_text,
            score=score,
            tips=tips,
        )

    def run(self, text: str):
        return self.config.record_builder(self.process(text))

    def run_batch(self, inputs: Sequence[str]) -> List[Any]:
        """
        Runs every input in order. Failed items are logged and left out of
        the result, so the output can be shorter than the input.
        """
        results = []
        items = tqdm(inputs, desc=self.config.title, colour='green') if self.show_progress else inputs
        for text in items:
            try:
                results.append(self.run(text))
            except Exception as e:
                logger.error(f"Failed to optimize prompt with {self.config.title}: {text!r}: {e}")
        return results

    async def run_async(self, text: str):
        return await asyncio.to_thread(self.run, text)

    async def run_batch_async(self, inputs: Sequence[str]) -> List[Any]:
        return await asyncio.to_thread(self.run_batch, inputs)

    def template(self, name: str) -> str:
        try:
            return self.config.templates[name]
        except KeyError:
            raise UnknownTemplateError(self.config.name, name, self.config.templates) from None
