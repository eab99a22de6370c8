import os
import time
from typing import Any, Dict, List, Optional, Sequence, Tuple
from loguru import logger

from .exceptions import InvalidInputError
from .formatter import Clock
from .modes import MODES, get_mode
from .records import JasonFormat, NanoCoderResult, NanoPromptResult, validate_jason_format
from .rewriter import Picker, RandomPicker
from .workflow import Pipeline


class NanoJasonSDK:
    """One pipeline per mode, sharing a picker and a clock."""

    def __init__(self,
                 seed: Optional[int] = None,
                 picker: Optional[Picker] = None,
                 clock: Optional[Clock] = None,
                 indent: int = 2,
                 show_progress: bool = False):
        self.picker = picker or RandomPicker(seed)
        self.pipelines: Dict[str, Pipeline] = {
            name: Pipeline(config, picker=self.picker, clock=clock, indent=indent, show_progress=show_progress)
            for name, config in MODES.items()
        }

    def pipeline(self, mode: str) -> Pipeline:
        get_mode(mode)
        return self.pipelines[mode]

    def run(self, mode: str, text: str):
        return self.pipeline(mode).run(text)

    def run_batch(self, mode: str, inputs: Sequence[str]) -> List[Any]:
        logger.info(f"Running batch of {len(inputs)} prompts in {mode} mode")
        results = self.pipeline(mode).run_batch(inputs)
        skipped = len(inputs) - len(results)
        if skipped:
            logger.warning(f"{skipped} of {len(inputs)} prompts failed and were skipped")
        return results

    async def run_async(self, mode: str, text: str):
        return await self.pipeline(mode).run_async(text)

    # Mode shortcuts

    def translate(self, text: str) -> JasonFormat:
        return self.run("general", text)

    def optimize_prompt(self, text: str) -> NanoPromptResult:
        return self.run("prompt", text)

    def optimize_code(self, text: str) -> NanoCoderResult:
        return self.run("technical", text)

    def optimize_batch(self, prompts: Sequence[str]) -> List[NanoPromptResult]:
        return self.run_batch("prompt", prompts)

    def optimize_code_batch(self, prompts: Sequence[str]) -> List[NanoCoderResult]:
        return self.run_batch("technical", prompts)

    def template(self, mode: str, name: str) -> str:
        return self.pipeline(mode).template(name)

    def templates(self, mode: str) -> Dict[str, str]:
        return dict(get_mode(mode).templates)

    @staticmethod
    def validate(record: JasonFormat) -> Tuple[bool, List[str]]:
        if not isinstance(record, JasonFormat):
            raise InvalidInputError("Only Jason format records can be validated")
        return validate_jason_format(record)

    def save(self, record, output_dir: str, mode: Optional[str] = None) -> str:
        """Writes the record as <prefix>-<epoch ms>.json and returns the path."""
        if mode is None:
            mode = _mode_of(record)
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        prefix = get_mode(mode).artifact_prefix
        path = os.path.join(output_dir, f"{prefix}-{int(time.time() * 1000)}.json")
        with open(path, "w", encoding='utf-8') as f:
            f.write(record.to_json())
        logger.info(f"Saved {mode} result to {path}")
        return path


def _mode_of(record) -> str:
    if isinstance(record, JasonFormat):
        return "general"
    if isinstance(record, NanoPromptResult):
        return "prompt"
    if isinstance(record, NanoCoderResult):
        return "technical"
    raise InvalidInputError(f"Unsupported record type: {type(record).__name__}")
