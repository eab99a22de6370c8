import random
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Protocol, Sequence, Tuple

from .classifier import ClassificationResult
from .tables import PhrasePool


class Picker(Protocol):
    def pick(self, options: Sequence[str]) -> str:
        ...


class RandomPicker:
    """Uniform choice; pass a seed for reproducible runs."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def pick(self, options: Sequence[str]) -> str:
        if not options:
            raise ValueError("Cannot pick from an empty pool")
        return self._random.choice(list(options))


@dataclass(frozen=True)
class LogEntry:
    category: str
    description: str


@dataclass
class OptimizationLog:
    entries: List[LogEntry] = field(default_factory=list)

    def add(self, category: str, description: str):
        self.entries.append(LogEntry(category, description))

    def descriptions(self) -> List[str]:
        return [entry.description for entry in self.entries]

    def categories(self) -> List[str]:
        return [entry.category for entry in self.entries]

    def has(self, category: str) -> bool:
        return any(entry.category == category for entry in self.entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _contains(text: str, phrase: str) -> bool:
    return phrase.lower() in text.lower()


def _append(text: str, phrase: str) -> str:
    return f"{text}, {phrase}"


@dataclass(frozen=True)
class SubstitutionStep:
    """Literal, global find-and-replace; one log entry per mapping that fired."""
    mappings: Tuple[Tuple[str, str], ...]
    category: str = "pattern"
    label: str = "Pattern mapping"

    def apply(self, text: str, log: OptimizationLog) -> str:
        for pattern, replacement in self.mappings:
            if pattern in text:
                text = text.replace(pattern, replacement)
                log.add(self.category, f'{self.label}: "{pattern}" → "{replacement}"')
        return text


@dataclass(frozen=True)
class InjectStep:
    category: str
    label: str
    pool: PhrasePool
    # Concept words; if any is already in the text the step is skipped
    guard_terms: Tuple[str, ...] = ()
    verb: str = "Added"
    # Also skip when the picked phrase itself is already in the text
    skip_if_present: bool = False

    def apply(self, text: str, classification: ClassificationResult, picker: Picker) -> Optional[Tuple[str, LogEntry]]:
        phrase = picker.pick(self.pool.candidates())
        if self.skip_if_present and _contains(text, phrase):
            return None
        if any(term in text.lower() for term in self.guard_terms):
            return None
        return _append(text, phrase), LogEntry(self.category, f'{self.label}: {self.verb} "{phrase}"')


@dataclass(frozen=True)
class StyleStep:
    """Injects a phrase from the pool of the detected style."""
    pools: Dict[str, PhrasePool]
    facet: str = "style"
    category: str = "style"
    label: str = "Style enhancement"

    def apply(self, text: str, classification: ClassificationResult, picker: Picker) -> Optional[Tuple[str, LogEntry]]:
        style = classification.facet(self.facet)
        pool = self.pools.get(style) if style else None
        if pool is None:
            return None
        phrase = picker.pick(pool.candidates())
        if _contains(text, phrase):
            return None
        return _append(text, phrase), LogEntry(self.category, f'{self.label}: Added "{phrase}" for {style} style')


@dataclass(frozen=True)
class DomainStep:
    """Appends the fixed enhancement of the detected domain."""
    enhancements: Dict[str, str]
    facet: str = "domain"
    category: str = "domain"
    label: str = "Domain enhancement"
    fallback: str = "technical excellence"

    def apply(self, text: str, classification: ClassificationResult, picker: Picker) -> Optional[Tuple[str, LogEntry]]:
        domain = classification.facet(self.facet)
        if not domain:
            return None
        enhancement = self.enhancements.get(domain, self.fallback)
        return _append(text, enhancement), LogEntry(self.category, f'{self.label}: Added "{enhancement}" for {domain}')


@dataclass(frozen=True)
class TieredStep:
    """Picks a pool name first, then a phrase from that pool. The pool name is the log category."""
    pools: Dict[str, PhrasePool]
    label: str = "{kind} optimization"

    def apply(self, text: str, classification: ClassificationResult, picker: Picker) -> Optional[Tuple[str, LogEntry]]:
        kind = picker.pick(list(self.pools))
        phrase = picker.pick(self.pools[kind].candidates())
        if _contains(text, phrase):
            return None
        label = self.label.format(kind=kind)
        return _append(text, phrase), LogEntry(kind, f'{label}: Added "{phrase}"')


class Rewriter:
    def __init__(self, substitution: Optional[SubstitutionStep] = None, steps: Sequence = (), picker: Optional[Picker] = None):
        self.substitution = substitution
        self.steps = tuple(steps)
        self.picker = picker or RandomPicker()

    def substitute(self, text: str, log: OptimizationLog) -> str:
        if self.substitution is None:
            return text
        return self.substitution.apply(text, log)

    def inject(self, text: str, classification: ClassificationResult, log: OptimizationLog) -> str:
        # Guards see the running text, so earlier injections count as present
        for step in self.steps:
            outcome = step.apply(text, classification, self.picker)
            if outcome is None:
                continue
            text, entry = outcome
            log.entries.append(entry)
        return text

    def rewrite(self, text: str, classification: ClassificationResult) -> Tuple[str, OptimizationLog]:
        log = OptimizationLog()
        text = self.substitute(text, log)
        text = self.inject(text, classification, log)
        return text, log
