from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from .tables import KeywordTable


@dataclass(frozen=True)
class ClassificationResult:
    facets: Dict[str, Optional[str]] = field(default_factory=dict)
    collections: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def facet(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self.facets.get(name)
        return value if value is not None else default

    def collection(self, name: str) -> List[str]:
        return list(self.collections.get(name, ()))

    def with_collection(self, name: str, values: Sequence[str]) -> "ClassificationResult":
        collections = dict(self.collections)
        collections[name] = tuple(values)
        return replace(self, collections=collections)


def detect_first(text: str, table: KeywordTable) -> Optional[str]:
    """
    Returns the first label (in declaration order) with a trigger contained in
    the text, or the table default. Earlier labels win ties.
    """
    for label, _ in table.entries:
        if any(trigger in text for trigger in table.triggers(label)):
            return label
    return table.default


def detect_all(text: str, table: KeywordTable) -> List[str]:
    """Every matching label in declaration order, truncated to the table limit."""
    found = [
        label for label, _ in table.entries
        if any(trigger in text for trigger in table.triggers(label))
    ]
    if table.limit is not None:
        return found[:table.limit]
    return found


class Classifier:
    def __init__(self,
                 single_tables: Sequence[KeywordTable] = (),
                 multi_tables: Sequence[KeywordTable] = (),
                 context_tables: Sequence[KeywordTable] = (),
                 context_limit: int = 5):
        self.single_tables = tuple(single_tables)
        self.multi_tables = tuple(multi_tables)
        self.context_tables = tuple(context_tables)
        self.context_limit = context_limit

    def classify(self, text: str) -> ClassificationResult:
        lower = text.lower()
        facets = {table.name: detect_first(lower, table) for table in self.single_tables}
        collections = {table.name: tuple(detect_all(lower, table)) for table in self.multi_tables}
        return ClassificationResult(facets=facets, collections=collections)

    def extract_context(self, text: str) -> List[str]:
        """Combined, rendered labels of all context tables, capped at context_limit."""
        lower = text.lower()
        context = []
        for table in self.context_tables:
            context.extend(table.render(label) for label in detect_all(lower, table))
        return context[:self.context_limit]
