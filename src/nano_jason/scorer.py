from typing import Dict, Optional

from .rewriter import OptimizationLog


class Scorer:
    """
    Additive confidence heuristic.

    score = floor + bonus + sum(weight of each log entry's category),
    clamped to [floor, ceiling]. Categories without an explicit weight
    count ``default_weight``.
    """

    def __init__(self, floor: int, ceiling: int, weights: Optional[Dict[str, int]] = None,
                 default_weight: int = 0, bonus: int = 0):
        if floor > ceiling:
            raise ValueError(f"Score floor {floor} is above ceiling {ceiling}")
        self.floor = floor
        self.ceiling = ceiling
        self.weights = weights or {}
        self.default_weight = default_weight
        self.bonus = bonus

    def score(self, log: OptimizationLog) -> int:
        total = self.floor + self.bonus
        for entry in log:
            total += self.weights.get(entry.category, self.default_weight)
        return max(self.floor, min(self.ceiling, total))
