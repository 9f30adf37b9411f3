"""BatchResult dataclass: tally of one batch mutation."""

from dataclasses import dataclass, field
from typing import List, Tuple

from deploy_board_sweep.models.enums import CardOutcome


@dataclass
class BatchResult:
    total: int = 0
    # (card id, outcome) in completion order
    outcomes: List[Tuple[int, CardOutcome]] = field(default_factory=list)

    def record(self, card_id: int, outcome: CardOutcome):
        self.outcomes.append((card_id, outcome))

    def count(self, outcome: CardOutcome) -> int:
        return sum(1 for _, o in self.outcomes if o is outcome)

    @property
    def succeeded(self) -> int:
        return self.count(CardOutcome.SUCCEEDED)

    @property
    def already_in_state(self) -> int:
        return self.count(CardOutcome.ALREADY_IN_STATE)

    @property
    def failed(self) -> int:
        return (self.count(CardOutcome.FAILED_STATUS)
                + self.count(CardOutcome.FAILED_ERROR))

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def complete(self) -> bool:
        return self.attempted == self.total
