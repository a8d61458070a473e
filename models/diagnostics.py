from dataclasses import dataclass, field
from typing import Dict, List

from models.allocation import Plan, UsageState, Violation


@dataclass
class ConstraintSummary:
    violation_count: int
    over_used: List[str]
    status: str
    usage_by_item: Dict[str, int] = field(default_factory=dict)


@dataclass
class AllocationResult:
    """Everything produced by one recompute: plan, violation log, usage and summary."""
    plan: Plan
    violations: List[Violation]
    usage: UsageState
    summary: ConstraintSummary

    def diagnostics(self) -> dict:
        return {
            "violations": [v.to_dict() for v in self.violations],
            "summary": self.summary.status,
            "usageByItem": dict(self.summary.usage_by_item),
        }
