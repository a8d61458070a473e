from models.slot import Slot, canonical_slots
from models.ballot import Ballot
from models.tally import VoteTally
from models.allocation import Assignment, Plan, UsageState, Violation
from models.diagnostics import AllocationResult, ConstraintSummary
