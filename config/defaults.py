"""Default configuration constants for the Meal Vote Planner."""

# Selectable items, in declared order (ties between equal vote counts keep this order)
CATALOG = [
    "Apple",
    "Banana",
    "Orange",
    "Mango",
    "Grapes",
    "Strawberry",
    "Cherry",
    "Peach",
    "Pear",
    "Kiwi",
]

# Canonical slot ordering: days are walked in this order, periods within each day
DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
PERIODS = ["Lunch", "Dinner"]

# Maximum number of slots an item may legitimately win per run
USAGE_CAP = 2

# Adjacency scopes
ADJACENCY_PREVIOUS = "previous"
ADJACENCY_PREVIOUS_AND_NEXT = "previous_and_next"
ADJACENCY_SCOPES = [ADJACENCY_PREVIOUS, ADJACENCY_PREVIOUS_AND_NEXT]

# The scheduler only ever sees finalized (earlier) days; the editor checks both neighbours
SCHEDULER_ADJACENCY_SCOPE = ADJACENCY_PREVIOUS
EDITING_ADJACENCY_SCOPE = ADJACENCY_PREVIOUS_AND_NEXT

# Rule names reported in the violation log
RULE_SAME_DAY = "Same day rule"
RULE_CONSECUTIVE_DAYS = "Consecutive days rule"
RULE_USAGE_CAP = "Max {cap} times per week rule"

# Participants
DEFAULT_PARTICIPANT_COUNT = 4
PARTICIPANT_PREFIX = "User"

# Quick random fill
RANDOM_FILL_SEED = None  # None = fresh randomness on each fill

ITEM_EMOJIS = {
    "Apple": "🍎",
    "Banana": "🍌",
    "Orange": "🍊",
    "Mango": "🥭",
    "Grapes": "🍇",
    "Strawberry": "🍓",
    "Cherry": "🍒",
    "Peach": "🍑",
    "Pear": "🍐",
    "Kiwi": "🥝",
}

# Usage status levels for the constraint status panel
USAGE_STATUS_COLORS = {
    "over": "#ffcccc",
    "at": "#fff3cd",
    "under": "#d4edda",
    "unused": "#eeeeee",
}

# Period colours for charts
PERIOD_COLORS = {"Lunch": "#3b82f6", "Dinner": "#8b5cf6"}

DEFAULT_RULE_CONFIG = {
    "usage_cap": USAGE_CAP,
    "scheduler_adjacency_scope": SCHEDULER_ADJACENCY_SCOPE,
    "editing_adjacency_scope": EDITING_ADJACENCY_SCOPE,
}
