"""Well-known event type constants.

Defined centrally so publishers and subscribers reference the same strings.
"""

# --- Quote lifecycle events (controller → display) ------------------------

QUOTE_STATE_CHANGED = "quote.state.changed"
QUOTE_FETCH_FAILED = "quote.fetch.failed"
