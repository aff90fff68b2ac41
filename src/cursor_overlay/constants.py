"""Shared constants for the cursor overlay."""

DEFAULT_ELEMENT_ID = "action-visual-indicator"
DEFAULT_COLOR = "#026aa1"

# Bounded retries for injection. Navigation can land on a document that is not
# interactive yet for longer than the initial bind, so reloads get more attempts.
ATTACH_RETRY_LIMIT = 5
RELOAD_RETRY_LIMIT = 10
RETRY_DELAY_MS = 200

# Must match the left/top transition inside the draw script.
TRANSITION_MS = 300
CLICK_EFFECT_MS = 500

RETRY_MODES = ("retry_all", "retry_specific")

ENV_PREFIX = "CURSOR_OVERLAY_"
