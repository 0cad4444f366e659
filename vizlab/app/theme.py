"""Theme constants for the Dash app."""

BACKGROUND = "#FFFFFF"
TEXT = "#333333"
MUTED = "#888888"
CIRCLE_OUTLINE = "#000000"

FONT_STACK = 'system-ui, -apple-system, "Segoe UI", sans-serif'

# Spacing under the "Bounce!" button
BUTTON_MARGIN_BOTTOM = "15px"

# Animation frame period while a bounce is running
FRAME_INTERVAL_MS = 40
