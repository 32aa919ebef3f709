"""Rule thresholds. Every comparison against these is strict (> / <)."""

# Placement: vertical centroid as a fraction of canvas height.
PLACEMENT_TOP = 0.33
PLACEMENT_BOTTOM = 0.67

# Orientation: head must sit more than 20% of body width off the body center.
ORIENTATION_OFFSET_FRACTION = 0.2

# More than 5 distinguishable parts = many details.
DETAIL_COUNT = 5

# Exactly four legs = "secure". Five or more fall to the other branch.
SECURE_LEG_COUNT = 4

# Ears: mean ear height vs head height, or vs canvas height with no head.
EAR_TO_HEAD = 0.3
EAR_TO_CANVAS = 0.1

# Tail: longest tail side vs body width, or vs longest canvas side with no body.
# The analyzer's own tail_length is on the same 0-1 scale as TAIL_TO_BODY.
TAIL_TO_BODY = 0.4
TAIL_TO_CANVAS = 0.15
