"""
Shared constants across predarg modules.

This module is the single source of truth for:
- Attribute keys read from predicate constituents
- View defaults
- Canonical rendering layout
"""

# =============================================================================
# ATTRIBUTE KEYS
# =============================================================================
# Keys written by CoNLL-style column readers onto predicate constituents

LEMMA_ATTRIBUTE = "predicate"
SENSE_ATTRIBUTE = "SenseNumber"


# =============================================================================
# VIEW DEFAULTS
# =============================================================================

DEFAULT_VIEW_SCORE = 1.0
VIEW_GENERATOR_SUFFIX = "-annotator"


# =============================================================================
# RENDERING
# =============================================================================

RENDER_INDENT = " " * 4
