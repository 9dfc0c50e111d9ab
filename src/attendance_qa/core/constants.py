"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PLACEHOLDER_NAMES = ("Unknown Student", "Unknown", "N/A", "TBD")

# Confidence assigned when the answer producer sent none (or zero)
DEFAULT_VALID_CONFIDENCE = 0.8
DEFAULT_INVALID_CONFIDENCE = 0.6

# Answer schema fallbacks
SANITIZED_CONFIDENCE = 0.5
FALLBACK_CONFIDENCE = 0.1

STUDENT_IDENTITY_FIELDS = ("studentId", "firstName", "lastName")
