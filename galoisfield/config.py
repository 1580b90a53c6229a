"""Global configuration for galoisfield."""

import os

# ---------- Machine word ----------
# Every field type is backed by a single unsigned 64-bit word.
WORD_BITS = 64
WORD_MODULUS = 2**WORD_BITS  # exclusive upper bound for a declared modulus

# ---------- Modulus bounds ----------
MIN_MODULUS = 2  # smallest prime; primality itself is trusted, not checked

# ---------- Logging ----------
# Env var GALOISFIELD_LOG_LEVEL sets the library logger level (e.g. "DEBUG"
# to trace equipage and failed inversions).  Unset leaves it at NOTSET so
# the application's logging configuration decides.
LOG_LEVEL = os.environ.get("GALOISFIELD_LOG_LEVEL")
