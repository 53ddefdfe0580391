"""
woofwoof — Reversible text ↔ dog-speech transcoder.

UTF-8 text → length-prefixed frame → 6-bit groups → 64-token codebook.
Every token stream decodes back to the exact (NFC-normalised) input text.
"""

__version__ = "1.0.0"
__author__ = "woofwoof contributors"
