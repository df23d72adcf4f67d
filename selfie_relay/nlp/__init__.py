"""Lexical classification package.

Provides the keyword-based mode selector that maps free-text selfie context to a
prompt framing style. No model inference is performed here.
"""
