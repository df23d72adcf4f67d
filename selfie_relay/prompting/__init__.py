"""Prompting package.

This package contains deterministic prompt-construction helpers used by the image
service. It does not perform mode selection, network access, or dispatch.
"""
