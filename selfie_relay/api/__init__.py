"""SelfieRelay API adapter package.

Architectural role:
- Defines the external interaction boundary for CLI and HTTP interfaces.
- Performs transport-level validation and response shaping.
- Delegates the selfie flow to `selfie_relay.core.engine`.
"""
