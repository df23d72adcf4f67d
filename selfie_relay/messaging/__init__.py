"""Message dispatch package.

Scope:
    Delivers a caption plus media URL to an OpenClaw channel through one of two
    interchangeable transports (local CLI or gateway HTTP API).

Non-goals:
    - No retries or queuing of multiple targets.
    - No transport auto-negotiation; callers choose the transport.
"""
