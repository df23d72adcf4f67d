"""Core orchestration package.

Architectural role:
    Exposes the single-transaction layer that sits between CLI/HTTP entrypoints
    and the lower-level subsystems (mode selection, prompting, image client and
    message dispatch).

Composition:
    - `engine`: `generate_and_send`, the end-to-end selfie flow.
    - `selfie_types`: Shared value objects passed between subsystems.
    - `errors`: Failure taxonomy raised by every stage.
    - `provider_config`: Environment-backed configuration object.

Determinism and side effects:
    Package import itself is deterministic and side-effect free. Runtime side effects
    are performed by `engine` during request processing.
"""
