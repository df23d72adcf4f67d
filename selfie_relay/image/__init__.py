"""Image generation adapter package.

Scope:
    Provides the MiniMax text-to-image client and a small service that turns a
    `SelfieRequest` into a `GeneratedImage`.

Non-goals:
    - No image download or processing; only the returned URL is used.
    - No caching of generated images.
"""
