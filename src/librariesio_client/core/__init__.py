"""Transport, caching and error primitives."""

__all__: list[str] = []
