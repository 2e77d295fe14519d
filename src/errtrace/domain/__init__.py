"""Domain layer: value objects and ports. No third-party dependencies."""
