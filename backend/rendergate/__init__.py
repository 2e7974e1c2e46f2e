"""rendergate — deterministic build-time compliance gates for UI renderer outputs."""

__version__ = "0.1.0"
