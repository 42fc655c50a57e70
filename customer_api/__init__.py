"""In-memory customer resource service (FastAPI + strawberry)."""

__version__ = "1.0.0"
