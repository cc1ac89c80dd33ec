"""User management REST API (FastAPI + PostgreSQL)."""

__version__ = "0.1.0"
