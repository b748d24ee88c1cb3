"""
Feature modules for the tour log.

Each feature is a self-contained module with:
- models.py - SQLAlchemy models
- schemas.py - Pydantic schemas
- service.py - Business logic
- repository.py - Data access
- parser.py / aggregator.py - Pure calculation logic (tracks, stats)
"""
