"""
Core package for the real estate calculator application.

Submodules provide CSV ingestion, filtering, statistics, and user interface
rendering helpers that are orchestrated by the top-level `app.py`.
"""
