"""Test package for Zentro.

Structure:
    - unit/: Store, pipeline, citation, image, config, and Gemini adapter tests
    - integration/: FastAPI host and live Gemini round trips

Unit tests drive the send pipeline with in-memory fake backends.
Live tests are skipped unless GEMINI_API_KEY is set.
"""
