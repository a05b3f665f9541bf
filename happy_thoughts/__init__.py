"""
Happy Thoughts API root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models and repositories, application use cases, and the MongoDB
infrastructure that backs them.
"""
