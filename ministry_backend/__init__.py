"""
Backend package for the ministry organiser API.

This package provides a FastAPI application over a generic CRUD service
backed by Firestore, with an in-memory document store for local runs and
tests.
"""
