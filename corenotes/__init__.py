"""
Corenotes REST API.

This package provides a FastAPI application exposing per-user task CRUD
endpoints on top of a SQLAlchemy-backed task store, with an in-memory store
for local development and tests.
"""
