"""
Core utilities shared across the Person API.

This package hosts configuration helpers (env vars, paths, data source
selection), logging setup and the exception hierarchy used by repositories
and services. Modules here must not import FastAPI or storage layers.
"""
