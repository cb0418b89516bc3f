"""
Blog API root package.

FastAPI application (main.py) exposing blog post CRUD and user registration,
with domain models, MongoDB repositories, use cases and a DI container.
"""
