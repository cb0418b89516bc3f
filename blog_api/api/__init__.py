"""
API layer for the Blog API.

Exposes HTTP endpoints for posts (/posts), user registration (/users) and
a health check.
"""
