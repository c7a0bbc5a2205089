"""Cinedex Models.

ORM models (database tables):
    from cinedex.models.orm import Movie, Actor

Pydantic contracts (API request/response):
    from cinedex.models.contracts import MovieCreate, MoviePublic
"""
