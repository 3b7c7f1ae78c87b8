"""
Demo Package

A small FastAPI + SQLAlchemy service paginating people and films:
- database.py: engine, session factory and ``get_db`` dependency
- models.py: Person, Film and PersonFilm tables
- schema.py: SDL, resolvers and the transformed executable schema
- main.py: FastAPI application factory
"""
