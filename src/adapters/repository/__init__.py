"""Repository adapters - In-memory implementations."""

from .memory import InMemoryActivityRepository, InMemoryUserRepository

__all__ = ["InMemoryActivityRepository", "InMemoryUserRepository"]
