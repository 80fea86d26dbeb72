"""User-related data models."""

from dataclasses import dataclass


@dataclass
class User:
    """GitLab user as returned by the users API."""

    id: int
    username: str
    name: str | None = None
