"""Roster persistence."""
from .env_roster_store import EnvRosterStore

__all__ = ['EnvRosterStore']
