"""Leveling, templating, role-reward and rank-card logic for a chat XP bot."""

__version__ = "0.1.0"