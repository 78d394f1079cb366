"""Conventional Commits title checker for pull requests and commits."""

__version__ = "0.1.0"
