"""Exceptions raised outside the title validator itself."""


class TitleCheckError(Exception):
    """Base class for errors that stop a check before validation runs."""


class ConfigError(TitleCheckError):
    """Configuration value could not be used."""


class TitleSourceError(TitleCheckError):
    """No title could be obtained from the event payload or repository."""
