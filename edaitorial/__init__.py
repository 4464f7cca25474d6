"""edAItorial: AI-assisted content checks and publish quality gate."""

__version__ = "1.0.0"
