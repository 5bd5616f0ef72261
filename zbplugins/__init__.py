"""Chat-bot command logic: parsing, per-chat state, small SQLite stores and reply formatting."""

__version__ = "1.5.0"