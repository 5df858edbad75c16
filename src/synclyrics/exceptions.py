"""Custom exceptions for synclyrics."""

class SyncLyricsError(Exception):
    """Base exception for synclyrics."""
    pass

class ConfigError(SyncLyricsError):
    """Invalid configuration values or config file."""
    pass

class LyricsError(SyncLyricsError):
    """Error reading or processing lyrics."""
    pass

class ValidationError(SyncLyricsError):
    """Invalid input parameters."""
    pass
