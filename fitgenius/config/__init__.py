from fitgenius.config.settings import Language, Settings, settings

__all__ = ["Language", "Settings", "settings"]
