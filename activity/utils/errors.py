# activity/utils/errors.py
class ActivityError(RuntimeError):
    """
    Base error for configuration / catalog problems.
    Rendering itself never raises; only setup does.
    """


class ConfigError(ActivityError):
    """
    Raised for a missing or unreadable config file.
    Should NOT print traceback.
    """


class CatalogError(ActivityError):
    """
    Raised when a locale catalog exists but cannot be parsed.
    """
