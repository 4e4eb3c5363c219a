"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting names something the service cannot run with."""

    def __init__(self, setting: str, message: str) -> None:
        self.setting = setting
        super().__init__(f"Invalid {setting}: {message}")
