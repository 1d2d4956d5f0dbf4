"""Errors raised by infrastructure utilities."""


class UtilError(Exception):
    pass


class ConfigurationError(UtilError):
    """Settings that cannot be used as loaded."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"Invalid {setting}: {reason}")


class JWTError(UtilError):
    """Token could not be verified."""

    pass
