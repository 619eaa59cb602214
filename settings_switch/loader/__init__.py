"""Configuration loader package.

Loads runtime settings overrides from the environment.
"""

from .env import EnvironmentLoader, TypeConversionError

__all__ = ["EnvironmentLoader", "TypeConversionError"]
