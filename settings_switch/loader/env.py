"""Environment variable configuration loader.

Maps ``CC_SWITCH_*`` variables onto settings keys with schema-driven type
conversion.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Optional

logger = logging.getLogger(__name__)


class TypeConversionError(Exception):
    """Exception raised when type conversion fails."""

    pass


class EnvironmentLoader:
    """Environment variable configuration loader.

    Supports:
    - A fixed variable prefix (``CC_SWITCH_`` by default)
    - Explicit type conversion driven by a schema
    - Default values
    """

    def __init__(
        self,
        prefix: str = "CC_SWITCH_",
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the environment loader.

        Args:
            prefix: Prefix prepended to every variable name
            environ: Environment mapping to read (defaults to os.environ)
        """
        self.prefix = prefix
        self.environ = environ if environ is not None else os.environ

        self._converters = {
            "str": str,
            "path": os.path.expanduser,
        }

    def load_with_schema(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Load environment variables according to a schema.

        Blank variables count as unset. A value that cannot be converted is
        logged and skipped so the built-in default applies.

        Args:
            schema: Mapping of settings key to ``{"type": ..., "default": ...}``

        Returns:
            Settings dictionary containing only the keys that were resolved
        """
        config = {}

        for key, spec in schema.items():
            env_key = self._config_key_to_env_key(key)
            env_value = self.environ.get(env_key)

            if env_value is not None and env_value.strip():
                try:
                    config[key] = self._convert_value_with_type(
                        env_value.strip(), spec.get("type", "str")
                    )
                    logger.debug(f"Loaded env var: {env_key} -> {key}")
                except (TypeConversionError, ValueError) as e:
                    logger.warning(f"Ignoring {env_key}, cannot convert value: {e}")

            elif "default" in spec:
                config[key] = spec["default"]

        return config

    def _config_key_to_env_key(self, config_key: str) -> str:
        return f"{self.prefix}{config_key.replace('.', '_').upper()}"

    def _convert_value_with_type(self, value: str, value_type: str) -> Any:
        """Convert value with explicit type."""
        converter = self._converters.get(value_type)
        if converter is None:
            raise TypeConversionError(f"Unknown type: {value_type}")
        return converter(value)
