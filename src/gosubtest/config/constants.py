"""Configuration constants.

Values that are not user-configurable. For configurable values, see
models.py (RunnerConfig, DebuggerConfig, etc.).
"""

CONFIG_DIR_NAME = ".gosubtest"
"""Per-repository configuration directory."""

CONFIG_FILE_NAME = "config.yaml"
"""Configuration file inside CONFIG_DIR_NAME."""

ENV_PREFIX = "GOSUBTEST__"
"""Environment variable prefix; sections and keys are joined with '__'."""

PORT_MIN = 0
PORT_MAX = 65535
"""Valid port range."""
