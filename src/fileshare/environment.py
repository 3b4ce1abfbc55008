# src/fileshare/environment.py
"""
Startup environment for the file sharing service.

Every setting is read once from ``GOKAPI_*`` variables and frozen into an
:class:`Environment` record. Lookups are total: a missing variable falls back
to its default, a malformed boolean becomes ``TriState.UNSET`` and a malformed
integer becomes ``INVALID_INT``. Nothing in this module raises for bad input;
callers decide whether a sentinel should stop startup.

Usage:
    from fileshare.environment import resolve
    env = resolve()                      # reads os.environ
    env = resolve({"GOKAPI_PORT": "53842"})  # injected lookup, e.g. in tests
"""
import logging
import os
import re
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from fileshare.errors import StartupConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GOKAPI_"

# Placeholders for yes / no
IS_TRUE = "yes"
IS_FALSE = "no"

INVALID_INT = -1
MIN_LENGTH_ID = 5
MIN_MAX_MEMORY = 5

# Range of a signed 64-bit integer
MAX_INT = 2**63 - 1
MIN_INT = -(2**63)

REDACTED = "********"

# Built-in defaults, keyed by variable name without the prefix.
# SALT_ADMIN and SALT_FILES are known keys without a non-empty default.
DEFAULT_VALUES: Mapping[str, Any] = MappingProxyType({
    "CONFIG_DIR": "config",
    "CONFIG_FILE": "config.json",
    "DATA_DIR": "data",
    "SALT_ADMIN": "",
    "SALT_FILES": "",
    "LENGTH_ID": 15,
    "MAX_MEMORY_UPLOAD_MB": 20,
})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class TriState(str, Enum):
    """A setting that can be switched on, switched off, or left unset."""
    YES = IS_TRUE
    NO = IS_FALSE
    UNSET = ""


def default_string(key: str) -> str:
    """Default for a string variable, or an empty string if none is declared."""
    value = DEFAULT_VALUES.get(key)
    if isinstance(value, str):
        return value
    return ""


def default_int(key: str) -> int:
    """Default for an integer variable, or INVALID_INT if none is declared."""
    value = DEFAULT_VALUES.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return INVALID_INT


def env_string(environ: Mapping[str, str], key: str) -> str:
    """Looks up a variable, falling back to its default when it is not set."""
    value = environ.get(ENV_PREFIX + key)
    if value is None:
        return default_string(key)
    return value


def env_bool(environ: Mapping[str, str], key: str) -> TriState:
    """Looks up a boolean variable. Defaults never apply to booleans."""
    value = environ.get(ENV_PREFIX + key)
    if value is None:
        return TriState.UNSET
    value_lower = value.lower()
    if value_lower in ("true", "yes"):
        return TriState.YES
    if value_lower in ("false", "no"):
        return TriState.NO
    logger.debug(f"{ENV_PREFIX}{key} is not a boolean, treating it as unset")
    return TriState.UNSET


def env_int(environ: Mapping[str, str], key: str, min_value: int) -> int:
    """
    Looks up an integer variable.

    Returns the default when the variable is not set, INVALID_INT when it
    cannot be parsed or does not fit into 64 bits, and ``min_value`` when
    the parsed value is lower.
    """
    value = environ.get(ENV_PREFIX + key)
    if value is None:
        return default_int(key)
    if not _INT_PATTERN.fullmatch(value):
        logger.debug(f"{ENV_PREFIX}{key} is not an integer")
        return INVALID_INT
    int_value = int(value)
    if int_value < MIN_INT or int_value > MAX_INT:
        logger.debug(f"{ENV_PREFIX}{key} is out of range for an integer")
        return INVALID_INT
    if int_value < min_value:
        logger.debug(f"{ENV_PREFIX}{key}={int_value} is below {min_value}, using {min_value}")
        return min_value
    return int_value


class Environment(BaseModel):
    """Resolved startup settings. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    config_dir: str
    config_file: str
    config_path: str
    data_dir: str
    admin_name: str
    admin_password: str
    webserver_port: str
    webserver_localhost: TriState
    external_url: str
    redirect_url: str
    salt_admin: str
    salt_files: str
    length_id: int = Field(description="Length of generated file ids")
    max_memory: int = Field(description="Upload buffer size in MB")
    use_ssl: TriState
    aws_bucket: str
    aws_region: str
    aws_key_id: str
    aws_key_secret: str
    aws_endpoint: str

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Environment":
        """Resolve every field from ``environ`` (the process environment by default)."""
        if environ is None:
            environ = os.environ

        config_dir = env_string(environ, "CONFIG_DIR")
        config_file = env_string(environ, "CONFIG_FILE")

        env = cls(
            config_dir=config_dir,
            config_file=config_file,
            config_path=config_dir + "/" + config_file,
            data_dir=env_string(environ, "DATA_DIR"),
            admin_name=env_string(environ, "USERNAME"),
            admin_password=env_string(environ, "PASSWORD"),
            webserver_port=env_string(environ, "PORT"),
            webserver_localhost=env_bool(environ, "LOCALHOST"),
            external_url=env_string(environ, "EXTERNAL_URL"),
            redirect_url=env_string(environ, "REDIRECT_URL"),
            salt_admin=env_string(environ, "SALT_ADMIN"),
            salt_files=env_string(environ, "SALT_FILES"),
            length_id=env_int(environ, "LENGTH_ID", MIN_LENGTH_ID),
            max_memory=env_int(environ, "MAX_MEMORY_UPLOAD_MB", MIN_MAX_MEMORY),
            use_ssl=env_bool(environ, "USE_SSL"),
            aws_bucket=env_string(environ, "AWS_BUCKET"),
            aws_region=env_string(environ, "AWS_REGION"),
            aws_key_id=env_string(environ, "AWS_KEY"),
            aws_key_secret=env_string(environ, "AWS_KEY_SECRET"),
            aws_endpoint=env_string(environ, "AWS_ENDPOINT"),
        )
        logger.info(
            f"Resolved environment: config={env.config_path}, data={env.data_dir}, "
            f"remote storage configured={env.is_aws_provided()}"
        )
        return env

    def is_aws_provided(self) -> bool:
        """True if all variables required for S3 compatible storage are set. The endpoint is optional."""
        return (
            self.aws_bucket != ""
            and self.aws_region != ""
            and self.aws_key_id != ""
            and self.aws_key_secret != ""
        )

    def invalid_fields(self) -> List[str]:
        """Variables whose integer value could not be parsed."""
        invalid = []
        if self.length_id == INVALID_INT:
            invalid.append(ENV_PREFIX + "LENGTH_ID")
        if self.max_memory == INVALID_INT:
            invalid.append(ENV_PREFIX + "MAX_MEMORY_UPLOAD_MB")
        return invalid

    def require_valid(self) -> "Environment":
        """Raise StartupConfigError if any integer variable is invalid."""
        invalid = self.invalid_fields()
        if invalid:
            raise StartupConfigError(invalid)
        return self

    def to_environ(self) -> Dict[str, str]:
        """Render the record as GOKAPI_* variables.

        config_path is derived, so it is not exported.
        """
        values = {
            "CONFIG_DIR": self.config_dir,
            "CONFIG_FILE": self.config_file,
            "DATA_DIR": self.data_dir,
            "USERNAME": self.admin_name,
            "PASSWORD": self.admin_password,
            "PORT": self.webserver_port,
            "LOCALHOST": self.webserver_localhost.value,
            "EXTERNAL_URL": self.external_url,
            "REDIRECT_URL": self.redirect_url,
            "SALT_ADMIN": self.salt_admin,
            "SALT_FILES": self.salt_files,
            "LENGTH_ID": str(self.length_id),
            "MAX_MEMORY_UPLOAD_MB": str(self.max_memory),
            "USE_SSL": self.use_ssl.value,
            "AWS_BUCKET": self.aws_bucket,
            "AWS_REGION": self.aws_region,
            "AWS_KEY": self.aws_key_id,
            "AWS_KEY_SECRET": self.aws_key_secret,
            "AWS_ENDPOINT": self.aws_endpoint,
        }
        return {ENV_PREFIX + key: value for key, value in values.items()}

    def redacted(self) -> Dict[str, Any]:
        """Field dump with credentials and salts masked, safe for logs."""
        data = self.model_dump(mode="json")
        for name in ("admin_password", "aws_key_secret", "salt_admin", "salt_files"):
            if data[name]:
                data[name] = REDACTED
        return data


def resolve(environ: Optional[Mapping[str, str]] = None) -> Environment:
    """Parse the GOKAPI_* variables into an Environment."""
    return Environment.from_environ(environ)
