# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the data type registry."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import configure_split_stream_logging


_ENV_PREFIX = "DATA_TYPE_REGISTRY_"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(f"{_ENV_PREFIX}{name}", default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RegistryConfig:
    """Configuration class for the data type registry."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    schema_cache_enabled: bool = True

    # directory of YAML data type declarations registered at bootstrap
    declarations_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'RegistryConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", "INFO"),
            print_level=os.getenv(f"{_ENV_PREFIX}PRINT_LEVEL", "ERROR"),
            schema_cache_enabled=_env_flag("SCHEMA_CACHE_ENABLED", "true"),
            declarations_dir=os.getenv(f"{_ENV_PREFIX}DECLARATIONS_DIR") or None,
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging for the package based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            logger_name='data_type_registry',
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
        )


# Global configuration instance
registry_config = RegistryConfig.from_env()
