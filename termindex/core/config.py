"""
termindex Central Configuration
Digest algorithm, malformed-entry policy, and logging settings
"""

from dataclasses import dataclass, replace
from typing import Optional
import os

import yaml

from .digest import DEFAULT_ALGORITHM, digest_width

ON_MALFORMED_RAISE = "raise"
ON_MALFORMED_SKIP = "skip"
ON_MALFORMED_POLICIES = (ON_MALFORMED_RAISE, ON_MALFORMED_SKIP)


@dataclass
class CompilerConfig:
    """Configuration for vocabulary compilation"""

    # Hash used for digests; every index records the algorithm it was built with
    digest_algorithm: str = DEFAULT_ALGORITHM

    # What to do with an entry that has neither key nor text: "raise" or "skip"
    on_malformed: str = ON_MALFORMED_RAISE

    def __post_init__(self):
        """Validate settings up front so a bad config fails before compiling"""
        self.validate()

    def validate(self):
        digest_width(self.digest_algorithm)
        if self.on_malformed not in ON_MALFORMED_POLICIES:
            raise ValueError(
                f"on_malformed must be one of {ON_MALFORMED_POLICIES}, got {self.on_malformed!r}"
            )


@dataclass
class TermIndexConfig:
    """Main configuration class combining all settings"""

    compiler: CompilerConfig

    # Logging
    log_level: str = "INFO"

    def __init__(self, compiler: Optional[CompilerConfig] = None, log_level: str = "INFO"):
        """Initialize with optional custom configurations"""
        # Copy so environment overrides never touch the caller's object
        self.compiler = replace(compiler) if compiler else CompilerConfig()
        self.log_level = log_level

        # Override with environment variables if present
        self._load_env_overrides()

    def _load_env_overrides(self):
        """Load configuration overrides from environment variables"""
        if os.getenv("TERMINDEX_DIGEST_ALGORITHM"):
            self.compiler.digest_algorithm = os.getenv("TERMINDEX_DIGEST_ALGORITHM")

        if os.getenv("TERMINDEX_ON_MALFORMED"):
            self.compiler.on_malformed = os.getenv("TERMINDEX_ON_MALFORMED").lower()

        if os.getenv("TERMINDEX_LOG_LEVEL"):
            self.log_level = os.getenv("TERMINDEX_LOG_LEVEL").upper()

        # Debug override
        if os.getenv("TERMINDEX_DEBUG", "").lower() in ("true", "1", "yes"):
            self.log_level = "DEBUG"

        self.compiler.validate()

    @classmethod
    def load_from_file(cls, config_path: str) -> 'TermIndexConfig':
        """Load configuration from YAML file"""
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}

            compiler = CompilerConfig(**config_data.get('compiler', {}))
            log_level = str(config_data.get('log_level', 'INFO')).upper()

            # Environment overrides are applied on top of the file
            return cls(compiler=compiler, log_level=log_level)

        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    def save_to_file(self, config_path: str):
        """Save configuration to YAML file"""
        config_data = {
            'compiler': {
                'digest_algorithm': self.compiler.digest_algorithm,
                'on_malformed': self.compiler.on_malformed,
            },
            'log_level': self.log_level,
        }

        with open(config_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False, indent=2)

