import json
from pathlib import Path
from typing import Dict, Any, List

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import (
    CONFIG_FILE_NAME, DEFAULT_BENCH_DURATION, DEFAULT_BENCHMARK, DEFAULT_DURATION,
    DEFAULT_LOCAL_ADDRS, DEFAULT_LOG_LEVEL, DEFAULT_RPS, ENV_PREFIX,
    LIBRARY_LOG_LEVELS, LOCAL_ADDRS_SEPARATOR,
)


class RunConfig(BaseSettings):
    """Configuration for a single load test run."""

    url: str = ""
    rps: int = DEFAULT_RPS
    duration: int = DEFAULT_DURATION
    benchmark: bool = DEFAULT_BENCHMARK
    bench_duration: int = DEFAULT_BENCH_DURATION
    local_addrs: str = DEFAULT_LOCAL_ADDRS
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        validate_default=True,
        frozen=True,
    )

    @field_validator("url")
    @classmethod
    def url_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("url is required")
        return value

    @field_validator("rps", "duration", "bench_duration")
    @classmethod
    def must_be_positive(cls, value: int, info: ValidationInfo) -> int:
        if value <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {value}")
        return value

    @property
    def local_addr_list(self) -> List[str]:
        """Local bind addresses split out of the comma-separated setting."""
        return [addr.strip() for addr in self.local_addrs.split(LOCAL_ADDRS_SEPARATOR) if addr.strip()]

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from the loadtester.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                # Accept a JSON list for local_addrs as well as the flag string
                if isinstance(config.get("local_addrs"), list):
                    config["local_addrs"] = LOCAL_ADDRS_SEPARATOR.join(config["local_addrs"])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Init settings (values given on the command line)
        2. Environment variables
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            init_settings,
            env_settings,
            json_source,
        )
