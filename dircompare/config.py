"""Configuration management using Pydantic BaseSettings.

Settings are read from ``DIRCOMPARE_*`` environment variables or a ``.env``
file, and can be overridden per run from the command line.
"""
import hashlib
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Runtime configuration for a directory comparison."""

    # Indexing
    max_workers: int = Field(8, ge=1, le=256, description="Parallel fingerprint workers per directory")
    hash_algorithm: str = Field("md5", description="hashlib algorithm used for content fingerprints")
    read_chunk_bytes: int = Field(128 * 1024, ge=4096, le=64 * 1024 * 1024, description="Read buffer size per file")

    # Progress
    show_progress: bool = Field(True, description="Show a progress bar while indexing")
    progress_log_every: int = Field(100, ge=1, le=1_000_000, description="Log progress every N files")

    # Outputs
    output_dir: Path = Field(Path("."), description="Directory for list files")
    duplicates_file: str = Field("BSame_files.txt", min_length=1, description="Duplicate list file name")
    unique_file: str = Field("BUnique_files.txt", min_length=1, description="Unique list file name")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_format: str = Field("%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")

    model_config = SettingsConfigDict(
        env_prefix="DIRCOMPARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("hash_algorithm", mode="after")
    @classmethod
    def validate_hash_algorithm(cls, v: str) -> str:
        name = v.strip().lower()
        if name not in hashlib.algorithms_guaranteed or name.startswith("shake_"):
            valid = sorted(a for a in hashlib.algorithms_guaranteed if not a.startswith("shake_"))
            raise ValueError(f"Invalid hash algorithm: {v}. Valid options: {valid}")
        return name

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Valid options: {valid_levels}")
        return v.upper()

    @property
    def duplicates_path(self) -> Path:
        return self.output_dir / self.duplicates_file

    @property
    def unique_path(self) -> Path:
        return self.output_dir / self.unique_file

    def validate_configuration(self) -> List[str]:
        """Validate cross-field constraints and return any issues."""
        issues = []

        if self.duplicates_path == self.unique_path:
            issues.append("DIRCOMPARE_DUPLICATES_FILE and DIRCOMPARE_UNIQUE_FILE must differ")

        if self.output_dir.exists() and not self.output_dir.is_dir():
            issues.append(f"DIRCOMPARE_OUTPUT_DIR is not a directory: {self.output_dir}")

        return issues

    def log_configuration(self) -> None:
        """Log the effective configuration."""
        from dircompare.utils.logger import log_info

        log_info("Configuration loaded",
                 max_workers=self.max_workers,
                 hash_algorithm=self.hash_algorithm,
                 read_chunk_bytes=self.read_chunk_bytes,
                 show_progress=self.show_progress,
                 output_dir=str(self.output_dir),
                 log_level=self.log_level)


# Global configuration instance (lazy loading)
_config = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config(**overrides) -> Config:
    """Rebuild configuration from the environment, applying explicit overrides."""
    global _config
    _config = Config(**overrides)
    return _config
