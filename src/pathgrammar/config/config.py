"""Configuration management for pathgrammar."""
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from pathgrammar.config.file_ops import write_text_file
from pathgrammar.config.paths import default_config_path
from pathgrammar.platform.logging import logger

TOKENIZER_DEFAULT = "manual"
BENCH_REPEAT_DEFAULT = 5


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Tokenizer strategy bound at import time ("manual" or "generated")
    tokenizer: str = TOKENIZER_DEFAULT

    # Family used when parse() is called without one; None means host family
    default_family: str | None = None

    # Log file path used by the CLI
    log_file: Path | None = _path_field()

    # Repetitions per benchmark run
    bench_repeat: int = BENCH_REPEAT_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file; defaults to ``default_config_path()``.

        Returns:
            Path: File that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            content = self._render_toml(config_dict)
            write_text_file(destination, content)
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathgrammar configuration file")
        lines.append("")

        lines.append("# Component tokenizer strategy: \"manual\" (default) or \"generated\"")
        lines.append("# PATHGRAMMAR_TOKENIZER overrides this value")
        lines.append(f"tokenizer = {self._format_toml_value(config['tokenizer'])}")
        lines.append("")

        lines.append("# Path family used when none is given: \"windows\" or \"posix\" (optional)")
        lines.append("# Leave unset to follow the host operating system")
        if config["default_family"] is not None:
            lines.append(f"default_family = {self._format_toml_value(config['default_family'])}")
        lines.append("")

        lines.append("# Log file path for the command line tool (optional)")
        lines.append('# Example: log_file = "/path/to/logs/pathgrammar.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Repetitions per benchmark run (positive integer)")
        lines.append(f"bench_repeat = {self._format_toml_value(config['bench_repeat'])}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: object) -> str:
        """Format a scalar as a TOML literal."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the default TOML file.

        A missing file yields defaults; nothing is written on load.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {"tokenizer", "default_family", "log_file", "bench_repeat"}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                for key, value in config_dict.items():
                    if key.endswith("_file") and isinstance(value, str) and not value.strip():
                        config_dict[key] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                logger.debug("No configuration at %s; using defaults", config_file)
                instance = cls()

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
