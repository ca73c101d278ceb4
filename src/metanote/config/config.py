"""Configuration management for Metanote."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from metanote.config.file_ops import write_text_file
from metanote.config.paths import default_config_path
from metanote.platform.logging import logger

ID3_VERSION_DEFAULT: int = 4
SUPPORTED_ID3_VERSIONS: tuple[int, ...] = (3, 4)
ART_DESCRIPTION_DEFAULT: str = "Cover"


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
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # ID3v2 minor version written to MP3 files
    id3_version: int = ID3_VERSION_DEFAULT

    # Description attached to artwork loaded from image files
    art_description: str | None = ART_DESCRIPTION_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to the portable config path.

        Returns:
            Path: File the configuration was written to.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# Metanote Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/metanote.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# ID3v2 version used when writing MP3 tags (3 or 4)")
        lines.append(f"id3_version = {self._format_toml_value(config['id3_version'])}")
        lines.append("")

        lines.append("# Description stored with artwork added from an image file (optional)")
        if config["art_description"] is not None:
            lines.append(
                f"art_description = {self._format_toml_value(config['art_description'])}"
            )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults. The result is cached until
        :meth:`reset` is called.

        Args:
            config_file: Explicit file to read. Defaults to the portable path.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()

        if not source.exists():
            logger.debug("No configuration at %s; using defaults", source)
            instance = cls()
        else:
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            values = {key: value for key, value in config_dict.items() if key in known}
            log_file = values.get("log_file")
            if isinstance(log_file, str) and not log_file.strip():
                values["log_file"] = None

            logger.info("Configuration loaded from %s", source)
            instance = cls(**values)

        cls._instance = instance
        cls._loaded_from = source
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration instance."""
        cls._instance = None
        cls._loaded_from = None


# Global configuration instance
config = Config.load()
