"""
Bundler configuration and the TOML config-file loader.

A config file holds a single [builder] table:

    [builder]
    replace_source = true
    replace_comment = false
    root_path = "./tests/source.sh"
"""
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from bundle_core.errors import ConfigError, io_error

CONFIG_TABLE = "builder"


class BundleConfig(BaseModel):
    """Options for a single bundling run."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    root_path: Optional[Path] = None
    enable_source: bool = Field(
        default=False,
        validation_alias=AliasChoices("enable_source", "replace_source"),
        strict=True,
    )
    enable_comment: bool = Field(
        default=True,
        validation_alias=AliasChoices("enable_comment", "replace_comment"),
        strict=True,
    )

    @property
    def source_dir(self):
        """Directory that source-style imports are relative to."""
        if self.root_path is None:
            return None
        return self.root_path.parent


def load_config(path):
    """
    Load a BundleConfig from a TOML config file.

    Args:
        path: Path to the TOML file

    Returns:
        The validated BundleConfig

    Raises:
        BundleIOError: If the file can't be read
        ConfigError: If the file isn't valid TOML or the [builder] table doesn't match
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise io_error(e, path) from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(str(e), path=path) from e

    table = data.get(CONFIG_TABLE)
    if not isinstance(table, dict):
        raise ConfigError(
            f"missing [{CONFIG_TABLE}] table",
            path=path,
            suggestion=f"Put the options under a [{CONFIG_TABLE}] header",
        )

    try:
        return BundleConfig.model_validate(table)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigError(
            f"invalid [{CONFIG_TABLE}] table: {fields}",
            path=path,
            suggestion="root_path must be a string, replace_source and replace_comment booleans",
        ) from e
