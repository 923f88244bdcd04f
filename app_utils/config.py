# app_utils/config.py
import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path

from masking_utils.node_ops import GeneratorType

logger = logging.getLogger(__name__)

ROOT_PATH = Path.cwd()
OUTPUT_PATH = ROOT_PATH / "output"

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    pass


@dataclass
class CrunchConfig:
    output_dir: Path = field(default_factory=lambda: OUTPUT_PATH)
    output_prefix: str = "node"
    grid_rows: int = 2
    grid_cols: int = 2
    generator: GeneratorType = GeneratorType.SQUARE
    log_level: str = "INFO"

    def __post_init__(self):
        if self.grid_rows < 1 or self.grid_cols < 1:
            raise ConfigError(f"grid must be at least 1x1, got {self.grid_rows}x{self.grid_cols}")
        if not self.output_prefix:
            raise ConfigError("output_prefix must not be empty")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"unknown log_level {self.log_level!r}")
        self.log_level = self.log_level.upper()


# ======================================================
# Loading
# ======================================================
def _coerce(name, value):
    """Turn one raw JSON value into the field's declared type."""
    if name == "output_dir":
        if not isinstance(value, str):
            raise ConfigError(f"{name} must be a string path")
        return Path(value)

    if name == "generator":
        try:
            return GeneratorType(value)
        except ValueError:
            opts = [g.value for g in GeneratorType]
            raise ConfigError(f"{name} must be one of {opts}, got {value!r}") from None

    if name in ("grid_rows", "grid_cols"):
        # bool is an int subclass, reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"{name} must be an integer")
        return value

    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string")
    return value


def config_from_dict(raw: dict) -> CrunchConfig:
    known = {f.name for f in fields(CrunchConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    return CrunchConfig(**{k: _coerce(k, v) for k, v in raw.items()})


def load_config(path=None) -> CrunchConfig:
    if path is None:
        return CrunchConfig()

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path.name} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path.name} must hold a JSON object")

    cfg = config_from_dict(raw)
    logger.info(f"Loaded config from {path}")
    return cfg
