from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from .errors import ConfigError


MODELS: Tuple[str, ...] = ("unit", "cumulative_average", "both")
LEVELS: Tuple[str, ...] = ("unit", "cumulative")

DEFAULT_MODEL = "unit"
DEFAULT_LEVEL = "unit"

# labels carried in the `model` column when both curves share a frame
MODEL_LABELS: Dict[str, str] = {
    "unit": "unit model",
    "cumulative_average": "ca model",
}


def check_choice(value: str, choices: Tuple[str, ...], name: str) -> str:
    if value not in choices:
        raise ConfigError(f"Undefined specification for the {name} argument: {value!r} (expected one of {list(choices)})")
    return value


def check_model(model: str) -> str:
    return check_choice(model, MODELS, "model")


def check_level(level: str) -> str:
    return check_choice(level, LEVELS, "level")


@dataclass(frozen=True)
class PlotStyle:
    """Rendering defaults for the matplotlib sink.

    Kept separate from the numeric layer: nothing in the models reads it.
    """

    width: float = 8.0
    height: float = 4.5
    line_width: float = 1.5
    # below this many units the delta plot also marks every point
    point_threshold: int = 100
    point_size: float = 4.0
    colors: Tuple[str, str] = ("#1f77b4", "#d62728")
    label_offset: Tuple[float, float] = (4.0, 4.0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("width and height must be positive")
        if self.line_width <= 0:
            raise ConfigError("line_width must be positive")
        if self.point_threshold < 0:
            raise ConfigError("point_threshold must be non-negative")
        if len(self.colors) != 2:
            raise ConfigError("colors must hold exactly two entries")


DEFAULT_STYLE = PlotStyle()
