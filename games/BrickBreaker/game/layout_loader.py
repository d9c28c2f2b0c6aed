"""Layout loader for BrickBreaker.

Loads brick grid geometry from YAML. A layout is always a full
rows x cols grid; the file only changes its size, spacing, position
and row colors.

Example YAML:
    name: Classic
    rows: 20
    cols: 30
    brick_width: 30
    brick_height: 20
    gap: 5
    offset_x: 35
    offset_y: 50
    row_colors:
      - '#FF6B6B'
      - '#4ECDC4'
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from arcadekit.logging import get_logger

from games.BrickBreaker.config import BrickLayout

log = get_logger('layout_loader')

LAYOUTS_DIR = Path(__file__).parent.parent / 'layouts'


class LayoutError(ValueError):
    """Raised when a layout file cannot be turned into a BrickLayout."""


def _positive_int(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise LayoutError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def _number(data: Dict[str, Any], key: str, default: float, positive: bool = False) -> float:
    value = data.get(key, default)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise LayoutError(f"'{key}' must be a number, got {value!r}")
    if positive and value <= 0:
        raise LayoutError(f"'{key}' must be positive, got {value!r}")
    return float(value)


def parse_layout(data: Dict[str, Any]) -> BrickLayout:
    """Parse YAML data into a BrickLayout.

    Missing keys fall back to the configured defaults.

    Args:
        data: Raw YAML data dict

    Returns:
        Parsed BrickLayout

    Raises:
        LayoutError: If a value has the wrong type or range
    """
    if not isinstance(data, dict):
        raise LayoutError(f"Layout must be a mapping, got {type(data).__name__}")

    defaults = BrickLayout()

    row_colors = data.get('row_colors', list(defaults.row_colors))
    if not isinstance(row_colors, list) or not row_colors:
        raise LayoutError("'row_colors' must be a non-empty list")
    if not all(isinstance(color, str) for color in row_colors):
        raise LayoutError("'row_colors' entries must be strings")

    return BrickLayout(
        rows=_positive_int(data, 'rows', defaults.rows),
        cols=_positive_int(data, 'cols', defaults.cols),
        brick_width=_number(data, 'brick_width', defaults.brick_width, positive=True),
        brick_height=_number(data, 'brick_height', defaults.brick_height, positive=True),
        gap=_number(data, 'gap', defaults.gap),
        offset_x=_number(data, 'offset_x', defaults.offset_x),
        offset_y=_number(data, 'offset_y', defaults.offset_y),
        row_colors=tuple(row_colors),
    )


def resolve_layout_path(name_or_path: Union[str, Path]) -> Path:
    """Find a layout file by path or by name in the layouts directory.

    Args:
        name_or_path: 'classic', 'classic.yaml' or a path to a YAML file

    Returns:
        Path to the layout file

    Raises:
        LayoutError: If no such layout exists
    """
    path = Path(name_or_path)
    if path.is_file():
        return path

    for candidate in (LAYOUTS_DIR / path.name, LAYOUTS_DIR / f"{path.name}.yaml"):
        if candidate.is_file():
            return candidate

    raise LayoutError(f"Layout not found: {name_or_path}")


def load_layout(name_or_path: Union[str, Path]) -> BrickLayout:
    """Load a layout from YAML.

    Args:
        name_or_path: Layout name or file path

    Returns:
        Parsed BrickLayout

    Raises:
        LayoutError: If the file is missing, unreadable or invalid
    """
    path = resolve_layout_path(name_or_path)
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LayoutError(f"Invalid YAML in {path}: {e}") from e

    layout = parse_layout(data or {})
    log.info("Loaded layout %s (%dx%d)", path.name, layout.rows, layout.cols)
    return layout
