"""Lens styling: ordered rule lists resolved per node."""

from .engine import matches_target, resolve_style
from .models import (
    Device,
    LensDocument,
    LensGlobals,
    LensRule,
    LensTarget,
    NodeState,
    ResponsiveOverride,
    StyleProps,
    Typography,
)
from .registry import LensLoadError, LensRegistry, css_variables, lens_slug, load_lens_file

__all__ = [
    "Device",
    "LensDocument",
    "LensGlobals",
    "LensLoadError",
    "LensRegistry",
    "LensRule",
    "LensTarget",
    "NodeState",
    "ResponsiveOverride",
    "StyleProps",
    "Typography",
    "css_variables",
    "lens_slug",
    "load_lens_file",
    "matches_target",
    "resolve_style",
]
