"""Utility modules for linecol CLI."""

from linecol.utils.param_type import PathSpecifierParamType
from linecol.utils.path_resolver import (
    PathResolutionError,
    PathResolver,
    ResolutionOutcome,
    resolve_path_argument,
)

__all__ = [
    "PathResolutionError",
    "PathResolver",
    "PathSpecifierParamType",
    "ResolutionOutcome",
    "resolve_path_argument",
]
