"""
Meta Module - Black Box Interface

Purpose: Read module metadata from the SuiteCRM V8 API
Interface: fetch_module_names(), fetch_vardefs(), fetch_vardefs_by_module()
Hidden: Endpoint layout, response shapes, per-module error capture
"""

from .modules import ModuleListResult, fetch_module_names
from .vardefs import (
    VARDEFS_PATH_SUFFIX,
    VardefResult,
    fetch_vardefs,
    fetch_vardefs_by_module,
)

__all__ = [
    "ModuleListResult",
    "fetch_module_names",
    "VARDEFS_PATH_SUFFIX",
    "VardefResult",
    "fetch_vardefs",
    "fetch_vardefs_by_module",
]
