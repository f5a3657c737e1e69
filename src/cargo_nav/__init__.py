__version__ = "1.3.0"

from .core import get_crate_info, get_crate_link
from .crates_api import CrateInfo
from .errors import (
    CargoNavError,
    CrateNotFound,
    LinkNotAvailable,
    RegistryNetworkError,
    RegistryParseError,
    UnknownLinkKind,
)
from .links import LinkKind, resolve_link

__all__ = [
    "CargoNavError",
    "CrateInfo",
    "CrateNotFound",
    "LinkKind",
    "LinkNotAvailable",
    "RegistryNetworkError",
    "RegistryParseError",
    "UnknownLinkKind",
    "get_crate_info",
    "get_crate_link",
    "resolve_link",
]
