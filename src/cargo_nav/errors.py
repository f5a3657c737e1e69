# cargo_nav/errors.py
from __future__ import annotations


class CargoNavError(Exception):
    """Base class for every failure the tool reports to the user."""


class CrateNotFound(CargoNavError):
    def __init__(self, crate_name: str, registry: str) -> None:
        self.crate_name = crate_name
        self.registry = registry
        super().__init__(f"Crate '{crate_name}' was not found on {registry}")


class RegistryNetworkError(CargoNavError):
    def __init__(self, crate_name: str, reason: str) -> None:
        self.crate_name = crate_name
        self.reason = reason
        super().__init__(
            f"Network error while fetching crate '{crate_name}': {reason}",
        )


class RegistryParseError(CargoNavError):
    def __init__(self, crate_name: str, reason: str) -> None:
        self.crate_name = crate_name
        self.reason = reason
        super().__init__(
            f"Could not parse registry response for crate '{crate_name}': {reason}",
        )


class UnknownLinkKind(CargoNavError):
    def __init__(
        self,
        token: str,
        accepted: tuple[str, ...] = (),
        crate_name: str | None = None,
    ) -> None:
        self.token = token
        self.accepted = accepted
        self.crate_name = crate_name
        message = f"Unknown link kind '{token}'"
        if crate_name:
            message += f" for crate '{crate_name}'"
        if accepted:
            message += f" (expected one of: {', '.join(accepted)})"
        super().__init__(message)


class LinkNotAvailable(CargoNavError):
    def __init__(self, kind, crate_name: str) -> None:
        self.kind = kind
        self.crate_name = crate_name
        super().__init__(
            f"Crate '{crate_name}' does not provide a {kind.label.lower()} link",
        )
