# cargo_nav/core.py
from __future__ import annotations

from .crates_api import DEFAULT_REGISTRY, CrateInfo, fetch_crate_info, new_session
from .links import LinkKind, resolve_link


def get_crate_info(
    crate_name: str,
    registry: str = DEFAULT_REGISTRY,
    debug: bool = False,
) -> CrateInfo:
    """Fetch the metadata record for `crate_name` from the registry."""
    with new_session() as session:
        return fetch_crate_info(session, crate_name, registry, debug)


def get_crate_link(
    crate_name: str,
    link_kind: str | None = None,
    registry: str = DEFAULT_REGISTRY,
    debug: bool = False,
) -> str:
    """
    Find the URL a user asked for, e.g.:

        get_crate_link("serde") => 'https://serde.rs'
        get_crate_link("serde", "r") => 'https://github.com/serde-rs/serde'
        get_crate_link("serde", "c") => 'https://crates.io/crates/serde'

    The link kind is checked before the registry is contacted, so a bad token
    never costs a network round trip.
    """
    kind = LinkKind.from_token(link_kind, crate_name)
    if debug:
        print(f"[DEBUG] Looking up {kind.label.lower()} link for {crate_name}")

    info = get_crate_info(crate_name, registry, debug)
    return resolve_link(info, kind, debug)
