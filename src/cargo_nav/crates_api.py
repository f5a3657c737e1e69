# cargo_nav/crates_api.py
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

import requests

from . import __version__
from .errors import CrateNotFound, RegistryNetworkError, RegistryParseError

DEFAULT_REGISTRY = "https://crates.io"
REQUEST_TIMEOUT = 10
USER_AGENT = f"cargo-nav/{__version__} (https://github.com/celeo/cargo-nav)"

_LINK_FIELDS = ("homepage", "documentation", "repository")


@dataclass(frozen=True)
class CrateInfo:
    """The links a crate exposes, as reported by the registry."""

    name: str
    crate_page: str
    homepage: str | None = None
    repository: str | None = None
    documentation: str | None = None

    @classmethod
    def from_json(cls, payload: object, registry: str = DEFAULT_REGISTRY) -> CrateInfo:
        """
        Build a CrateInfo from the body of `GET /api/v1/crates/<name>`.

        Only the nested "crate" object is read. Link fields that are null or
        empty strings are stored as None.
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("crate"), dict):
            raise ValueError("missing 'crate' object")
        data = payload["crate"]

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("missing 'name' field")

        links = {}
        for field in _LINK_FIELDS:
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"field '{field}' is not a string")
            links[field] = value or None

        return cls(name=name, crate_page=crate_page_url(name, registry), **links)

    def describe(self) -> str:
        """
        One-line summary of the crate's links, e.g.
        'Crate serde, Homepage: https://serde.rs, Repository: https://github.com/serde-rs/serde'
        """
        parts = [f"Crate {self.name}"]
        for field in _LINK_FIELDS:
            link = getattr(self, field)
            if link:
                parts.append(f"{field.capitalize()}: {link}")
        if len(parts) == 1:
            parts.append("No links provided")
        return ", ".join(parts)


def normalize_registry(registry: str) -> str:
    return registry.strip().rstrip("/")


def crate_api_url(crate_name: str, registry: str = DEFAULT_REGISTRY) -> str:
    # Escaped as a single path segment; '?', '#' and '/' must not change the lookup
    return f"{normalize_registry(registry)}/api/v1/crates/{quote(crate_name, safe='')}"


def crate_page_url(crate_name: str, registry: str = DEFAULT_REGISTRY) -> str:
    return f"{normalize_registry(registry)}/crates/{quote(crate_name, safe='')}"


def new_session() -> requests.Session:
    """A session whose User-Agent identifies this tool to the registry."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def fetch_crate_info(
    session: requests.Session,
    crate_name: str,
    registry: str = DEFAULT_REGISTRY,
    debug: bool = False,
) -> CrateInfo:
    """
    Fetch a crate's metadata from the registry with a single GET request.

    Raises CrateNotFound on a 404, RegistryNetworkError on transport failures
    or other error statuses, and RegistryParseError when the body is not the
    expected JSON document. Nothing is retried.
    """
    url = crate_api_url(crate_name, registry)
    if debug:
        print(f"[DEBUG] Fetching crate JSON at: {url}")
    try:
        r = session.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        if debug:
            print(f"[DEBUG] Request error => {exc}")
        raise RegistryNetworkError(crate_name, str(exc)) from exc

    if r.status_code == 404:
        if debug:
            print(f"[DEBUG] Registry has no crate named {crate_name}")
        raise CrateNotFound(crate_name, normalize_registry(registry))
    if not r.ok:
        if debug:
            print(f"[DEBUG] Got bad status {r.status_code} from {url}")
        raise RegistryNetworkError(
            crate_name,
            f"got bad status {r.status_code} from {url}",
        )

    try:
        payload = r.json()
    except ValueError as exc:
        if debug:
            print(f"[DEBUG] Response body is not JSON => {exc}")
        raise RegistryParseError(crate_name, "response body is not valid JSON") from exc

    try:
        info = CrateInfo.from_json(payload, registry)
    except ValueError as exc:
        if debug:
            print(f"[DEBUG] Unexpected response shape => {exc}")
        raise RegistryParseError(crate_name, str(exc)) from exc

    if debug:
        print(f"[DEBUG] API info: {info!r}")
    return info
