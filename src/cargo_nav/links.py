# cargo_nav/links.py
from __future__ import annotations

from enum import Enum

from .crates_api import CrateInfo
from .errors import LinkNotAvailable, UnknownLinkKind

__all__ = ["LinkKind", "resolve_link"]


class LinkKind(Enum):
    """The kinds of link a crate can be navigated to."""

    HOMEPAGE = "Homepage", ("h", "homepage")
    REPOSITORY = "Repository", ("r", "repository")
    DOCUMENTATION = "Documentation", ("d", "documentation")
    CRATE_PAGE = "Crate page", ("c", "crate")

    @property
    def label(self) -> str:
        """Human-readable name of the link kind."""
        return self.value[0]

    @property
    def tokens(self) -> tuple[str, ...]:
        """Command-line spellings accepted for this kind, in lowercase."""
        return self.value[1]

    def __repr__(self) -> str:
        return f"LinkKind.{self.name}"

    @classmethod
    def from_token(cls, token: str | None, crate_name: str | None = None) -> LinkKind:
        """
        Map a command-line token to a link kind.

        Matching is exact and case-insensitive; no token means HOMEPAGE.
        Anything outside the table raises UnknownLinkKind, naming `crate_name`
        when given.
        """
        if token is None:
            return cls.HOMEPAGE
        lowered = token.lower()
        for kind in cls:
            if lowered in kind.tokens:
                return kind
        raise UnknownLinkKind(token, accepted_tokens(), crate_name)


def accepted_tokens() -> tuple[str, ...]:
    return tuple(token for kind in LinkKind for token in kind.tokens)


def resolve_link(
    info: CrateInfo,
    kind: LinkKind | str | None = None,
    debug: bool = False,
) -> str:
    """
    Pick the URL of the requested kind out of a crate's metadata.

    The crate page is always available. Homepage, repository and documentation
    links come from the crate's author; when one is missing LinkNotAvailable is
    raised rather than substituting another link.
    """
    if not isinstance(kind, LinkKind):
        kind = LinkKind.from_token(kind, info.name)

    if kind is LinkKind.CRATE_PAGE:
        url = info.crate_page
    else:
        url = getattr(info, kind.name.lower())
        if not url:
            if debug:
                print(f"[DEBUG] {info.name} has no {kind.label.lower()} link")
            raise LinkNotAvailable(kind, info.name)

    if debug:
        print(f"[DEBUG] Resolved {kind.label.lower()} link => {url}")
    return url
