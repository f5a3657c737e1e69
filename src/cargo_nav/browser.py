# cargo_nav/browser.py
from __future__ import annotations

import click


def open_in_browser(url: str, debug: bool = False) -> int:
    """Hand `url` to the system's default browser and return the opener's status."""
    if debug:
        print(f"[DEBUG] Launching browser for {url}")
    status = click.launch(url)
    if debug and status != 0:
        print(f"[DEBUG] Browser opener exited with status {status}")
    return status
