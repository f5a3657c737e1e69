from __future__ import annotations

import json
from collections.abc import Callable

import pytest
import requests
from pytest_mock import MockerFixture

from cargo_nav.crates_api import CrateInfo


def make_response(status_code: int = 200, body: object = None, raw: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    if raw is None:
        raw = json.dumps(body if body is not None else {}).encode()
    resp._content = raw
    resp.encoding = "utf-8"
    return resp


def crate_payload(name: str, **links: str | None) -> dict:
    return {"crate": {"name": name, "max_version": "1.0.0", **links}, "versions": []}


@pytest.fixture
def serde_info() -> CrateInfo:
    return CrateInfo(
        name="serde",
        crate_page="https://crates.io/crates/serde",
        homepage="https://serde.rs",
        repository="https://github.com/serde-rs/serde",
    )


@pytest.fixture
def fake_session(mocker: MockerFixture) -> Callable[..., requests.Session]:
    """Build a stand-in Session whose `get` returns (or raises) what it's told."""

    def factory(response: requests.Response | Exception) -> requests.Session:
        session = mocker.Mock(spec=requests.Session)
        if isinstance(response, Exception):
            session.get.side_effect = response
        else:
            session.get.return_value = response
        return session

    return factory
