from pytest_mock import MockerFixture

from cargo_nav.browser import open_in_browser


def test_open_in_browser_uses_click_launch(mocker: MockerFixture, capsys):
    launch = mocker.patch("click.launch", autospec=True, return_value=0)
    assert open_in_browser("https://serde.rs") == 0
    launch.assert_called_once_with("https://serde.rs")
    assert capsys.readouterr().out == ""


def test_open_in_browser_reports_status_in_debug(mocker: MockerFixture, capsys):
    mocker.patch("click.launch", autospec=True, return_value=3)
    assert open_in_browser("https://serde.rs", debug=True) == 3
    out = capsys.readouterr().out
    assert "[DEBUG] Launching browser for https://serde.rs" in out
    assert "[DEBUG] Browser opener exited with status 3" in out
