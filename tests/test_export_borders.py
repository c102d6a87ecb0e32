import json

import httpx
import pytest

from tools.export_borders import main, validate_borders

GOOD = {
    "bottom": [
        {
            "monitor": "A",
            "side": "bottom",
            "wall_class": "bottom",
            "geometry": {"width": 1920, "height": 16, "x": 0, "y": 1064},
        }
    ],
    "right": [],
    "top": [],
    "left": [],
}


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_writes_borders_to_file(tmp_path, capsys) -> None:
    out = tmp_path / "nested" / "borders.json"
    client = _client(lambda request: httpx.Response(200, json=GOOD))

    rc = main(["--url", "http://wall.test", "--out", str(out)], client=client)

    assert rc == 0
    assert json.loads(out.read_text(encoding="utf-8")) == GOOD
    assert "bottom=1" in capsys.readouterr().out


def test_prints_to_stdout_without_out(capsys) -> None:
    client = _client(lambda request: httpx.Response(200, json=GOOD))
    assert main(["--url", "http://wall.test"], client=client) == 0
    assert json.loads(capsys.readouterr().out) == GOOD


def test_server_error_exits_2() -> None:
    client = _client(lambda request: httpx.Response(500))
    assert main(["--url", "http://wall.test"], client=client) == 2


def test_non_json_exits_2() -> None:
    client = _client(lambda request: httpx.Response(200, text="not json"))
    assert main(["--url", "http://wall.test"], client=client) == 2


def test_bad_shape_exits_3(tmp_path) -> None:
    out = tmp_path / "borders.json"
    client = _client(lambda request: httpx.Response(200, json={"bottom": "nope"}))

    assert main(["--url", "http://wall.test", "--out", str(out)], client=client) == 3
    assert not out.exists()


def test_validate_requires_monitor_and_geometry() -> None:
    bad = dict(GOOD, left=[{"monitor": "A"}])
    with pytest.raises(ValueError, match="left"):
        validate_borders(bad)
