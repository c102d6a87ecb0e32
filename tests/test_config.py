import json

import pytest

from config.config import config_from_dict, load_config


def test_empty_object_uses_defaults() -> None:
    cfg = config_from_dict({})
    assert cfg.server_enabled is True
    assert (cfg.server_host, cfg.server_port) == ("127.0.0.1", 8736)
    assert cfg.scale == pytest.approx(0.1)
    assert cfg.border_px == 16
    assert cfg.snap_ratio == pytest.approx(0.05)
    assert (cfg.canvas_width, cfg.canvas_height) == (5760, 2160)
    assert cfg.monitors == ()
    assert (cfg.default_name, cfg.default_width, cfg.default_height) == ("name", 1366, 768)


def test_seed_monitors_are_parsed() -> None:
    cfg = config_from_dict(
        {
            "wall": {
                "monitors": [
                    {"name": "left", "width": 1920, "height": 1080},
                    {"name": "right", "width": 1920, "height": 1080, "x": 1920, "vertical_letterbox": 240},
                ]
            }
        }
    )
    assert [m.name for m in cfg.monitors] == ["left", "right"]
    assert cfg.monitors[1].x_offset == 1920
    assert cfg.monitors[1].vertical_letterbox == 240


@pytest.mark.parametrize(
    "raw",
    [
        {"wall": {"scale": 0}},
        {"wall": {"scale": 1.5}},
        {"wall": {"snap_ratio": 0.5}},
        {"wall": {"border_px": 0}},
        {"wall": {"canvas": {"width": -1}}},
        {"server": {"port": 70000}},
        {"server": {"enabled": "yes"}},
        {"wall": {"scale": True}},
        {"wall": {"monitors": {"name": "a"}}},
        {"wall": {"monitors": [{"name": "a", "width": 0, "height": 10}]}},
        {"wall": {"monitors": [{"name": "a", "width": 10, "height": 10, "x": -5}]}},
        {"wall": {"monitors": [{"name": "", "width": 10, "height": 10}]}},
        {"ui": {"default_width": 0}},
        {"server": []},
    ],
)
def test_invalid_values_are_rejected(raw) -> None:
    with pytest.raises(ValueError):
        config_from_dict(raw)


def test_duplicate_seed_names_are_rejected() -> None:
    with pytest.raises(ValueError, match="unique"):
        config_from_dict(
            {
                "wall": {
                    "monitors": [
                        {"name": "a", "width": 10, "height": 10},
                        {"name": "a", "width": 20, "height": 20},
                    ]
                }
            }
        )


def test_load_config_reads_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"server": {"enabled": False, "port": 9000}, "wall": {"scale": 0.25}}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg.server_enabled is False
    assert cfg.server_port == 9000
    assert cfg.scale == pytest.approx(0.25)


def test_load_config_missing_file(tmp_path) -> None:
    with pytest.raises(OSError):
        load_config(str(tmp_path / "missing.json"))
