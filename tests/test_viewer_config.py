from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PyQt5")

from tri_viewer import config as viewer_config
from tri_viewer.config import (
    ViewerConfig,
    config_path,
    load_viewer_config,
    load_viewer_config_file,
)
from tri_viewer.errors import InvalidConfigurationError


def test_missing_file_yields_defaults(tmp_path: Path):
    config = load_viewer_config_file(tmp_path / "absent.ini")

    assert config == ViewerConfig()
    assert config.scale == 200.0
    assert config.offset == (50.0, 250.0)
    assert config.pick_radius == 10.0
    assert config.grid_spacing == 0.1


def test_partial_file_overrides_only_given_keys(tmp_path: Path):
    ini = tmp_path / "tri_viewer.ini"
    ini.write_text(
        "[canvas]\nscale = 100\noffset_x = 10\n\n[grid]\nenabled = no\n\n[triangle]\nb = 2, 0.5\n",
        encoding="utf-8",
    )

    config = load_viewer_config_file(ini)

    assert config.scale == 100.0
    assert config.offset == (10.0, 250.0)
    assert config.grid_enabled is False
    assert config.triangle == ((0.0, 0.0), (2.0, 0.5), (0.0, 1.0))
    assert config.width == ViewerConfig().width


def test_full_file_sets_every_field(tmp_path: Path):
    ini = tmp_path / "tri_viewer.ini"
    ini.write_text(
        "[canvas]\nwidth = 640\nheight = 480\nscale = 150\noffset_x = 20\noffset_y = 400\n"
        "background = #101010\n\n"
        "[interaction]\npick_radius = 12.5\n\n"
        "[grid]\nenabled = no\nspacing = 0.25\ncolor = rgba(10,20,30,0.4)\n\n"
        "[triangle]\na = 0, 0\nb = 1.5, 0.25\nc = 0.5, 2\n",
        encoding="utf-8",
    )

    assert load_viewer_config_file(ini) == ViewerConfig(
        width=640,
        height=480,
        scale=150.0,
        offset=(20.0, 400.0),
        background="#101010",
        pick_radius=12.5,
        grid_enabled=False,
        grid_spacing=0.25,
        grid_color="rgba(10,20,30,0.4)",
        triangle=((0.0, 0.0), (1.5, 0.25), (0.5, 2.0)),
    )


@pytest.mark.parametrize(
    "body",
    [
        "[canvas]\nscale = 0\n",
        "[canvas]\nscale = wide\n",
        "[grid]\nspacing = -0.1\n",
        "[interaction]\npick_radius = 0\n",
        "[triangle]\na = 1\n",
        "[canvas]\nwidth = -5\n",
        "[canvas]\noffset_x = nan\n",
        "[canvas]\nbackground = bogus\n",
        "[grid]\ncolor = bogus\n",
        "[triangle]\na = nan, 0\n",
        "[triangle]\nc = 0, inf\n",
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str):
    ini = tmp_path / "tri_viewer.ini"
    ini.write_text(body, encoding="utf-8")

    with pytest.raises(InvalidConfigurationError):
        load_viewer_config_file(ini)


def test_unparseable_file_falls_back_to_defaults(tmp_path: Path):
    ini = tmp_path / "tri_viewer.ini"
    ini.write_text("no section header here\n", encoding="utf-8")

    assert load_viewer_config_file(ini) == ViewerConfig()


def test_config_path_next_to_main_script(tmp_path: Path, monkeypatch):
    monkeypatch.delenv(viewer_config.CONFIG_ENV_VAR, raising=False)
    script = tmp_path / "main.py"

    assert config_path(script) == tmp_path / "tri_viewer.ini"


def test_config_path_env_override(tmp_path: Path, monkeypatch):
    override = tmp_path / "elsewhere.ini"
    monkeypatch.setenv(viewer_config.CONFIG_ENV_VAR, str(override))
    override.write_text("[canvas]\nwidth = 123\n", encoding="utf-8")

    assert config_path(tmp_path / "main.py") == override
    assert load_viewer_config(tmp_path / "main.py").width == 123
