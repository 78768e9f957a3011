import os
import pytest

from qspline import Point, ParamError
from qspline.config import load_config, dotdict, DEFAULTS
from fixtures import sandbox_fname

this_source_dir = os.path.dirname(os.path.realpath(__file__))
tutorial_cfg = os.path.join(this_source_dir, "..", "..", "tutorials", "01_quadratic_spline", "config.yaml")


def write_config(base_name, text):
    fname = sandbox_fname(base_name, "yaml")
    with open(fname, "w") as f:
        f.write(text)
    return fname


def test_dotdict():
    cfg = dotdict.create({'a': {'b': [1, {'c': 2}]}, 'p': [Point(1, 2)]})
    assert cfg.a.b == [1, {'c': 2}]
    assert isinstance(cfg.p[0], Point)
    cfg.d = 3
    assert cfg['d'] == 3
    with pytest.raises(AttributeError):
        cfg.missing


def test_load_config():
    fname = write_config("config", "points:\n  - [1, 5]\n  - [3, 3]\nscale: [40, 10]\nstyle:\n  curve_color: blue\n")
    cfg = load_config(fname)
    assert cfg.points == [Point(1, 5), Point(3, 3)]
    assert all(isinstance(p, Point) for p in cfg.points)
    assert cfg.scale == (40.0, 10.0)
    assert cfg.style.curve_color == "blue"
    assert cfg.style.point_radius == DEFAULTS['style']['point_radius']
    assert cfg.sample_step == DEFAULTS['sample_step']
    assert cfg.backend == DEFAULTS['backend']
    assert cfg._config_root_dir == os.path.abspath("sandbox")


def test_config_errors():
    with pytest.raises(ParamError):
        load_config(write_config("no_points", "scale: [1, 1]\n"))
    with pytest.raises(ParamError):
        load_config(write_config("bad_point", "points:\n  - [1, 5, 3]\n"))
    with pytest.raises(ParamError):
        load_config(write_config("bad_scale", "points: [[1, 5]]\nscale: 2\n"))
    with pytest.raises(ParamError):
        load_config(write_config("bad_step", "points: [[1, 5]]\nsample_step: 0\n"))
    with pytest.raises(ParamError):
        load_config(write_config("bad_root", "- 1\n- 2\n"))


def test_tutorial_config():
    cfg = load_config(tutorial_cfg)
    assert len(cfg.points) == 4
    assert cfg.scale == (40, 10)
    assert cfg.backend in ('matplotlib', 'plotly')
