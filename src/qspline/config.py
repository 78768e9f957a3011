"""
YAML configuration of curve plots.

Example:
    points:
      - [1, 5]
      - [3, 3]
    scale: [40, 10]
    sample_step: 1.0
    backend: plotly
    style:
      curve_color: red

Only `points` is required, other keys take values from `DEFAULTS`.
"""
from typing import *

import os
import yaml

from qspline.exceptions import ParamError
from qspline.geometry import make_points


DEFAULTS = {
    'scale': [1.0, 1.0],
    'sample_step': 1.0,
    'densify_step': 0.1,
    'backend': 'matplotlib',
    'output': 'quadratic_spline',
    'style': {
        'curve_color': 'red',
        'polyline_color': 'lightgray',
        'point_color': 'green',
        'point_radius': 4,
    },
}


class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg: Any):
        """
        Recursively replace all dicts by the dotdict, other values are kept.
        """
        if isinstance(cfg, dict):
            return cls((k, cls.create(v)) for k, v in cfg.items())
        return cfg


def _positive(cfg, key):
    try:
        value = float(cfg[key])
    except (TypeError, ValueError):
        raise ParamError(f"Config key '{key}' must be a number, got: {cfg[key]!r}")
    if not value > 0:
        raise ParamError(f"Config key '{key}' must be positive, got: {value}")
    return value


def load_config(path) -> dotdict:
    """
    Load plot configuration from a YAML file, fill defaults and check values.
    - points: converted to the list of Point
    - scale: pair of floats (sx, sy)
    - sample_step, densify_step: positive floats
    The directory of the file is stored under the key '_config_root_dir'.
    """
    with open(path) as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ParamError(f"Config {path} must be a mapping, got: {type(cfg)}")
    if 'points' not in cfg:
        raise ParamError(f"Missing key 'points' in config: {path}")

    style = {**DEFAULTS['style'], **(cfg.get('style') or {})}
    cfg = {**DEFAULTS, **cfg, 'style': style}
    cfg['points'] = make_points(cfg['points'])
    try:
        sx, sy = cfg['scale']
        cfg['scale'] = (float(sx), float(sy))
    except (TypeError, ValueError):
        raise ParamError(f"Config key 'scale' must be a pair of numbers, got: {cfg['scale']!r}")
    cfg['sample_step'] = _positive(cfg, 'sample_step')
    cfg['densify_step'] = _positive(cfg, 'densify_step')
    cfg['_config_root_dir'] = os.path.abspath(os.path.dirname(path))
    return dotdict.create(cfg)
