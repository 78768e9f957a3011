"""
Fit the quadratic spline to the points from 'config.yaml' and draw it
together with the linearly densified polyline and the input points.

Usage:
    python plot_spline.py [config.yaml]
"""
import os
import sys
import logging

from qspline import fit, densify, scale_points
from qspline.config import load_config
from qspline.drawing import make_canvas, draw_points

script_dir = os.path.dirname(os.path.realpath(__file__))


def main(cfg_path):
    cfg = load_config(cfg_path)
    points = scale_points(cfg.points, *cfg.scale)

    curve = fit(points, step=cfg.sample_step)
    polyline = densify(points, step=cfg.densify_step)
    logging.info(f"curve: {len(curve)} points, polyline: {len(polyline)} points")

    canvas = make_canvas(cfg.backend)
    style = cfg.style
    draw_points(canvas, polyline, lines=True, line_color=style.polyline_color)
    draw_points(canvas, curve, lines=True, line_color=style.curve_color)
    draw_points(canvas, points, lines=False, markers=True,
                marker_color=style.point_color, radius=style.point_radius)
    fname = os.path.join(cfg._config_root_dir, f"{cfg.output}.{canvas.default_ext}")
    canvas.save(fname)
    logging.info(f"plot saved to: {fname}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    cfg_path = sys.argv[1] if len(sys.argv) > 1 else os.path.join(script_dir, "config.yaml")
    main(cfg_path)
