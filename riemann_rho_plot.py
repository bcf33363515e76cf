#!/usr/bin/env python3
"""
riemann_rho_plot.py

Writes a standalone HTML page that draws Z(t) over [low, high] with D3.js,
marking the located zero (if any) with a red vertical line.
"""

import json
import logging
from string import Template

import numpy as np

import riemann_rho as rr

PLOT_POINTS = 200
PLOT_FILE = "zeta_plot.html"

# Fraction of the value range added above and below the curve
Y_PADDING = 0.1

logger = logging.getLogger("RiemannRho")

HTML_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Riemann Zeta Z(t) Plot</title>
    <script src="https://d3js.org/d3.v7.min.js"></script>
    <style>
        .chart {
            margin: 20px;
        }
        .axis path,
        .axis line {
            stroke: #000;
            shape-rendering: crispEdges;
        }
        .line {
            fill: none;
            stroke: steelblue;
            stroke-width: 1.5px;
        }
    </style>
</head>
<body>
    <div class="chart">
        <svg width="800" height="500"></svg>
    </div>

    <script>
        const data = $data;

        const svg = d3.select("svg");
        const margin = { top: 20, right: 20, bottom: 30, left: 50 };
        const width = +svg.attr("width") - margin.left - margin.right;
        const height = +svg.attr("height") - margin.top - margin.bottom;

        const g = svg.append("g")
            .attr("transform", `translate($${margin.left},$${margin.top})`);

        const x = d3.scaleLinear()
            .domain([$x_min, $x_max])
            .range([0, width]);

        const y = d3.scaleLinear()
            .domain([$y_min, $y_max])
            .range([height, 0]);

        g.append("g")
            .attr("class", "axis axis--x")
            .attr("transform", `translate(0,$${height})`)
            .call(d3.axisBottom(x));

        g.append("g")
            .attr("class", "axis axis--y")
            .call(d3.axisLeft(y));

        const line = d3.line()
            .defined(d => d.z !== null)
            .x(d => x(d.t))
            .y(d => y(d.z));

        g.append("path")
            .datum(data)
            .attr("class", "line")
            .attr("d", line);
$zero_line
    </script>
</body>
</html>
""")

ZERO_LINE_TEMPLATE = Template("""
        g.append("line")
            .attr("x1", x($zero))
            .attr("y1", 0)
            .attr("x2", x($zero))
            .attr("y2", height)
            .attr("stroke", "red")
            .attr("stroke-width", 2);
""")


def sample_z(low, high, terms=rr.DEFAULT_TERMS, num_points=PLOT_POINTS,
             step=rr.DERIVATIVE_STEP):
    """
    Evaluate Z(t) on num_points evenly spaced points of [low, high].
    Returns (ts, zs) as float64 arrays.
    """
    ts = np.linspace(low, high, num_points)
    zs = np.array([rr.z_func(float(t), terms, step) for t in ts], dtype=np.float64)
    return ts, zs


def y_domain(zs):
    """Value range of the finite samples, padded by Y_PADDING on both sides."""
    finite = zs[np.isfinite(zs)]
    if finite.size == 0:
        return -1.0, 1.0
    min_z = float(finite.min())
    max_z = float(finite.max())
    pad = Y_PADDING * (max_z - min_z)
    return min_z - pad, max_z + pad


def render_d3_plot(low, high, zero=None, terms=rr.DEFAULT_TERMS,
                   num_points=PLOT_POINTS, step=rr.DERIVATIVE_STEP):
    """Build the HTML page as a string."""
    ts, zs = sample_z(low, high, terms, num_points, step)
    points = [
        {"t": float(t), "z": float(z) if np.isfinite(z) else None}
        for t, z in zip(ts, zs)
    ]
    y_min, y_max = y_domain(zs)

    zero_line = ""
    if zero is not None:
        zero_line = ZERO_LINE_TEMPLATE.substitute(zero=repr(float(zero)))

    return HTML_TEMPLATE.substitute(
        data=json.dumps(points, indent=2),
        x_min=repr(float(low)),
        x_max=repr(float(high)),
        y_min=repr(y_min),
        y_max=repr(y_max),
        zero_line=zero_line,
    )


def generate_d3_plot(low, high, zero=None, terms=rr.DEFAULT_TERMS,
                     path=PLOT_FILE, num_points=PLOT_POINTS,
                     step=rr.DERIVATIVE_STEP):
    """
    Write the D3.js plot of Z(t) over [low, high] to 'path'.
    Returns the path written.
    """
    html = render_d3_plot(low, high, zero, terms, num_points, step)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info(f"Visualization generated in {path}. Open it in a web browser.")
    return path
