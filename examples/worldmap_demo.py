#!/usr/bin/env python3
"""
Generate a world map graph and draw it.

Points are drawn as white markers and connections as gray lines on a
dark canvas, the same look as the browser map. Settings come from the
WORLDMAP_* environment variables.

Usage:
    python examples/worldmap_demo.py [seed] [output.png]
"""

import sys

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from py_worldmap.config import settings, configure_logging
from py_worldmap.core import MapConfig, generate_world_graph, generate_or_reuse_world_graph


def draw_graph(graph, output_path):
    """Render points and connections to an image file."""
    size = graph.config.canvas_size
    fig, ax = plt.subplots(figsize=(8, 8))
    fig.patch.set_facecolor("#282c34")
    ax.set_facecolor("#282c34")

    segments = [[(c.x1, c.y1), (c.x2, c.y2)] for c in graph.connections]
    ax.add_collection(LineCollection(segments, colors="gray", linewidths=1))

    if len(graph.points):
        ax.scatter(graph.points[:, 0], graph.points[:, 1],
                   s=graph.config.point_radius ** 2, c="white", zorder=2)

    # Screen coordinates: y grows downwards
    ax.set_xlim(0, size)
    ax.set_ylim(size, 0)
    ax.set_aspect("equal")
    ax.set_axis_off()

    fig.savefig(output_path, dpi=100, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)


def main():
    configure_logging(settings.log_level, settings.log_format)

    seed = sys.argv[1] if len(sys.argv) > 1 else settings.seed
    output_path = sys.argv[2] if len(sys.argv) > 2 else "worldmap.png"

    config = MapConfig.from_settings(settings)

    print("=== World Map Graph Demo ===\n")
    graph = generate_world_graph(config, seed)
    print(f"Seed: {graph.seed}")
    print(f"Points: {len(graph.points)}")
    print(f"Spanning tree connections: {len(graph.tree_connections)}")
    print(f"Proximity connections: {len(graph.proximity_connections)}")
    print(f"Total connections: {len(graph.connections)}")

    # Same config and seed - the graph is reused
    again = generate_or_reuse_world_graph(graph, config, graph.seed)
    print(f"Graph reused for same seed: {again is graph}")

    draw_graph(graph, output_path)
    print(f"\nSaved to {output_path}")


if __name__ == "__main__":
    main()
