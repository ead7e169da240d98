"""Web-based word graph visualization using pyvis."""

import logging
from pathlib import Path

from pyvis.network import Network

from .builder import WordGraph

log = logging.getLogger(__name__)

NODE_COLOR = "#FCE38A"
DANGLING_COLOR = "#FF6B6B"
EDGE_COLOR = "#95E1D3"

MIN_NODE_SIZE = 10
MAX_NODE_SIZE = 40
MAX_EDGE_WIDTH = 8


def create_web_visualization(
    graph: WordGraph,
    output_path: Path = Path("output/graph.html"),
    height: str = "900px",
    width: str = "100%",
    max_nodes: int | None = None,
) -> Path:
    """Create an interactive web visualization of the word graph.

    Args:
        graph: WordGraph instance
        output_path: Where to save the HTML file
        height: Height of the visualization
        width: Width of the visualization
        max_nodes: Limit number of nodes (for large graphs)

    Returns:
        Path to the generated HTML file
    """
    net = Network(
        height=height,
        width=width,
        bgcolor="#1a1a2e",
        font_color="white",
        directed=True,
        cdn_resources="remote",
    )

    net.set_options("""
    {
        "physics": {
            "forceAtlas2Based": {
                "gravitationalConstant": -80,
                "centralGravity": 0.01,
                "springLength": 150,
                "springConstant": 0.02
            },
            "solver": "forceAtlas2Based",
            "stabilization": {
                "iterations": 100
            }
        },
        "edges": {
            "arrows": {
                "to": {"enabled": true}
            },
            "smooth": {
                "type": "continuous"
            }
        },
        "interaction": {
            "hover": true,
            "navigationButtons": true,
            "keyboard": true
        }
    }
    """)

    nx_graph = graph.graph
    words = graph.nodes()
    if max_nodes and len(words) > max_nodes:
        # Keep the most connected words
        words = sorted(words, key=lambda w: -nx_graph.degree(w, weight="weight"))[
            :max_nodes
        ]
    kept = set(words)

    max_in = max(
        (nx_graph.in_degree(w, weight="weight") for w in words), default=0
    ) or 1
    max_weight = max((weight for _, _, weight in graph.edges()), default=0) or 1

    for word in words:
        in_weight = nx_graph.in_degree(word, weight="weight")
        out_weight = graph.out_weight(word)
        size = MIN_NODE_SIZE + (MAX_NODE_SIZE - MIN_NODE_SIZE) * in_weight / max_in
        net.add_node(
            word,
            label=word,
            title=f"{word}<br>in: {in_weight}<br>out: {out_weight}",
            color=NODE_COLOR if out_weight else DANGLING_COLOR,
            size=size,
        )

    for source, target, weight in graph.edges():
        if source not in kept or target not in kept:
            continue
        net.add_edge(
            source,
            target,
            title=str(weight),
            label=str(weight),
            color=EDGE_COLOR,
            width=1 + (MAX_EDGE_WIDTH - 1) * weight / max_weight,
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    net.save_graph(str(output_path))
    log.info(f"Wrote visualization of {len(kept)} words to {output_path}")

    return output_path
