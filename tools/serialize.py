import json
import logging
import secrets

import networkx as nx
from networkx.readwrite import json_graph

logger = logging.getLogger(__name__)

FORMATS = ("node-link", "petgraph")

def _petgraph(graph: nx.Graph):
    nodes = [None]*len(graph.nodes)
    edges = []
    for edge in graph.edges:
        edges.append([edge[0], edge[1], None])

    grid_tracker = []
    for node, _ in enumerate(graph.nodes):
        grid_tracker.append(((node, 0, secrets.randbelow(1<<64)), node))

    return (
        {
            "grid": {
                "nodes": nodes,
                "node_holes": [],
                "edge_property": "undirected",
                "edges": edges
            }
        },
        [grid_tracker]
    )

def encode(graph: nx.Graph, filename: str, fmt: str = "node-link"):
    """
    Serializes a graph with integer node values to a json file and returns what was written.

    "node-link" is the networkx node-link layout and can be read back with decode().
    "petgraph" is the layout the node-kayles solver reads:
        ./target/release/node-kayles -r input.json
    Directed graphs are not supported
    """
    if graph.is_directed():
        raise ValueError("Directed graphs are not supported.")
    if fmt == "node-link":
        data = json_graph.node_link_data(graph, edges="edges")
    elif fmt == "petgraph":
        data = _petgraph(graph)
    else:
        raise ValueError(f"Unknown format {fmt!r}, expected one of {', '.join(FORMATS)}.")

    with open(filename, "w") as f:
        json.dump(data, f)
    logger.debug("Wrote %s graph to %s", fmt, filename)
    return data

def decode(filename: str) -> nx.Graph:
    """
    Reads a graph written by encode(..., fmt="node-link").
    """
    with open(filename) as f:
        data = json.load(f)
    return json_graph.node_link_graph(data, edges="edges")
