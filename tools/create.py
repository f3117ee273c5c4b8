import networkx as nx
from errors import ConstructionError

def pairs(edges):
    """
    Walks a flat edge list two entries at a time: [0, 1, 1, 2] -> (0, 1), (1, 2).
    """
    return zip(edges[0::2], edges[1::2])

def create(edges, vertex_count: int, directed: bool = False) -> nx.Graph:
    """
    Builds a graph with vertices 0..vertex_count-1 from a flat edge list.
    Vertices without edges are kept.
    """
    if len(edges) % 2:
        raise ConstructionError("Edge list must have an even number of entries.")
    if vertex_count < 0:
        raise ConstructionError("Number of vertices must not be negative.")

    for u, v in pairs(edges):
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ConstructionError(f"Invalid vertex id in edge ({u}, {v}).")

    try:
        graph = nx.DiGraph() if directed else nx.Graph()
        graph.add_nodes_from(range(vertex_count))
        graph.add_edges_from(pairs(edges))
    except MemoryError as e:
        raise ConstructionError("Cannot create graph, out of memory.") from e
    return graph
