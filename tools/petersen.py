import logging
import operator
import sys

import networkx as nx
import typer

import serialize
from create import create
from errors import ConstructionError, InvalidArgumentError, PetersenError

"""
Usage: petersen.py [OPTIONS]

Options:
      --n INTEGER           [default: 5]
      --k INTEGER           [default: 2]
      --filename TEXT       [default: petersen.json]
      --fmt TEXT            [default: node-link]
      --verbose / --no-verbose
                            [default: no-verbose]
      --help                Show this message and exit

Example usage:
    python petersen.py --n 5 --k 2

    To write a board for the solver instead, run:
        python petersen.py --n 7 --k 3 --fmt petgraph --filename input.json
        ./target/release/node-kayles -r input.json
"""

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

def _as_int(name: str, value) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer.")
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidArgumentError(f"{name} must be an integer.") from e

def _reserve(size: int) -> list:
    return [0] * size

def petersen_edges(n: int, k: int) -> list:
    """
    Flat edge list of GP(n, k). Outer vertices are 0..n-1 and inner vertex n+i sits
    under outer vertex i. Each i contributes its outer edge, its spoke and its inner
    edge, in that order.
    """
    n = _as_int("n", n)
    k = _as_int("k", k)
    if n < 3:
        raise InvalidArgumentError("n must be at least 3.")
    if not (k > 0 and 2*k < n):
        raise InvalidArgumentError("k must be positive and less than n/2.")
    # the flat list holds 6n entries
    if 6*n > sys.maxsize:
        raise InvalidArgumentError("n is too large.")

    try:
        edges = _reserve(6*n)
        for i in range(n):
            edges[6*i:6*i + 6] = [
                i, (i + 1) % n,
                i, i + n,
                i + n, ((i + k) % n) + n,
            ]
    except MemoryError as e:
        raise ConstructionError("Cannot create graph, out of memory.") from e
    return edges

def generalized_petersen(n: int, k: int) -> nx.Graph:
    """
    The generalized Petersen graph GP(n, k): 2n vertices, 3n edges.
    When gcd(n, k) > 1 the inner vertices form gcd(n, k) separate cycles.

    Raises InvalidArgumentError unless n >= 3 and 0 < k < n/2.
    """
    edges = petersen_edges(n, k)
    n, k = operator.index(n), operator.index(k)
    graph = create(edges, 2*n, directed=False)
    graph.graph.update(name=f"generalized_petersen_graph({n}, {k})", n=n, k=k)
    logger.debug("Built GP(%d, %d) with %d nodes and %d edges", n, k,
                 graph.number_of_nodes(), graph.number_of_edges())
    return graph

@app.command()
def main(n: int = 5, k: int = 2, filename: str = "petersen.json",
         fmt: str = "node-link", verbose: bool = False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        graph = generalized_petersen(n, k)
    except PetersenError as e:
        typer.echo(f"Error ({e.kind}): {e.message}", err=True)
        raise typer.Exit(code=2)

    typer.echo(f"Edges: {graph.number_of_edges()}")
    typer.echo(f"Nodes: {graph.number_of_nodes()}")
    try:
        serialize.encode(graph, filename, fmt=fmt)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

if __name__ == "__main__":
    app()
