from npuzzle.engine.search.frontier import Frontier
from npuzzle.engine.search.node import SearchNode
from npuzzle.engine.search.solver import SearchResult, Solver

__all__ = ["Frontier", "SearchNode", "SearchResult", "Solver"]
