from backend.engine.search.solver import Lineage, SearchNode, Solver

__all__ = ["Lineage", "SearchNode", "Solver"]
