from .component import ComponentFeatures, simple_projection
from .degree import Degree, average, degree_distribution, maximum, minimum, top_degrees
from .oracles import (
    DEFAULT_BACKEND,
    ChromaticHeuristic,
    ConnectivityOracle,
    CycleDetector,
    NetworkXBackend,
    ShortestPathOracle,
)
from .pruning import dfs_leaves, finite_diameter, is_caterpillar_shape, is_path, prune_leaves

__all__ = [
    # Features
    "ComponentFeatures",
    "simple_projection",
    # Degrees
    "Degree",
    "average",
    "degree_distribution",
    "maximum",
    "minimum",
    "top_degrees",
    # Backends
    "DEFAULT_BACKEND",
    "ChromaticHeuristic",
    "ConnectivityOracle",
    "CycleDetector",
    "NetworkXBackend",
    "ShortestPathOracle",
    # Pruning
    "dfs_leaves",
    "finite_diameter",
    "is_caterpillar_shape",
    "is_path",
    "prune_leaves",
]
