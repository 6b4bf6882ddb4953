from .base import ClusteringAlgorithm
from .centroid_index import centroid_index
from .errors import (
    ClusteringError,
    DimensionMismatchError,
    StateError,
    ValidationError,
)
from .fast_kmeans import FastKMeans
from .kmeans import KMeans
from .random_swap import RandomSwap
from .stochastic_relaxation import StochasticRelaxation
from .vector_math import dist_sq, nearest_index

__all__ = [
    "ClusteringAlgorithm",
    "KMeans",
    "FastKMeans",
    "RandomSwap",
    "StochasticRelaxation",
    "centroid_index",
    "dist_sq",
    "nearest_index",
    "ClusteringError",
    "ValidationError",
    "DimensionMismatchError",
    "StateError",
]
