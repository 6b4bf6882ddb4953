from .dataset import Dataset
from .io import load_dataset, load_real_centroids, read_matrix, write_matrix
from .synthetic import GeneratedDataset, make_blob_dataset, save_generated
from .validation import validate_dataset

__all__ = [
    "Dataset",
    "validate_dataset",
    "read_matrix",
    "write_matrix",
    "load_dataset",
    "load_real_centroids",
    "GeneratedDataset",
    "make_blob_dataset",
    "save_generated",
]
