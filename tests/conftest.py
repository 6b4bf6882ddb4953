"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest

from clustering.data.dataset import Dataset
from clustering.data.synthetic import make_blob_dataset


@pytest.fixture
def rng():
    """Генератор с фиксированным seed."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_2d_dataset():
    """Фикстура с очень простым 2D датасетом для базовых тестов."""
    X = np.array([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])
    initial_centroids = np.array([
        [0.5, 0.5],
        [11.0, 11.0],
    ])
    return X, initial_centroids


@pytest.fixture
def blobs():
    """Синтетические гауссовы кластеры (2D, 8 кластеров) с известными центрами."""
    return make_blob_dataset(
        n_points=400, dimension=2, n_clusters=8, cluster_std=1.0, seed=7
    )


@pytest.fixture
def blob_dataset(blobs, rng):
    """Датасет по blobs с загруженными эталонными центрами."""
    dataset = Dataset(blobs.data, 8, rng=rng)
    dataset.load_real_centroids(blobs.centers)
    return dataset


@pytest.fixture
def separated_dataset(rng):
    """
    Четыре компактных и далеко разнесённых кластера: глобальный оптимум
    очевиден, эталонные центры — углы квадрата.
    """
    corners = np.array([
        [0.0, 0.0],
        [100.0, 0.0],
        [0.0, 100.0],
        [100.0, 100.0],
    ])
    points = np.vstack([c + rng.normal(0.0, 0.5, size=(25, 2)) for c in corners])
    dataset = Dataset(points, 4, rng=np.random.default_rng(3))
    dataset.load_real_centroids(corners)
    return dataset
