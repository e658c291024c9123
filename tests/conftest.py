import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from plotcmap.defaults import cfg


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def palette4():
    return [[1, 0, 0], [0, 1, 0], [0, 0, 1], [1, 1, 0]]


@pytest.fixture
def xy4():
    return [0, 1, 2, 3], [0, 1, 0, 1]


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    return ax


@pytest.fixture
def ax3d():
    fig = plt.figure()
    return fig.add_subplot(1, 1, 1, projection="3d")


@pytest.fixture
def default_view():
    return cfg["view"]["azim"], cfg["view"]["elev"]


@pytest.fixture
def as_rgb():
    def wrapper(color):
        return tuple(np.asarray(matplotlib.colors.to_rgb(color)))
    return wrapper
