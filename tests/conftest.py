"""Pytest configuration and fixtures for rowtidy tests"""
import pytest
import sys
from pathlib import Path

import pandas as pd

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from common import object_column
from rowwise import rowwise_do
from toy_models import LinearFit, Constant


@pytest.fixture
def cars():
    """Tiny mtcars-like table; mpg is exactly linear in wt within each cyl"""
    return pd.DataFrame({
        "cyl": [6, 6, 6, 4, 4, 4, 8, 8, 8, 8],
        "wt": [2.0, 3.0, 4.0, 1.0, 2.0, 3.0, 3.0, 4.0, 5.0, 6.0],
        "hp": [110, 110, 105, 93, 62, 95, 175, 245, 180, 205],
        "mpg": [21.0, 19.0, 17.0, 30.0, 28.0, 26.0, 19.0, 16.0, 13.0, 10.0],
    })


@pytest.fixture
def regressions(cars):
    """One LinearFit per cyl, plus the sub-frame it was fit on"""
    return rowwise_do(
        cars,
        "cyl",
        mod=lambda d: LinearFit.from_frame(d, "wt", "mpg"),
        original=lambda d: d,
    )


@pytest.fixture
def constants():
    """Rowwise frame of Constant models keyed by two scalar columns"""
    return pd.DataFrame({
        "region": ["north", "south", "east"],
        "year": [2020, 2021, 2022],
        "mod": object_column([Constant(1.5), Constant(2.5), Constant(3.5)]),
    })


@pytest.fixture
def estimate():
    """Tidier returning one row per Constant"""
    def _estimate(model, **kwargs):
        return pd.DataFrame({"term": ["value"], "estimate": [model.value]})
    return _estimate
