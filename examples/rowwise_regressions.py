#!/usr/bin/env python3
"""
Rowwise regressions example for Rowtidy.

Fits one straight line per cylinder count, stores each fit in a rowwise
frame, and pulls per-group tidy/augment/glance tables back out without
looping over the groups by hand.

Run from the rowtidy directory:
    python examples/rowwise_regressions.py
"""
import logging
import sys
import os

# Add parent directory to path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pandas as pd

from common import col
from rowwise import augment, glance, glance_, rowwise_do, tidy
from tidiers import register_tidier


class PolyFit:
    """Degree-1 polynomial fit of y on x (no tidy methods of its own)."""

    def __init__(self, df: pd.DataFrame, x: str, y: str):
        self.x, self.y = x, y
        self.n = len(df)
        self.coef = np.polyfit(df[x], df[y], 1)
        fitted = np.polyval(self.coef, df[x])
        ss_res = float(((df[y] - fitted) ** 2).sum())
        ss_tot = float(((df[y] - df[y].mean()) ** 2).sum())
        self.r_squared = 1.0 - ss_res / ss_tot if ss_tot else 1.0


def tidy_polyfit(fit: PolyFit, **kwargs) -> pd.DataFrame:
    return pd.DataFrame({"term": [fit.x, "intercept"], "estimate": fit.coef})


def augment_polyfit(fit: PolyFit, data: pd.DataFrame = None, **kwargs) -> pd.DataFrame:
    if data is None:
        raise ValueError("augment needs the data the model was fit on")
    out = data[[fit.x, fit.y]].reset_index(drop=True)
    out[".fitted"] = np.polyval(fit.coef, out[fit.x])
    out[".resid"] = out[fit.y] - out[".fitted"]
    return out


def glance_polyfit(fit: PolyFit, **kwargs) -> pd.DataFrame:
    return pd.DataFrame({"r_squared": [fit.r_squared], "nobs": [fit.n]})


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    register_tidier(PolyFit, tidy=tidy_polyfit, augment=augment_polyfit, glance=glance_polyfit)

    cars = pd.DataFrame({
        "cyl": [6, 4, 6, 8, 8, 4, 6, 8, 4, 8],
        "wt": [2.62, 2.32, 3.21, 3.44, 3.57, 3.19, 3.46, 4.07, 2.20, 5.25],
        "mpg": [21.0, 22.8, 21.4, 18.7, 14.3, 24.4, 18.1, 16.4, 32.4, 10.4],
    })

    regressions = rowwise_do(
        cars,
        "cyl",
        mod=lambda d: PolyFit(d, "wt", "mpg"),
        original=lambda d: d,
    )
    print(regressions)

    print("\n=== tidy ===")
    print(tidy(regressions, col.mod))

    print("\n=== augment (with the original rows) ===")
    print(augment(regressions, col.mod, data=col.original))

    print("\n=== glance ===")
    print(glance(regressions, col.mod))

    # name-as-string form gives the same table
    assert glance_(regressions, "mod").equals(glance(regressions, col.mod))


if __name__ == "__main__":
    main()
