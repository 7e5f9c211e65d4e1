"""Small model classes used as nested objects in the tests."""
import numpy as np
import pandas as pd


class LinearFit:
    """Least-squares line y ~ x that tidies itself (Tidyable)."""

    def __init__(self, x, y, x_name="x", y_name="y"):
        self.x = np.asarray(x, dtype=float)
        self.y = np.asarray(y, dtype=float)
        self.x_name = x_name
        self.y_name = y_name
        self.slope, self.intercept = np.polyfit(self.x, self.y, 1)

    @classmethod
    def from_frame(cls, df, x, y):
        return cls(df[x].to_numpy(), df[y].to_numpy(), x_name=x, y_name=y)

    def predict(self, x):
        return self.intercept + self.slope * np.asarray(x, dtype=float)

    def tidy(self, conf_int=False):
        out = pd.DataFrame({
            "term": ["intercept", self.x_name],
            "estimate": [self.intercept, self.slope],
        })
        if conf_int:
            out["conf_low"] = out["estimate"] - 1.0
            out["conf_high"] = out["estimate"] + 1.0
        return out

    def augment(self, data=None):
        if data is None:
            data = pd.DataFrame({self.x_name: self.x, self.y_name: self.y})
        else:
            data = data.reset_index(drop=True).copy()
        data[".fitted"] = self.predict(data[self.x_name])
        data[".resid"] = data[self.y_name] - data[".fitted"]
        return data

    def glance(self):
        fitted = self.predict(self.x)
        ss_res = float(((self.y - fitted) ** 2).sum())
        ss_tot = float(((self.y - self.y.mean()) ** 2).sum())
        return pd.DataFrame({
            "r_squared": [1.0 - ss_res / ss_tot if ss_tot else 1.0],
            "nobs": [len(self.x)],
        })


class Constant:
    """Model with no tidy methods; tidiers must come from a registry."""

    def __init__(self, value):
        self.value = value


class LabelledConstant(Constant):
    """Subclass used to check registry lookup through the MRO."""

    def __init__(self, value, label):
        super().__init__(value)
        self.label = label
