import numpy as np
import pandas as pd
import statsmodels.api as sm

from sklearn.linear_model import LogisticRegression
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from titanic_eda.config import FEATURES, RANDOM_STATE, TARGET, TEST_SIZE


def split(df: pd.DataFrame, test_size: float = TEST_SIZE,
          random_state: int = RANDOM_STATE, stratify: bool = True):
    """Reproducible train/validation split of an encoded passenger frame.

    Returns ``(X_train, X_valid, y_train, y_valid)``. With ``stratify`` the
    survival ratio is kept the same on both sides.
    """
    X = df[FEATURES]
    y = df[TARGET].astype(int)
    return train_test_split(
        X, y,
        test_size=test_size,
        random_state=random_state,
        stratify=y if stratify else None,
    )


def build_pipeline():
    # no penalty: a plain binomial GLM on standardised inputs
    clf = LogisticRegression(C=np.inf, max_iter=1000)
    pipe = Pipeline([
        ("scaler", StandardScaler()),
        ("clf", clf),
    ])
    return pipe


def fit(X_train, y_train) -> Pipeline:
    pipe = build_pipeline()
    pipe.fit(X_train, y_train)
    return pipe


def glm_summary(X: pd.DataFrame, y: pd.Series) -> pd.DataFrame:
    """Fit a binomial GLM with an intercept and tabulate its coefficients."""
    design = sm.add_constant(X.astype(float), has_constant="add")
    result = sm.GLM(y.astype(float), design, family=sm.families.Binomial()).fit()
    table = pd.DataFrame({
        "coef": result.params,
        "std_err": result.bse,
        "z": result.tvalues,
        "p_value": result.pvalues,
        "odds_ratio": np.exp(result.params),
    })
    table.index = ["Intercept" if name == "const" else name for name in table.index]
    table.index.name = "term"
    return table
