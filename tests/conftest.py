import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def passengers():
    """Synthetic passenger list: women and first class survive more often."""
    rng = np.random.default_rng(0)
    n = 300
    sex = rng.choice(["male", "female"], size=n, p=[0.6, 0.4])
    pclass = rng.choice([1, 2, 3], size=n, p=[0.25, 0.2, 0.55])
    age = rng.normal(30, 13, size=n).clip(1, 80).round()
    fare = np.where(pclass == 1, 80.0, np.where(pclass == 2, 20.0, 8.0)) + rng.gamma(2.0, 5.0, size=n)
    logit = 1.2 - 2.5 * (sex == "male") - 0.9 * (pclass - 2) - 0.01 * (age - 30)
    survived = (rng.random(n) < 1 / (1 + np.exp(-logit))).astype(int)
    embarked = rng.choice(["S", "C", "Q"], size=n, p=[0.7, 0.2, 0.1]).astype(object)

    df = pd.DataFrame({
        "PassengerId": np.arange(1, n + 1),
        "Survived": survived,
        "Pclass": pclass,
        "Name": [f"Passenger, Mr. No{i}" for i in range(n)],
        "Sex": sex,
        "Age": age,
        "SibSp": rng.integers(0, 3, size=n),
        "Parch": rng.integers(0, 3, size=n),
        "Ticket": [f"T{1000 + i}" for i in range(n)],
        "Fare": fare.round(2),
        "Cabin": np.where(pclass == 1, "C85", None),
        "Embarked": embarked,
    })
    df.loc[rng.choice(n, size=60, replace=False), "Age"] = np.nan
    df.loc[[3, 7], "Embarked"] = np.nan
    df.loc[11, "Embarked"] = " "
    return df


@pytest.fixture
def train_csv(tmp_path, passengers):
    path = tmp_path / "train.csv"
    passengers.to_csv(path, index=False)
    return path
