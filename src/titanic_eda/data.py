from pathlib import Path

import numpy as np
import pandas as pd

from titanic_eda.config import (
    AGE_FILL,
    COLUMNS,
    DATA_URL,
    EMBARKED_CODES,
    EMBARKED_FILL,
    SEX_CODES,
    TARGET,
    TRAIN_CSV,
)


def load_csv(path: Path) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise SystemExit(f"[ERROR] Missing file: {path}\n"
                         f"Place the Titanic CSVs under {path.parent}/")
    df = pd.read_csv(path)
    print(f"[INFO] Loaded {path.name} with shape {df.shape}")
    return df


def check_columns(df: pd.DataFrame, required, name: str = "dataset"):
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise SystemExit(f"[ERROR] {name} missing columns: {missing}")


def load_passengers(path: Path = TRAIN_CSV, url: str = DATA_URL) -> pd.DataFrame:
    """Load the passenger table, downloading it when no local copy exists."""
    path = Path(path)
    if path.exists():
        df = load_csv(path)
    elif url:
        print(f"[WARN] {path} not found, reading {url}")
        df = pd.read_csv(url)
        print(f"[INFO] Downloaded dataset with shape {df.shape}")
    else:
        df = load_csv(path)
    check_columns(df, COLUMNS, path.name)
    return df


def basic_clean(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    # strip whitespace in text columns; blanks count as missing
    for c in df.select_dtypes(include=["object", "string"]).columns:
        df[c] = df[c].str.strip().replace("", np.nan)
    return df


def impute(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["Age"] = df["Age"].fillna(AGE_FILL)
    df["Embarked"] = df["Embarked"].replace("", np.nan).fillna(EMBARKED_FILL)
    return df


def _encode_column(series: pd.Series, codes: dict) -> pd.Series:
    unknown = sorted(set(series.dropna().unique()) - set(codes))
    if unknown or series.isna().any():
        raise ValueError(
            f"Cannot encode column {series.name!r}: unexpected levels {unknown}"
            f"{' and missing values' if series.isna().any() else ''}; "
            f"expected {sorted(codes)}"
        )
    return series.map(codes).astype(int)


def encode(df: pd.DataFrame) -> pd.DataFrame:
    """Map the Sex and Embarked factors to integer codes."""
    df = df.copy()
    df["Sex"] = _encode_column(df["Sex"], SEX_CODES)
    df["Embarked"] = _encode_column(df["Embarked"], EMBARKED_CODES)
    return df


def prepare(df: pd.DataFrame) -> pd.DataFrame:
    return encode(impute(basic_clean(df)))


def missing_summary(df: pd.DataFrame) -> pd.DataFrame:
    missing = df.isna().sum()
    summary = pd.DataFrame({
        "missing": missing,
        "percent": (missing / len(df) * 100).round(2),
    })
    summary = summary[summary["missing"] > 0]
    return summary.sort_values("missing", ascending=False)


def survival_rates(df: pd.DataFrame, by: str) -> pd.Series:
    return df.groupby(by)[TARGET].mean().round(3)


def describe(df: pd.DataFrame):
    """Print the quick EDA tables for the raw passenger frame."""
    print(f"[EDA] Shape: {df.shape}")
    print("[EDA] Columns:", list(df.columns))
    print("[EDA] Missing values:")
    print(missing_summary(df))
    if TARGET in df.columns:
        print(f"[EDA] Overall survival rate: {df[TARGET].mean():.3f}")
        for col in ("Sex", "Pclass", "Embarked"):
            if col in df.columns:
                print(f"[EDA] Survival by {col}:")
                print(survival_rates(df, col))
