from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import seaborn as sns

from titanic_eda.config import ID_COL, TARGET

OUTCOME_LABELS = {0: "Did not survive", 1: "Survived"}
PALETTE = {"Did not survive": "#d9534f", "Survived": "#5cb85c"}


def _with_outcome(df):
    out = df.copy()
    out["Outcome"] = out[TARGET].map(OUTCOME_LABELS)
    return out


def plot_survival_counts(df):
    fig, ax = plt.subplots(figsize=(6, 4))
    sns.countplot(data=_with_outcome(df), x="Outcome", hue="Outcome",
                  palette=PALETTE, legend=False, ax=ax)
    ax.set_title("Passengers by outcome")
    ax.set_xlabel("")
    ax.set_ylabel("Count")
    fig.tight_layout()
    return fig


def plot_survival_by(df, column):
    """Stacked counts of survivors and victims for each level of ``column``."""
    fig, ax = plt.subplots(figsize=(7, 4))
    sns.countplot(data=_with_outcome(df), x=column, hue="Outcome",
                  palette=PALETTE, ax=ax)
    ax.set_title(f"Survival by {column}")
    ax.set_ylabel("Count")
    fig.tight_layout()
    return fig


def plot_age_distribution(df):
    fig, ax = plt.subplots(figsize=(8, 5))
    sns.histplot(data=_with_outcome(df).dropna(subset=["Age"]), x="Age",
                 hue="Outcome", palette=PALETTE, bins=30, multiple="stack", ax=ax)
    ax.set_title("Age distribution by outcome")
    fig.tight_layout()
    return fig


def plot_fare_by_class(df):
    fig, ax = plt.subplots(figsize=(7, 5))
    sns.boxplot(data=df, x="Pclass", y="Fare", ax=ax)
    ax.set_title("Fare by passenger class")
    fig.tight_layout()
    return fig


def plot_missing_values(df):
    share = df.isna().mean().sort_values(ascending=False) * 100
    fig, ax = plt.subplots(figsize=(8, 4))
    share.plot(kind="bar", color="#5bc0de", ax=ax)
    ax.set_title("Missing values")
    ax.set_ylabel("% missing")
    fig.tight_layout()
    return fig


def plot_correlation(df):
    numeric = df.select_dtypes(include="number").drop(columns=[ID_COL], errors="ignore")
    fig, ax = plt.subplots(figsize=(8, 6))
    sns.heatmap(numeric.corr(), annot=True, fmt=".2f", cmap="coolwarm",
                vmin=-1, vmax=1, ax=ax)
    ax.set_title("Pearson correlation")
    fig.tight_layout()
    return fig


def save_figure(fig, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def render_eda(df, out_dir):
    """Render every descriptive chart of the raw frame into ``out_dir``."""
    out_dir = Path(out_dir)
    with sns.axes_style("whitegrid"):
        figures = {
            "survival_counts.png": plot_survival_counts(df),
            "survival_by_sex.png": plot_survival_by(df, "Sex"),
            "survival_by_class.png": plot_survival_by(df, "Pclass"),
            "survival_by_port.png": plot_survival_by(df, "Embarked"),
            "age_distribution.png": plot_age_distribution(df),
            "fare_by_class.png": plot_fare_by_class(df),
            "missing_values.png": plot_missing_values(df),
            "correlation.png": plot_correlation(df),
        }
    return [save_figure(fig, out_dir / name) for name, fig in figures.items()]
