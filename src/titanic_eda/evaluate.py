import json
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from sklearn.metrics import (
    ConfusionMatrixDisplay,
    accuracy_score,
    classification_report,
    confusion_matrix,
    roc_auc_score,
    roc_curve,
)

from titanic_eda.config import THRESHOLD

CLASS_NAMES = ["Did not survive", "Survived"]


@dataclass
class Evaluation:
    y_true: np.ndarray
    y_score: np.ndarray
    y_pred: np.ndarray
    accuracy: float
    auc: float
    confusion: np.ndarray
    fpr: np.ndarray
    tpr: np.ndarray
    thresholds: np.ndarray
    report: str

    def as_dict(self) -> dict:
        tn, fp, fn, tp = (int(v) for v in self.confusion.ravel())
        return {
            "n": int(len(self.y_true)),
            "accuracy": float(self.accuracy),
            "auc": None if np.isnan(self.auc) else float(self.auc),
            "confusion_matrix": {
                "true_negative": tn,
                "false_positive": fp,
                "false_negative": fn,
                "true_positive": tp,
            },
        }


def evaluate(model, X, y, threshold: float = THRESHOLD) -> Evaluation:
    """Score ``X`` and compare against ``y`` at the given probability cut-off."""
    y_true = np.asarray(y).astype(int)
    y_score = model.predict_proba(X)[:, 1]
    y_pred = (y_score >= threshold).astype(int)

    try:
        auc = roc_auc_score(y_true, y_score)
    except ValueError:
        # only one class present
        auc = float("nan")
    fpr, tpr, thresholds = roc_curve(y_true, y_score)

    return Evaluation(
        y_true=y_true,
        y_score=y_score,
        y_pred=y_pred,
        accuracy=accuracy_score(y_true, y_pred),
        auc=auc,
        confusion=confusion_matrix(y_true, y_pred, labels=[0, 1]),
        fpr=fpr,
        tpr=tpr,
        thresholds=thresholds,
        report=classification_report(y_true, y_pred, labels=[0, 1],
                                     target_names=CLASS_NAMES, digits=3,
                                     zero_division=0),
    )


def plot_confusion_matrix(evaluation: Evaluation, title="Confusion matrix"):
    fig, ax = plt.subplots(figsize=(5, 5))
    disp = ConfusionMatrixDisplay(confusion_matrix=evaluation.confusion,
                                  display_labels=CLASS_NAMES)
    disp.plot(cmap="Blues", ax=ax, colorbar=False)
    ax.set_title(title)
    fig.tight_layout()
    return fig


def plot_roc_curve(evaluation: Evaluation, title="ROC curve"):
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(evaluation.fpr, evaluation.tpr, label=f"AUC = {evaluation.auc:.3f}")
    ax.plot([0, 1], [0, 1], "k--", label="Chance")
    ax.set_xlabel("False positive rate")
    ax.set_ylabel("True positive rate")
    ax.set_title(title)
    ax.legend(loc="lower right")
    ax.grid(alpha=0.3)
    fig.tight_layout()
    return fig


def write_metrics(metrics: dict, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(metrics, indent=2))
    return path
