import argparse
from pathlib import Path

import pandas as pd

from titanic_eda import config
from titanic_eda.data import (
    check_columns,
    describe,
    load_csv,
    load_passengers,
    prepare,
)
from titanic_eda.evaluate import (
    evaluate,
    plot_confusion_matrix,
    plot_roc_curve,
    write_metrics,
)
from titanic_eda.model import fit, glm_summary, split
from titanic_eda.plots import render_eda, save_figure


def banner(msg):
    print("\n" + "="*len(msg))
    print(msg)
    print("="*len(msg))


def score_test_csv(pipe, path: Path, out_path: Path, fare_fill: float):
    test_df = load_csv(path)
    check_columns(test_df, [config.ID_COL] + config.FEATURES, path.name)
    X_test = prepare(test_df)[config.FEATURES]
    # Fare has gaps in the unlabeled split only
    X_test = X_test.assign(Fare=X_test["Fare"].fillna(fare_fill))
    proba = pipe.predict_proba(X_test)[:, 1]
    out = pd.DataFrame({
        config.ID_COL: test_df[config.ID_COL],
        config.TARGET: (proba >= config.THRESHOLD).astype(int),
        "probability": proba.round(4),
    })
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(out_path, index=False)
    print(f"[OUTPUT] Wrote predictions -> {out_path}")
    return out


def run(data_path=config.TRAIN_CSV, output_dir=config.OUTPUT_DIR,
        seed=config.RANDOM_STATE, plots=True, test_path=config.TEST_CSV):
    output_dir = Path(output_dir)
    figures_dir = output_dir / config.FIGURES_DIR

    banner("Step 1: Load passenger data")
    raw = load_passengers(data_path)

    banner("Step 2: Quick EDA")
    describe(raw)
    if plots:
        for path in render_eda(raw, figures_dir):
            print(f"[OUTPUT] {path}")

    banner("Step 3: Clean & encode")
    df = prepare(raw)
    print(f"[CLEAN] Filled Age with {config.AGE_FILL}, Embarked with '{config.EMBARKED_FILL}'")
    print(f"[CLEAN] Remaining missing in features: {int(df[config.FEATURES].isna().sum().sum())}")

    banner("Step 4: Train/validation split")
    X_train, X_valid, y_train, y_valid = split(df, random_state=seed)
    print(f"[SPLIT] Train shape: {X_train.shape}, Valid shape: {X_valid.shape}")

    banner("Step 5: Fit logistic regression")
    pipe = fit(X_train, y_train)
    print("[MODEL] Trained LogisticRegression pipeline")
    coefs = glm_summary(X_train, y_train)
    print("[MODEL] Binomial GLM coefficients:")
    print(coefs.round(4))
    coef_path = output_dir / config.COEF_CSV
    coef_path.parent.mkdir(parents=True, exist_ok=True)
    coefs.to_csv(coef_path)
    print(f"[OUTPUT] Wrote coefficients -> {coef_path}")

    banner("Step 6: Metrics on training and validation")
    train_eval = evaluate(pipe, X_train, y_train)
    valid_eval = evaluate(pipe, X_valid, y_valid)
    print(f"[METRIC][TRAIN]  Accuracy={train_eval.accuracy:.3f}  AUC={train_eval.auc:.3f}")
    print(f"[METRIC][VALID]  Accuracy={valid_eval.accuracy:.3f}  AUC={valid_eval.auc:.3f}")
    print("[VALID] Confusion matrix (rows=actual, cols=predicted):")
    print(valid_eval.confusion)
    print("[VALID] Classification report:")
    print(valid_eval.report)

    metrics = {
        "seed": seed,
        "train": train_eval.as_dict(),
        "valid": valid_eval.as_dict(),
    }
    metrics_path = write_metrics(metrics, output_dir / config.METRICS_JSON)
    print(f"[OUTPUT] Wrote metrics -> {metrics_path}")

    if plots:
        for path in (
            save_figure(plot_confusion_matrix(valid_eval, "Confusion matrix (validation)"),
                        figures_dir / "confusion_matrix.png"),
            save_figure(plot_roc_curve(valid_eval, "ROC curve (validation)"),
                        figures_dir / "roc_curve.png"),
        ):
            print(f"[OUTPUT] {path}")

    if test_path is not None:
        test_path = Path(test_path)
        if test_path.exists():
            banner(f"Step 7: Score {test_path.name}")
            score_test_csv(pipe, test_path, output_dir / config.PRED_OUT,
                           fare_fill=float(df["Fare"].median()))
        else:
            print(f"[WARN] {test_path} not found, skipping test predictions")

    return metrics


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Titanic survival EDA and logistic regression")
    parser.add_argument("--data", type=Path, default=config.TRAIN_CSV,
                        help="training CSV (downloaded if absent)")
    parser.add_argument("--test", type=Path, default=None,
                        help="unlabeled CSV to score (default: test.csv next to --data)")
    parser.add_argument("--outdir", type=Path, default=config.OUTPUT_DIR)
    parser.add_argument("--seed", type=int, default=config.RANDOM_STATE)
    parser.add_argument("--no-plots", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    test_path = args.test if args.test is not None else args.data.with_name("test.csv")
    run(args.data, args.outdir, seed=args.seed, plots=not args.no_plots,
        test_path=test_path)


if __name__ == "__main__":
    main()
