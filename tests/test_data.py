import numpy as np
import pandas as pd
import pytest

from titanic_eda import config
from titanic_eda.data import (
    basic_clean,
    check_columns,
    describe,
    encode,
    impute,
    load_csv,
    load_passengers,
    missing_summary,
    prepare,
    survival_rates,
)


def test_load_csv_missing_file(tmp_path):
    with pytest.raises(SystemExit, match="Missing file"):
        load_csv(tmp_path / "nope.csv")


def test_load_passengers_reads_local_file(train_csv, capsys):
    df = load_passengers(train_csv, url=None)
    assert df.shape == (300, 12)
    assert "Loaded train.csv" in capsys.readouterr().out


def test_load_passengers_falls_back_to_url(tmp_path, train_csv, capsys):
    df = load_passengers(tmp_path / "absent.csv", url=str(train_csv))
    assert df.shape == (300, 12)
    out = capsys.readouterr().out
    assert "[WARN]" in out and "absent.csv not found" in out


def test_load_passengers_without_file_or_url(tmp_path):
    with pytest.raises(SystemExit):
        load_passengers(tmp_path / "train.csv", url=None)


def test_load_passengers_rejects_missing_columns(tmp_path, passengers):
    path = tmp_path / "train.csv"
    passengers.drop(columns=["Cabin", "Fare"]).to_csv(path, index=False)
    with pytest.raises(SystemExit, match=r"\['Fare', 'Cabin'\]"):
        load_passengers(path, url=None)


def test_check_columns_passes_when_present(passengers):
    check_columns(passengers, config.FEATURES)


def test_basic_clean_strips_and_blanks(passengers):
    raw = passengers.copy()
    raw.loc[0, "Sex"] = "  female "
    cleaned = basic_clean(raw)
    assert cleaned.loc[0, "Sex"] == "female"
    assert pd.isna(cleaned.loc[11, "Embarked"])
    # caller's frame is untouched
    assert raw.loc[0, "Sex"] == "  female "


def test_impute_uses_constant_fills(passengers):
    filled = impute(basic_clean(passengers))
    was_missing = passengers["Age"].isna()
    assert (filled.loc[was_missing, "Age"] == config.AGE_FILL).all()
    assert filled.loc[[3, 7, 11], "Embarked"].tolist() == ["S", "S", "S"]
    assert filled["Cabin"].isna().sum() == passengers["Cabin"].isna().sum()


def test_encode_maps_levels():
    df = pd.DataFrame({"Sex": ["male", "female"], "Embarked": ["C", "S"]})
    out = encode(df)
    assert out["Sex"].tolist() == [1, 0]
    assert out["Embarked"].tolist() == [0, 2]


def test_encode_rejects_unknown_level():
    df = pd.DataFrame({"Sex": ["male", "unknown"], "Embarked": ["C", "S"]})
    with pytest.raises(ValueError, match="'Sex'"):
        encode(df)


def test_encode_rejects_missing_values():
    df = pd.DataFrame({"Sex": ["male", "female"], "Embarked": ["C", np.nan]})
    with pytest.raises(ValueError, match="missing"):
        encode(df)


def test_prepare_leaves_no_gaps_in_features(passengers):
    df = prepare(passengers)
    assert df[config.FEATURES].isna().sum().sum() == 0
    assert set(df["Sex"].unique()) <= {0, 1}
    assert set(df["Embarked"].unique()) <= {0, 1, 2}


def test_missing_summary(passengers):
    summary = missing_summary(passengers)
    assert list(summary.index) == ["Cabin", "Age", "Embarked"]
    assert summary.loc["Age", "missing"] == 60
    assert summary.loc["Age", "percent"] == 20.0


def test_survival_rates_by_sex(passengers):
    rates = survival_rates(passengers, "Sex")
    assert rates["female"] > rates["male"]


def test_describe_prints_eda(passengers, capsys):
    describe(passengers)
    out = capsys.readouterr().out
    assert "[EDA] Overall survival rate" in out
    assert "Survival by Pclass" in out
