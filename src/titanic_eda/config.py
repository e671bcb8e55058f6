import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = Path(os.environ.get("TITANIC_DATA_DIR", PACKAGE_ROOT / "data"))
TRAIN_CSV = DATA_DIR / "train.csv"
TEST_CSV = DATA_DIR / "test.csv"
DATA_URL = "https://raw.githubusercontent.com/datasciencedojo/datasets/master/titanic.csv"

OUTPUT_DIR = Path(os.environ.get("TITANIC_OUTPUT_DIR", "reports"))
# relative to the output directory of a run
FIGURES_DIR = "figures"
METRICS_JSON = "metrics.json"
COEF_CSV = "glm_coefficients.csv"
PRED_OUT = "predictions.csv"

ID_COL = "PassengerId"
TARGET = "Survived"
COLUMNS = [
    "PassengerId", "Survived", "Pclass", "Name", "Sex", "Age",
    "SibSp", "Parch", "Ticket", "Fare", "Cabin", "Embarked",
]
FEATURES = ["Pclass", "Sex", "Age", "SibSp", "Parch", "Fare", "Embarked"]

# median age of the 891 training passengers
AGE_FILL = 28.0
EMBARKED_FILL = "S"

SEX_CODES = {"female": 0, "male": 1}
EMBARKED_CODES = {"C": 0, "Q": 1, "S": 2}

TEST_SIZE = 0.2
RANDOM_STATE = int(os.environ.get("TITANIC_SEED", 42))
THRESHOLD = 0.5
