import csv
import logging
import os
from datetime import datetime, timezone

from pronscore.models import AnalysisResult

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

RESULT_COLUMNS = [
    "timestamp", "expected_text", "user_text",
    "accuracy", "status", "correct_words", "total_words", "notes",
]


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI and the API server."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


# -----------------------
# Results log (CSV)
# -----------------------
def init_results_file(path: str) -> str:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(RESULT_COLUMNS)
    return path


def log_result(path: str, result: AnalysisResult, notes: str = "") -> None:
    if not os.path.exists(path):
        init_results_file(path)
    with open(path, mode="a", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([
            datetime.now(timezone.utc).isoformat(timespec="seconds"),
            result.expected_text, result.user_text,
            result.accuracy, result.status.value,
            result.correct_count, result.word_count, notes,
        ])
