import json
import numbers
import os
from typing import Any, Dict, List, Optional

import pandas as pd

PUZZLE_KEYS = ("puzzle", "quizzes", "quiz", "question", "grid")
SOLUTION_KEYS = ("solution", "solutions", "answer")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .parquet, .csv, .json, .jsonl and plain
    text (one 81-character puzzle per line).
    Returns a list of records with "id", "puzzle" and, when known, "solution".
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = os.path.splitext(os.path.basename(file_path))[0]

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _first_of(record: Dict[str, Any], keys) -> Optional[str]:
        for key in keys:
            value = record.get(key)
            if isinstance(value, numbers.Integral) and not isinstance(value, bool):
                # Numeric puzzle columns lose their leading zeros.
                value = str(value).zfill(81)
            if _is_nonempty_str(value):
                return value.strip()
        return None

    def _normalize_record(record: Dict[str, Any], position: int) -> Optional[Dict[str, Any]]:
        puzzle = _first_of(record, PUZZLE_KEYS)
        if puzzle is None:
            return None
        normalized = {
            "id": str(record.get("id") or f"{stem}-{position + 1}"),
            "puzzle": puzzle,
        }
        solution = _first_of(record, SOLUTION_KEYS)
        if solution:
            normalized["solution"] = solution
        return normalized

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        data = []
        for position, record in enumerate(records):
            if not isinstance(record, dict):
                continue
            normalized = _normalize_record(record, position)
            if normalized is not None:
                data.append(normalized)
        return data

    # Case 1: Tabular files (Kaggle-style "quizzes,solutions" CSVs, parquet dumps)
    if file_path.endswith(".parquet") or file_path.endswith(".csv"):
        try:
            if file_path.endswith(".parquet"):
                df = pd.read_parquet(file_path)
            else:
                df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
            df.columns = [str(c).strip().lower() for c in df.columns]
            return _normalize_all(df.to_dict(orient="records"))
        except Exception as e:
            print(f"Error reading {file_path}: {e}")
            return []

    # Case 2: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            if isinstance(payload, list):
                return _normalize_all(payload)
            if isinstance(payload, dict):
                return _normalize_all([payload])
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            return _load_json_lines(file_path, _normalize_all)

    # Case 3: JSONL File (Text)
    if file_path.endswith(".jsonl"):
        return _load_json_lines(file_path, _normalize_all)

    # Case 4: Plain text, one puzzle per line
    data = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if len(line) < 81:
                continue
            data.append({"id": f"{stem}-{len(data) + 1}", "puzzle": line[:81]})
    return data


def _load_json_lines(file_path: str, normalize_all) -> List[Dict[str, Any]]:
    records = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            records.append(obj)
    return normalize_all(records)
