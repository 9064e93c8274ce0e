from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from minitools.errors import FileOpenError, FileReadError, ParseError
from minitools.quiz.models import Problem

logger = logging.getLogger(__name__)


def read_records(path: Path) -> List[List[str]]:
    """Read every CSV record from `path`, failing with the taxonomy errors."""
    try:
        handle = path.open("r", encoding="utf-8", newline="")
    except OSError as exc:
        raise FileOpenError(f"Failed to open the CSV file: {path}") from exc
    with handle:
        try:
            records = [record for record in csv.reader(handle) if record]
        except (csv.Error, UnicodeDecodeError) as exc:
            raise FileReadError(f"Failed to read the CSV file: {path}") from exc
    logger.debug("Read %d records from %s", len(records), path)
    return records


def parse_records(records: Iterable[Sequence[str]]) -> List[Problem]:
    """Turn `question,answer` records into problems; extra fields are ignored."""
    problems: List[Problem] = []
    for line_no, record in enumerate(records, start=1):
        if len(record) < 2:
            raise ParseError(
                f"Record {line_no} has {len(record)} field(s); expected 'question,answer'."
            )
        problems.append(Problem(question=record[0], answer=record[1].strip()))
    return problems


def load_problems(path: Path) -> List[Problem]:
    return parse_records(read_records(path))
