from __future__ import annotations

import logging
import queue
import sys
import threading
import time
from typing import List, Optional, Sequence, TextIO, Union

from rich.console import Console

from minitools.errors import InputReadError
from minitools.quiz.models import Problem, ScoreSheet

logger = logging.getLogger(__name__)

_Outcome = Union[bool, InputReadError]


def format_prompt(index: int, problem: Problem) -> str:
    """Render the question prompt; `index` is 1-based."""
    return f"Problem #{index}: {problem.question} = "


def format_summary(sheet: ScoreSheet) -> List[str]:
    return [
        f"Quiz is over you scored {sheet.correct} correct answers and {sheet.wrong} wrong answers. ",
        f"That is total of {sheet.correct}/{sheet.total}, percentage is {sheet.percentage:f}%. ",
    ]


def check_answer(problem: Problem, line: str) -> bool:
    return line.strip() == problem.answer


def read_answer(stream: TextIO) -> str:
    """Read one line from `stream`; end of input counts as a read failure."""
    try:
        line = stream.readline()
    except (OSError, ValueError) as exc:
        raise InputReadError("cannot read from input") from exc
    if not line:
        raise InputReadError("cannot read from input")
    return line


class QuizRunner:
    """
    Present problems in order under one global deadline.

    Each problem gets its own worker thread that blocks on the input stream and posts
    the graded answer to a single-slot queue. The main thread waits on that queue only
    until the deadline; whichever happens first wins. A worker that loses the race is
    not cancelled: it is a daemon thread left blocked on the read and its late result,
    if any, is never consumed.
    """

    def __init__(
        self,
        problems: Sequence[Problem],
        time_limit: Optional[float] = 30,
        input_stream: Optional[TextIO] = None,
        console: Optional[Console] = None,
    ):
        self.problems = list(problems)
        self.time_limit = time_limit
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.console = console or Console(highlight=False, emoji=False)

    def run(self) -> ScoreSheet:
        """Run the quiz and return the score sheet; input failures raise `InputReadError`."""
        sheet = ScoreSheet(total=len(self.problems))
        deadline = None if self.time_limit is None else time.monotonic() + self.time_limit

        for index, problem in enumerate(self.problems, start=1):
            self.console.print(
                format_prompt(index, problem), end="", markup=False, emoji=False, soft_wrap=True
            )
            results: "queue.Queue[_Outcome]" = queue.Queue(maxsize=1)
            worker = threading.Thread(
                target=self._grade_next_answer,
                args=(problem, results),
                name=f"quiz-answer-{index}",
                daemon=True,
            )
            worker.start()
            try:
                outcome = results.get(timeout=self._remaining(deadline))
            except queue.Empty:
                logger.debug(
                    "Time limit reached after %d of %d problems", sheet.answered, sheet.total
                )
                break
            if isinstance(outcome, InputReadError):
                raise outcome
            sheet.record(outcome)

        return sheet

    def display_result(self, sheet: ScoreSheet) -> None:
        if sheet.total == 0:
            logger.warning("No problems were loaded; the percentage is undefined")
        self.console.print()
        for line in format_summary(sheet):
            self.console.print(line, markup=False, emoji=False, soft_wrap=True)

    def _grade_next_answer(self, problem: Problem, results: "queue.Queue[_Outcome]") -> None:
        try:
            line = read_answer(self.input_stream)
        except InputReadError as exc:
            results.put(exc)
            return
        results.put(check_answer(problem, line))

    @staticmethod
    def _remaining(deadline: Optional[float]) -> Optional[float]:
        if deadline is None:
            return None
        return max(0.0, deadline - time.monotonic())
