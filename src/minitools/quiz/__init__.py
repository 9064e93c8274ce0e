from .loader import load_problems, parse_records, read_records
from .models import Problem, ScoreSheet
from .runner import QuizRunner, check_answer, format_prompt, format_summary

__all__ = [
    "Problem",
    "QuizRunner",
    "ScoreSheet",
    "check_answer",
    "format_prompt",
    "format_summary",
    "load_problems",
    "parse_records",
    "read_records",
]
