from .schema import ProblemRecord, PromptSet, parse_int
from .loader import (
    AnswerFormatError,
    BadColumnsError,
    ProblemSetError,
    load_problems,
    parse_problems,
)

__all__ = [
    "ProblemRecord",
    "PromptSet",
    "parse_int",
    "ProblemSetError",
    "BadColumnsError",
    "AnswerFormatError",
    "load_problems",
    "parse_problems",
]
