"""Rule-based question answering over profiled datasets."""

from datascout.query.engine import FALLBACK_ANSWER, answer_question, describe_dataset

__all__ = ["answer_question", "describe_dataset", "FALLBACK_ANSWER"]
