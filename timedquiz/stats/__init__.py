from .stats import format_summary, outcome_stats

__all__ = ["format_summary", "outcome_stats"]
