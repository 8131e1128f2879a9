from .outcome import Outcome, OutcomeKind, SessionMessages
from .session_engine import QUIT_TOKEN, QuizSession, run_session

__all__ = ["Outcome", "OutcomeKind", "SessionMessages", "QUIT_TOKEN", "QuizSession", "run_session"]
