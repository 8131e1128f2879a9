import io
import unittest

from timedquiz.app import explain
from timedquiz.app.session_engine import run_session
from timedquiz.problems import PromptSet


class ExplainTests(unittest.TestCase):
    def tearDown(self) -> None:
        explain.enable(False)

    def test_disabled_by_default_emits_nothing(self) -> None:
        buf = io.StringIO()
        explain.enable(False, stream=buf)
        explain.trace("anything", {"a": 1})
        self.assertEqual(buf.getvalue(), "")

    def test_session_milestones_traced(self) -> None:
        buf = io.StringIO()
        explain.enable(True, stream=buf)
        run_session(PromptSet((("1+1", 2),)), ["", "2"], lambda _m: None, 60)
        text = buf.getvalue()
        for event in ("session_start", "prompt_shown", "graded", "race_settled", "session_end"):
            self.assertIn(f" {event} :: ", text)
        self.assertIn('"winner":"completed"', text)


if __name__ == "__main__":
    unittest.main()
