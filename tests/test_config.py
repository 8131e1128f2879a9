import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from timedquiz.config import load_config, validate_config


class ConfigTests(unittest.TestCase):
    def test_package_defaults(self) -> None:
        cfg = validate_config(load_config())
        quiz = cfg["quiz"]
        self.assertEqual(quiz["problems_path"], "problems.csv")
        self.assertFalse(quiz["header"])
        self.assertEqual(quiz["time_limit_s"], 30)
        self.assertFalse(quiz["shuffle"])
        self.assertEqual(quiz["quit_token"], "q")
        self.assertIn("greeting", cfg["messages"])

    def test_empty_config_gets_defaults(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg["quiz"]["time_limit_s"], 30)
        self.assertEqual(cfg["messages"]["out_of"], "out of")

    def test_invalid_values_repaired_with_warning(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            cfg = validate_config({"quiz": {"time_limit_s": -5, "quit_token": ""}})
        self.assertEqual(cfg["quiz"]["time_limit_s"], 30)
        self.assertEqual(cfg["quiz"]["quit_token"], "q")
        self.assertIn("WARNING", buf.getvalue())

    def test_non_numeric_time_limit_repaired(self) -> None:
        with redirect_stdout(io.StringIO()):
            cfg = validate_config({"quiz": {"time_limit_s": "soon"}})
        self.assertEqual(cfg["quiz"]["time_limit_s"], 30)

    def test_user_yaml_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "quiz.yml"
            path.write_text("quiz:\n  time_limit_s: 5\n  shuffle: true\n", encoding="utf-8")
            cfg = validate_config(load_config(str(path)))
        self.assertEqual(cfg["quiz"]["time_limit_s"], 5)
        self.assertTrue(cfg["quiz"]["shuffle"])
        self.assertEqual(cfg["quiz"]["quit_token"], "q")

    def test_missing_file_exits(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            load_config("/nonexistent/quiz.yml")
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("ERROR", err.getvalue())


if __name__ == "__main__":
    unittest.main()
