import io
import unittest

from timedquiz.app.console import make_inform, stdin_lines


class ConsoleTests(unittest.TestCase):
    def test_lines_stripped_until_end_of_input(self) -> None:
        lines = list(stdin_lines(io.StringIO("5\r\n  3 \nq")))
        self.assertEqual(lines, ["5", "  3 ", "q"])

    def test_inform_writes_one_line(self) -> None:
        buf = io.StringIO()
        make_inform(buf)("1+1")
        self.assertEqual(buf.getvalue(), "1+1\n")


if __name__ == "__main__":
    unittest.main()
