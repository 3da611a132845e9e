import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

import numbers_cli


def run(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = numbers_cli.main(list(argv))
    return code, out.getvalue()


class NumbersCliTestCase(unittest.TestCase):
    def test_solve_exact(self):
        code, out = run("solve", "100", "75", "50", "25", "6", "3", "952")
        self.assertEqual(0, code)
        self.assertIn("A possible solution is:", out)
        self.assertIn("= 952", out)

    def test_solve_closest(self):
        code, out = run("solve", "2", "3", "999")
        self.assertEqual(0, code)
        self.assertIn("The closest is 993 away", out)

    def test_solve_rejects_bad_selection(self):
        code, out = run("solve", "5", "952")
        self.assertEqual(2, code)
        self.assertIn("between 2 and 6", out)
        code, out = run("solve", "11", "3", "952")
        self.assertEqual(2, code)
        self.assertIn("Only numbers", out)

    def test_round_replays_from_seed(self):
        first = run("round", "--large", "2", "--seed", "abc")
        second = run("round", "--large", "2", "--seed", "abc")
        self.assertEqual(0, first[0])
        self.assertEqual(first, second)
        self.assertIn("Your 2 large selection is:", first[1])
        self.assertIn("seed=abc", first[1])

    def test_round_rejects_bad_large_count(self):
        code, out = run("round", "--large", "7")
        self.assertEqual(2, code)
        self.assertIn("Not allowed", out)

    def test_unknown_log_level_is_a_usage_error(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                run("--log-level", "loud", "apply", "4", "+", "5")
        self.assertEqual(2, cm.exception.code)

    def test_log_level_is_case_insensitive(self):
        self.assertEqual(0, run("--log-level", "debug", "apply", "4", "+", "5")[0])

    def test_apply(self):
        self.assertEqual((0, "✅ (6-4) = 2\n"), run("apply", "4", "-", "6"))
        code, out = run("apply", "5", "-", "5")
        self.assertEqual(2, code)
        self.assertIn("Not allowed", out)

    def test_check(self):
        code, out = run("check", "(100+6)*9", "100", "6", "9")
        self.assertEqual(0, code)
        self.assertIn("= 954", out)
        code, _ = run("check", "100+100", "100", "6")
        self.assertEqual(2, code)


if __name__ == "__main__":
    unittest.main()
