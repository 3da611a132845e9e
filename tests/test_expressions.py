import unittest

from errors import ExpressionError, InvalidOperation
from expressions import evaluate_expression, normalize_expression

TILES = [100, 75, 50, 25, 6, 3]


class NormalizeExpressionTestCase(unittest.TestCase):
    def test_aliases_and_whitespace(self):
        self.assertEqual("(2+3)*4/2-1", normalize_expression("[2 p 3] × 4 ÷ 2 − 1"))

    def test_large_tile_shorthand(self):
        self.assertEqual("100+75+50+25", normalize_expression("H + s + F + t"))


class EvaluateExpressionTestCase(unittest.TestCase):
    def test_full_answer(self):
        step = evaluate_expression("((100+6)*3*75-50)/25", TILES)
        self.assertEqual(952, step.value)
        self.assertEqual("(((((100+6)*3)*75)-50)/25)", step.expr)

    def test_without_a_selection(self):
        self.assertEqual(12, evaluate_expression("3 x 4").value)
        self.assertEqual(125, evaluate_expression("h+t").value)

    def test_tile_used_twice(self):
        with self.assertRaises(ExpressionError):
            evaluate_expression("100+100", TILES)

    def test_number_not_in_selection(self):
        with self.assertRaises(ExpressionError):
            evaluate_expression("7*3", TILES)

    def test_illegal_steps(self):
        for expr in ("7/2", "3-5", "5-5", "6/(3-3)"):
            with self.subTest(expr=expr):
                with self.assertRaises(InvalidOperation):
                    evaluate_expression(expr)

    def test_digit_separators_are_not_numbers(self):
        with self.assertRaises(ExpressionError):
            evaluate_expression("1_0+5", [10, 5])

    def test_unreadable_answers(self):
        for expr in ("", "1 +", "2**3", "abc", "-5", "2.5*2", "7/0", "6//3", "1_0+5", "0x10+1"):
            with self.subTest(expr=expr):
                with self.assertRaises(ExpressionError):
                    evaluate_expression(expr)


if __name__ == "__main__":
    unittest.main()
