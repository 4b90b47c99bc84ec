import unittest

from basics import lessons
from basics.registry import get_registry


class LessonOutputTests(unittest.TestCase):
    def run_lesson(self, name: str) -> list[str]:
        return get_registry().run(name)

    def test_variables(self) -> None:
        self.assertEqual(
            self.run_lesson("variables"),
            [
                "The value of x is: 5",
                "The value of y is: Hello, world!",
                "The value of z is: true",
            ],
        )

    def test_conditionals(self) -> None:
        self.assertEqual(self.run_lesson("conditionals"), ["Number is greater than 5"])

    def test_loops_count_to_ten_three_times(self) -> None:
        lines = self.run_lesson("loops")
        self.assertEqual(len(lines), 30)
        for offset, name in enumerate("ijk"):
            block = lines[offset * 10:(offset + 1) * 10]
            self.assertEqual(block, [f"Value of {name} is: {n}" for n in range(10)])

    def test_functions(self) -> None:
        self.assertEqual(
            self.run_lesson("functions"),
            ["10", "5", "10", "The maximum value is: 5"],
        )

    def test_arrays(self) -> None:
        self.assertEqual(
            self.run_lesson("arrays"),
            ["2", "[10, 20, 30, 40, 50]", "10", "50", "25", "5"],
        )

    def test_squares(self) -> None:
        self.assertEqual(self.run_lesson("squares"), ["0 1 4 9 16 25 36 49 64 81"])

    def test_slices(self) -> None:
        self.assertEqual(
            self.run_lesson("slices"),
            [
                "[10, 20, 30]",
                "10",
                "30",
                "25",
                "3",
                "[10, 25, 30, 40, 50]",
                "[10, 25, 40, 50]",
                "[10, 25, 40, 50]",
            ],
        )

    def test_structs(self) -> None:
        self.assertEqual(self.run_lesson("structs"), ["Name: John Doe, Age: 30"])

    def test_ownership(self) -> None:
        self.assertEqual(
            self.run_lesson("ownership"),
            [
                "Book has 300 pages",
                "Book has a rating of 4/5",
                "Word count: 3",
                "Message: Rust is awesome!",
            ],
        )

    def test_pointers(self) -> None:
        self.assertEqual(
            self.run_lesson("pointers"),
            ["The value of x is: 10", "The value of x is: 20"],
        )

    def test_lessons_are_repeatable(self) -> None:
        for name in get_registry().names():
            self.assertEqual(self.run_lesson(name), self.run_lesson(name), name)


class HelperTests(unittest.TestCase):
    def test_double_number_returns_new_value(self) -> None:
        num = 5
        self.assertEqual(lessons.double_number(num), 10)
        self.assertEqual(num, 5)

    def test_classify_against(self) -> None:
        self.assertEqual(lessons.classify_against(10), "greater")
        self.assertEqual(lessons.classify_against(4), "less")
        self.assertEqual(lessons.classify_against(5), "equal")
        self.assertEqual(lessons.classify_against(0, threshold=-1), "greater")


if __name__ == "__main__":
    unittest.main()
