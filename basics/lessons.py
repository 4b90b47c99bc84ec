"""Console lessons on basic language mechanics.

Each lesson returns the lines it would print instead of printing them, so the
CLI, the tools and the workflow can all render the same output. Importing this
module registers every lesson with the default registry.
"""

from __future__ import annotations

from typing import List

from .indirection import Cell, Ref, double_in_place
from .max_finder import describe_max, find_max
from .records import Book, Person, count_words
from .registry import register_lesson

LOOP_LIMIT = 10
THRESHOLD = 5


def double_number(x: int) -> int:
    """Return twice ``x``; the caller's variable is left untouched."""
    return 2 * x


def classify_against(number: int, threshold: int = THRESHOLD) -> str:
    if number > threshold:
        return "greater"
    elif number < threshold:
        return "less"
    return "equal"


@register_lesson("variables", "Bind an integer, a string and a boolean and print them.")
def variables_lesson() -> List[str]:
    x = 5
    y = "Hello, world!"
    z = True
    return [
        f"The value of x is: {x}",
        f"The value of y is: {y}",
        f"The value of z is: {str(z).lower()}",
    ]


@register_lesson("conditionals", "Branch on how a number compares with a threshold.")
def conditionals_lesson() -> List[str]:
    number = 10
    verdict = classify_against(number)
    if verdict == "equal":
        return [f"Number is equal to {THRESHOLD}"]
    return [f"Number is {verdict} than {THRESHOLD}"]


@register_lesson("loops", "Count to ten with a for loop, a while loop and a loop with break.")
def loops_lesson() -> List[str]:
    lines: List[str] = []

    for i in range(LOOP_LIMIT):
        lines.append(f"Value of i is: {i}")

    j = 0
    while j < LOOP_LIMIT:
        lines.append(f"Value of j is: {j}")
        j += 1

    k = 0
    while True:
        lines.append(f"Value of k is: {k}")
        k += 1
        if k == LOOP_LIMIT:
            break

    return lines


@register_lesson("functions", "Return a value, mutate through a reference, and find a maximum.")
def functions_lesson() -> List[str]:
    num = 5
    lines = [str(double_number(num)), str(num)]

    cell = Cell(num)
    double_in_place(cell)
    lines.append(str(cell.get()))

    numbers = [3, 5, 2, 1, 4]
    lines.append(describe_max(find_max(numbers)))
    return lines


@register_lesson("arrays", "Fill, read and update a fixed-length array.")
def arrays_lesson() -> List[str]:
    indices = [0] * 5
    for i in range(len(indices)):
        indices[i] = i
    lines = [str(indices[2])]

    numbers = [0] * 5
    for position, value in enumerate((10, 20, 30, 40, 50)):
        numbers[position] = value
    lines.append(str(numbers))
    lines.append(str(numbers[0]))
    lines.append(str(numbers[4]))

    numbers[1] = 25
    lines.append(str(numbers[1]))
    lines.append(str(len(numbers)))
    return lines


@register_lesson("squares", "Allocate ten slots and store the square of each index.")
def squares_lesson() -> List[str]:
    squares = [0] * 10
    for i in range(len(squares)):
        squares[i] = i * i
    return [" ".join(str(value) for value in squares)]


@register_lesson("slices", "Grow, shrink and copy a list.")
def slices_lesson() -> List[str]:
    numbers: List[int] = []
    numbers.extend([10, 20, 30])
    lines = [str(numbers), str(numbers[0]), str(numbers[2])]

    numbers[1] = 25
    lines.append(str(numbers[1]))
    lines.append(str(len(numbers)))

    numbers.extend([40, 50])
    lines.append(str(numbers))

    del numbers[2]
    lines.append(str(numbers))

    copied = list(numbers)
    lines.append(str(copied))
    return lines


@register_lesson("structs", "Build a record and print its fields through a method.")
def structs_lesson() -> List[str]:
    john = Person("John Doe", 30)
    return [john.describe()]


@register_lesson("ownership", "Call methods on a record and borrow a string without consuming it.")
def ownership_lesson() -> List[str]:
    book = Book.new(300, 4)
    lines = [book.page_count_line(), book.rating_line()]

    message = "Rust is awesome!"
    words = count_words(message)
    lines.append(f"Word count: {words}")
    lines.append(f"Message: {message}")
    return lines


@register_lesson("pointers", "Write through an alias and through an alias of an alias.")
def pointers_lesson() -> List[str]:
    x = Cell(5)

    ptr_x = Ref(x)
    ptr_x.set(10)
    lines = [f"The value of x is: {x.get()}"]

    ptr_ptr_x = Ref(ptr_x)
    ptr_ptr_x.set(20)
    lines.append(f"The value of x is: {x.get()}")
    return lines
