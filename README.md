# practicekit

A handful of small console exercises. Each one can be used as a library
function and also run as a command.

## Install

    pip install .

## Commands

| Command | What it does |
| --- | --- |
| `practicekit-students` | Starts with one student (Alice Smith). It asks for a name, age, id and GPA for a second student and then lists everyone |
| `practicekit-calculator` | Asks for an operator (`+ - * /`) and two numbers, then prints the result |
| `practicekit-palindrome` | Reads a line and reports whether it is a palindrome (case-sensitive) |
| `practicekit-temperature` | Asks for a value and a unit (`C` or `F`), then converts the value to the other unit |
| `practicekit-array` | Reads a size and then that many integers, and prints them as a list |
| `practicekit-arrays` | Shows a reversal, an ascending sort and a descending sort of fixed sample lists |
| `practicekit-area` | Prints the areas of a sample square, rectangle and circle |
| `practicekit-factorial` | Prints the factorials of 10, 3, 1 and 0 |

If you give an invalid operator, number or unit, `practicekit-calculator` and
`practicekit-temperature` ask again. If the details given to
`practicekit-students` or `practicekit-array` are not valid numbers, or the
array size is negative, those commands print an error to standard error and
exit with status 1.

## Library use

```python
from practicekit.calculator import calculate
from practicekit.palindrome import is_palindrome
from practicekit.temperature import convert, celsius_to_fahrenheit
from practicekit.arrays import format_array, reverse_in_place, sorted_descending
from practicekit.area import circle_area
from practicekit.factorial import factorial
from practicekit.students import Student, find_student_by_id, format_students

calculate("*", 6, 7)                            # 42
is_palindrome("level")                          # True
celsius_to_fahrenheit(100)                      # 212.0
convert(212, "f")                               # 100.0
format_array(sorted_descending([1, 4, 5, 2]))   # "[5, 4, 2, 1]"
circle_area(5)                                  # about 78.5 (pi taken as 3.14)
factorial(5)                                    # 120

students = [Student("Alice Smith", 20, 1001, 3.85)]
find_student_by_id(students, 1001)              # the Alice record
find_student_by_id(students, 42)                # None
print(format_students(students))
```

- `calculate` raises `ZeroDivisionError` when you divide by zero. It raises
  `ValueError` when the operator is unknown.
- `convert` accepts `"C"` or `"F"` in either case. It raises `ValueError` for
  any other unit.
- `factorial` returns 1 for zero and for negative numbers.
- `reverse_in_place` changes the list you pass in. `sorted_ascending` and
  `sorted_descending` return new lists.
- `students.read_student(read, write)` and `dynamic_array.read_values(read, write)`
  take a function that reads a line and a function that writes a prompt.
  They raise `ValueError` for input that is not valid.

## What it does not do

The student list lives only in memory for one run of `practicekit-students`.
Nothing is saved, and students cannot be edited or removed.

## Tests

    pip install .[test]
    pytest