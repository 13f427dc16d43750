"""Students with scores and an ordered list of them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace


@dataclass
class Student:
    """A student's name and score."""

    name: str
    score: int

    def __str__(self) -> str:
        return f'{{name: "{self.name}", score: {self.score}}}'


def _name_of(student: str | Student) -> str:
    return student.name if isinstance(student, Student) else student


class StudentList:
    """An ordered list of students; mutating methods return the list for chaining."""

    def __init__(self, students: Iterable[Student | tuple[str, int]] = ()) -> None:
        self._students = [self._coerce(item) for item in students]

    @staticmethod
    def _coerce(item: Student | tuple[str, int]) -> Student:
        if isinstance(item, Student):
            return replace(item)
        name, score = item
        return Student(name, score)

    def _index(self, name: str) -> int | None:
        return next((i for i, s in enumerate(self._students) if s.name == name), None)

    def append(self, name: str | Student, score: int | None = None) -> StudentList:
        """Add a student, given either as a Student or as a name and a score."""
        if isinstance(name, Student):
            if score is not None:
                raise TypeError("score must not be given with a Student")
            self._students.append(replace(name))
        else:
            if score is None:
                raise TypeError("a score is required with a name")
            self._students.append(Student(name, score))
        return self

    def remove(self, name: str | Student) -> StudentList:
        """Remove the first student with this name; an unknown name changes nothing."""
        index = self._index(_name_of(name))
        if index is not None:
            del self._students[index]
        return self

    def set_score(self, name: str | Student, score: int) -> StudentList:
        """Set the score of the first student with this name, if there is one."""
        index = self._index(_name_of(name))
        if index is not None:
            self._students[index].score = score
        return self

    def average_score(self) -> float:
        """Mean score of all students; NaN for an empty list."""
        if not self._students:
            return math.nan
        return sum(s.score for s in self._students) / len(self._students)

    def find_student(self, name: str) -> Student:
        """A copy of the first student with this name; KeyError if there is none."""
        index = self._index(name)
        if index is None:
            raise KeyError(name)
        return replace(self._students[index])

    def best_students(self) -> StudentList:
        """Students whose score is above 6."""
        return StudentList(s for s in self._students if s.score > 6)

    def worst_students(self) -> StudentList:
        """Students whose score is below 4."""
        return StudentList(s for s in self._students if s.score < 4)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return (replace(s) for s in self._students)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentList):
            return NotImplemented
        return self._students == other._students

    def __repr__(self) -> str:
        return f"StudentList({self._students!r})"

    def __str__(self) -> str:
        if not self._students:
            return "[]"
        body = ", \n".join(f"  {s}" for s in self._students)
        return f"[\n{body}\n]"