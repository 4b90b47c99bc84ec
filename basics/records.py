"""Plain record types with methods, used by the struct and ownership lessons."""

from __future__ import annotations

from dataclasses import dataclass

MAX_RATING = 5


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: int

    def __post_init__(self) -> None:
        if self.age < 0:
            raise ValueError(f"age must not be negative, got {self.age}")

    def describe(self) -> str:
        return f"Name: {self.name}, Age: {self.age}"


@dataclass(frozen=True, slots=True)
class Book:
    pages: int
    rating: int

    def __post_init__(self) -> None:
        if self.pages < 0:
            raise ValueError(f"pages must not be negative, got {self.pages}")
        if not 0 <= self.rating <= MAX_RATING:
            raise ValueError(f"rating must be between 0 and {MAX_RATING}, got {self.rating}")

    @classmethod
    def new(cls, pages: int, rating: int) -> "Book":
        return cls(pages=pages, rating=rating)

    def page_count_line(self) -> str:
        return f"Book has {self.pages} pages"

    def rating_line(self) -> str:
        return f"Book has a rating of {self.rating}/{MAX_RATING}"


def count_words(text: str) -> int:
    """Count whitespace-separated words without taking ownership of ``text``."""
    return len(text.split())
