from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

LessonFn = Callable[[], List[str]]


class UnknownLessonError(LookupError):
    """Raised when a lesson name is not registered."""


@dataclass(frozen=True, slots=True)
class Lesson:
    name: str
    summary: str
    run: LessonFn


class LessonRegistry:
    """Maps lesson names to the functions that produce their console lines."""

    def __init__(self) -> None:
        self._lessons: Dict[str, Lesson] = {}

    def register(self, name: str, summary: str) -> Callable[[LessonFn], LessonFn]:
        def decorator(func: LessonFn) -> LessonFn:
            if name in self._lessons:
                raise ValueError(f"lesson {name!r} is already registered")
            self._lessons[name] = Lesson(name=name, summary=summary, run=func)
            return func

        return decorator

    def get(self, name: str) -> Lesson:
        try:
            return self._lessons[name]
        except KeyError:
            known = ", ".join(self.names()) or "<none>"
            raise UnknownLessonError(f"Unknown lesson {name!r}. Known lessons: {known}") from None

    def names(self) -> List[str]:
        return sorted(self._lessons)

    def lessons(self) -> List[Lesson]:
        return [self._lessons[name] for name in self.names()]

    def run(self, name: str) -> List[str]:
        return list(self.get(name).run())


_registry = LessonRegistry()


def get_registry() -> LessonRegistry:
    return _registry


def register_lesson(name: str, summary: str) -> Callable[[LessonFn], LessonFn]:
    return _registry.register(name, summary)


def run_lesson(name: str) -> List[str]:
    return _registry.run(name)
