from dataclasses import dataclass, field
from typing import List, Optional

from schemas import QuizQuestion


@dataclass
class QuizSession:
    questions: List[QuizQuestion]
    current: int = 0
    score: int = 0
    selected: Optional[int] = None
    finished: bool = False
    answers: List[int] = field(default_factory=list)

    @property
    def question(self) -> Optional[QuizQuestion]:
        if self.finished or not self.questions:
            return None
        return self.questions[self.current]

    @property
    def answered(self) -> bool:
        return self.selected is not None

    @property
    def is_last(self) -> bool:
        return self.current >= len(self.questions) - 1

    def select(self, index: int) -> bool:
        """Lock in an answer for the current question; later selections are ignored."""
        if self.answered or self.question is None:
            return False
        if not 0 <= index < len(self.question.options):
            raise ValueError(f"Option {index} out of range")
        self.selected = index
        self.answers.append(index)
        if index == self.question.correctAnswer:
            self.score += 1
        return True

    def next(self):
        if not self.answered:
            return
        if self.is_last:
            self.finished = True
        else:
            self.current += 1
        self.selected = None

    def restart(self, questions: List[QuizQuestion]):
        self.questions = questions
        self.current = 0
        self.score = 0
        self.selected = None
        self.finished = False
        self.answers = []
