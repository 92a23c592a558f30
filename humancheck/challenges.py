"""
HumanCheck Challenge Bank

Knowledge questions and tracing targets issued to the client, plus the
answer check whose boolean result feeds the score model.
"""

import random
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from humancheck.errors import UnknownQuestionError
from humancheck.schemas.inputs import ShapeKind


# =============================================================================
# Question Model
# =============================================================================

class QuestionType(str, Enum):
    """Question family; selects the complexity tier used for timing."""
    MATH = "math"
    LOGIC = "logic"
    VISUAL = "visual"


class Question(BaseModel):
    """A knowledge question with its expected answer."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable question identifier")
    prompt: str = Field(..., description="Question text shown to the user")
    answer: str = Field(..., description="Expected answer (compared case-insensitively)")
    type: QuestionType = Field(..., description="Question family")


# Arithmetic takes longer than recall, multi-step logic longest
COMPLEXITY_TIERS: Dict[QuestionType, int] = {
    QuestionType.VISUAL: 1,
    QuestionType.MATH: 2,
    QuestionType.LOGIC: 3,
}


QUESTION_BANK: List[Question] = [
    Question(id="q1", prompt="What is 7 + 3?", answer="10", type=QuestionType.MATH),
    Question(id="q2", prompt="What is 12 - 5?", answer="7", type=QuestionType.MATH),
    Question(id="q3", prompt="What is 4 × 3?", answer="12", type=QuestionType.MATH),
    Question(
        id="q4",
        prompt="What color do you get when you mix red and yellow?",
        answer="orange",
        type=QuestionType.LOGIC,
    ),
    Question(id="q5", prompt="How many days are in a week?", answer="7", type=QuestionType.LOGIC),
    Question(id="q6", prompt="What comes after Tuesday?", answer="wednesday", type=QuestionType.LOGIC),
    Question(id="q7", prompt="Type the word: HELLO", answer="hello", type=QuestionType.VISUAL),
    Question(
        id="q8",
        prompt="What is the first letter of the alphabet?",
        answer="a",
        type=QuestionType.VISUAL,
    ),
]

_QUESTIONS_BY_ID: Dict[str, Question] = {q.id: q for q in QUESTION_BANK}


# =============================================================================
# Lookup & Selection
# =============================================================================

def complexity_tier(question_type: QuestionType) -> int:
    """Timing weighting factor for a question family."""
    return COMPLEXITY_TIERS[QuestionType(question_type)]


def get_question(question_id: str) -> Question:
    """Look up a question by id, raising UnknownQuestionError if absent."""
    try:
        return _QUESTIONS_BY_ID[question_id]
    except KeyError:
        raise UnknownQuestionError(question_id) from None


def random_question(rng: Optional[random.Random] = None) -> Question:
    """Pick a question uniformly from the bank."""
    return (rng or random).choice(QUESTION_BANK)


def random_shape(rng: Optional[random.Random] = None) -> ShapeKind:
    """Pick a tracing target uniformly."""
    return (rng or random).choice(list(ShapeKind))


# =============================================================================
# Answer Check
# =============================================================================

def normalize_answer(answer: str) -> str:
    return answer.strip().lower()


def is_correct_answer(submitted: str, expected: str) -> bool:
    """Case-insensitive, whitespace-trimmed equality."""
    return normalize_answer(submitted) == normalize_answer(expected)
