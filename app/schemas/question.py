from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, List
from datetime import datetime


class QuestionOption(BaseModel):
    id: str
    text: str

    model_config = ConfigDict(from_attributes=True)


def validate_option_set(options: List[QuestionOption], correct_option_id: str):
    option_ids = [option.id for option in options]
    if len(option_ids) != len(set(option_ids)):
        raise ValueError("Option ids must be unique within a question.")
    if correct_option_id not in option_ids:
        raise ValueError("correct_option_id must reference one of the question's options.")


class QuestionBase(BaseModel):
    question_text: str
    options: List[QuestionOption] = Field(..., min_length=2)
    correct_option_id: str
    points: int = Field(default=1, ge=0)
    is_manual: bool = False

    @model_validator(mode="after")
    def check_options(self):
        validate_option_set(self.options, self.correct_option_id)
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "question_text": "Which syntax does React use to describe UI elements?",
                "options": [
                    {"id": "a", "text": "HTML"},
                    {"id": "b", "text": "JSX"},
                    {"id": "c", "text": "XML"},
                    {"id": "d", "text": "JSON"}
                ],
                "correct_option_id": "b",
                "points": 10,
                "is_manual": True
            }
        }

class QuestionCreate(QuestionBase):
    pass

class QuestionUpdate(BaseModel):
    # Cross-field checks run in the service after merging with the stored question
    question_text: Optional[str] = None
    options: Optional[List[QuestionOption]] = Field(default=None, min_length=2)
    correct_option_id: Optional[str] = None
    points: Optional[int] = Field(default=None, ge=0)
    position: Optional[int] = None

class Question(QuestionBase):
    id: int
    test_id: int
    position: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class SessionQuestion(BaseModel):
    """A question as shown to a test taker, without the answer key."""
    id: int
    question_text: str
    options: List[QuestionOption]
    points: int

    model_config = ConfigDict(from_attributes=True)
