from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MEAL = "dinner"
MEALS = ("breakfast", "lunch", "dinner", "snack")


class RecipeRequestParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    ingredients_list: str
    equipment_list: str
    num_adults: int = Field(default=0, ge=0)
    num_children: int = Field(default=0, ge=0)
    meal: str = DEFAULT_MEAL


class PromptPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    system_role: str
    user_instruction: str

    def to_messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_role},
            {"role": "user", "content": self.user_instruction},
        ]


class CompletionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    generated_text: str = ""

    def to_response(self) -> Dict[str, str]:
        return {"generatedOutput": self.generated_text}


class RejectionReason(str, Enum):
    MISSING_REQUIRED_FIELD = "missing_required_field"
    INSUFFICIENT_HEADCOUNT = "insufficient_headcount"
