from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from epicurain.features.recipes.domain.models import (
    DEFAULT_MEAL,
    CompletionResult,
    RecipeRequestParams,
    RejectionReason,
)
from epicurain.features.recipes.domain.prompts import build_prompt
from epicurain.shared.config.settings import settings
from epicurain.shared.llm.openai_client import ChatClient, OpenAIChatClient, extract_first_message

log = logging.getLogger("recipes")


def parse_int_or_default(value: Any, default: int = 0) -> int:
    """
    Parse form text as a non-negative integer.
    Integral float text ("2.0") is accepted; blanks, non-numeric text and
    non-integral numbers give `default`. Negative values are clamped to 0.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return max(value, 0)
    text = str(value).strip()
    if not text:
        return default
    try:
        n = int(text)
    except ValueError:
        try:
            f = float(text)
        except ValueError:
            return default
        if not f.is_integer():
            return default
        n = int(f)
    return max(n, 0)


def _text(raw: Mapping[str, Any], key: str, default: str = "") -> str:
    v = raw.get(key)
    return default if v is None else str(v).strip()


def extract_params(raw: Mapping[str, Any]) -> RecipeRequestParams:
    return RecipeRequestParams(
        ingredients_list=_text(raw, "ingredientsList"),
        equipment_list=_text(raw, "equipmentList"),
        num_adults=parse_int_or_default(raw.get("numAdults")),
        num_children=parse_int_or_default(raw.get("numChildren")),
        meal=_text(raw, "mealName", DEFAULT_MEAL),
    )


def validate_params(params: RecipeRequestParams) -> Optional[RejectionReason]:
    if not params.ingredients_list or not params.equipment_list:
        return RejectionReason.MISSING_REQUIRED_FIELD
    if params.num_adults + params.num_children < 1:
        return RejectionReason.INSUFFICIENT_HEADCOUNT
    return None


class RecipeOrchestrator:
    """
    Turns one form submission into at most one chat completion call.
    Validation failures and upstream errors both yield None.
    """

    def __init__(self, client: Optional[ChatClient] = None, *, model: Optional[str] = None, debug: Optional[bool] = None) -> None:
        self._client = client
        self.model = model or settings.CHAT_MODEL
        self.debug = settings.is_development if debug is None else debug

    def _get_client(self) -> ChatClient:
        return self._client if self._client is not None else OpenAIChatClient()

    def classify(self, raw_input: Mapping[str, Any]) -> Optional[RejectionReason]:
        return validate_params(extract_params(raw_input))

    async def handle(self, raw_input: Mapping[str, Any]) -> Optional[CompletionResult]:
        params = extract_params(raw_input)
        reason = validate_params(params)
        if reason is not None:
            log.debug("recipe request rejected: %s", reason.value)
            return None

        prompt = build_prompt(params)
        if self.debug:
            log.info("recipe prompt:\n%s", prompt.user_instruction)

        try:
            data = await self._get_client().create_chat_completion(prompt.to_messages(), model=self.model)
            text = extract_first_message(data)
        except Exception:
            log.exception("chat completion failed")
            return None

        return CompletionResult(generated_text=text)

