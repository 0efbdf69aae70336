from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from epicurain.features.recipes.app.use_cases import RecipeOrchestrator


class FakeChatClient:
    def __init__(self, response: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def create_chat_completion(self, messages, *, model=None):
        self.calls.append({"messages": messages, "model": model})
        if self.error is not None:
            raise self.error
        return self.response


def completion(content: Optional[str]) -> Dict[str, Any]:
    return {"id": "chatcmpl-test", "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def valid_form() -> Dict[str, str]:
    return {
        "ingredientsList": "Salt, Pepper",
        "equipmentList": "Stove top",
        "numAdults": "2",
        "numChildren": "0",
        "mealName": "dinner",
    }


@pytest.fixture
def fake_client() -> FakeChatClient:
    return FakeChatClient(response=completion("Pan-seared something."))


@pytest.fixture
def orchestrator(fake_client) -> RecipeOrchestrator:
    return RecipeOrchestrator(fake_client, model="gpt-3.5-turbo", debug=False)


@pytest.fixture
def make_completion():
    return completion


@pytest.fixture
def make_client():
    return FakeChatClient
