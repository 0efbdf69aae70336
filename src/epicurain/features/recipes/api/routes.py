from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from epicurain.features.recipes.api.schemas import RecipePayload, RecipeResponse
from epicurain.features.recipes.app.use_cases import RecipeOrchestrator, parse_int_or_default
from epicurain.features.recipes.domain.models import DEFAULT_MEAL, MEALS
from epicurain.features.recipes.domain.pantry import ItemKind, PantrySelection, apply_edit, parse_action

TITLE = "EpicurAIn"
DESC = "Your personal AI Recipe Generator"

log = logging.getLogger("recipes")

router = APIRouter(tags=["recipes"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[3] / "templates"))


def get_orchestrator() -> RecipeOrchestrator:
    return RecipeOrchestrator()


async def _read_form(request: Request) -> Dict[str, str]:
    form = await request.form()
    return {k: str(form.get(k)) for k in form.keys()}


def _render(
    request: Request,
    selection: PantrySelection,
    form: Optional[Mapping[str, Any]] = None,
    generated_output: str = "",
) -> HTMLResponse:
    form = form or {}
    context = {
        "title": TITLE,
        "desc": DESC,
        "kinds": list(ItemKind),
        "selection": selection,
        "num_adults": parse_int_or_default(form.get("numAdults"), 2),
        "num_children": parse_int_or_default(form.get("numChildren"), 0),
        "meal": form.get("mealName") or DEFAULT_MEAL,
        "meals": MEALS,
        "generated_output": generated_output,
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return _render(request, PantrySelection.default())


@router.post("/pantry", response_class=HTMLResponse)
async def edit_pantry(request: Request):
    form = await _read_form(request)
    try:
        op, kind, item = parse_action(form.get("action", ""))
    except ValueError as e:
        log.warning("rejected pantry edit: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    if not item:
        item = form.get(kind.input_name, "")
    selection = apply_edit(PantrySelection.from_form(form), op, kind, item)
    return _render(request, selection, form)


@router.post("/", response_class=HTMLResponse)
async def generate_page(request: Request, orchestrator: RecipeOrchestrator = Depends(get_orchestrator)):
    form = await _read_form(request)
    result = await orchestrator.handle(form)
    return _render(request, PantrySelection.from_form(form), form, result.generated_text if result else "")


@router.post("/v1/recipes/generate", response_model=Optional[RecipeResponse])
async def generate_api(payload: RecipePayload, orchestrator: RecipeOrchestrator = Depends(get_orchestrator)):
    result = await orchestrator.handle(payload.to_form())
    return result.to_response() if result else None
