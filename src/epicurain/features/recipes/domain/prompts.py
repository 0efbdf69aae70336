# src/epicurain/features/recipes/domain/prompts.py
from epicurain.features.recipes.domain.models import PromptPayload, RecipeRequestParams

ROLE_INSTRUCTION = (
    "You are a trustworthy and experienced chef's assistant with an excellent grasp of cooking. "
    "You are also pragmatic and focus on dishes that are easy to assemble and use minimal ingredients."
)

NO_RECIPE_INSTRUCTION = """If there's no viable recipe, such as the ingredients list doesn't include any protein,
do not assume I have other ingredients or equipment and tell me that there's no recipe."""

RECIPE_REQUEST_TEMPLATE = """Try to create a recipe with only these available ingredients: {ingredients}.
And available equipment: {equipment}.
This is for a {meal} for {household}.
Not all ingredients or equipment need to be used. Do not assume I have other equipment or that I have any other ingredients.
{no_recipe}"""


def _count(n: int, singular: str, plural: str) -> str:
    if n <= 0:
        return ""
    return f"1 {singular}" if n == 1 else f"{n} {plural}"


def household_clause(num_adults: int, num_children: int) -> str:
    parts = [p for p in (_count(num_adults, "adult", "adults"), _count(num_children, "child", "children")) if p]
    return " and ".join(parts)


def build_instruction(params: RecipeRequestParams) -> str:
    return RECIPE_REQUEST_TEMPLATE.format(
        ingredients=params.ingredients_list,
        equipment=params.equipment_list,
        meal=params.meal,
        household=household_clause(params.num_adults, params.num_children),
        no_recipe=NO_RECIPE_INSTRUCTION,
    )


def build_prompt(params: RecipeRequestParams) -> PromptPayload:
    return PromptPayload(system_role=ROLE_INSTRUCTION, user_instruction=build_instruction(params))
