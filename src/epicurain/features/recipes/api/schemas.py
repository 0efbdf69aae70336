from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union

class RecipePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ingredients_list: Optional[str] = Field(default=None, alias="ingredientsList")
    equipment_list: Optional[str] = Field(default=None, alias="equipmentList")
    num_adults: Optional[Union[int, float, str]] = Field(default=None, alias="numAdults")
    num_children: Optional[Union[int, float, str]] = Field(default=None, alias="numChildren")
    meal_name: Optional[str] = Field(default=None, alias="mealName")

    def to_form(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

class RecipeResponse(BaseModel):
    generatedOutput: str
