"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from typing import List, Literal, Union

from pydantic import BaseModel, Field, field_validator

from mealboard.utilities.constants import DAYS_IN_WEEK

BlockType = Literal["oneNight", "twoNight", "takeaway", "mum"]


class CredentialsInput(BaseModel):
    """Schema for sign in / registration."""
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        v = v.strip().lower()
        if '@' not in v:
            raise ValueError('Email must contain @')
        return v


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: Union[int, float] = Field(..., gt=0, le=100000)
    unit: str = Field(..., min_length=1, max_length=20)

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class RecipeInput(BaseModel):
    """A new recipe always arrives with its first ingredient."""
    name: str = Field(..., min_length=1, max_length=200)
    ingredient: IngredientInput

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()


class PlaceBlockInput(BaseModel):
    type: BlockType
    day_index: int = Field(..., ge=0, le=DAYS_IN_WEEK - 1)


class CheckLineInput(BaseModel):
    line: str = Field(..., min_length=1)
    checked: bool = True


class SyncCheckedInput(BaseModel):
    """Every line currently ticked in the list view."""
    lines: List[str] = Field(default_factory=list)

