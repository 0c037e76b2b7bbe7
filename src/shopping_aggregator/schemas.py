"""Input and output schemas for ingredient aggregation."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from shopping_aggregator.config import get_settings
from shopping_aggregator.normalize.parser import format_quantity


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


# =============================================================================
# Input Schemas
# =============================================================================


class IngredientLine(BaseModel):
    """One ingredient line harvested from a recipe."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    recipe_id: str = Field(
        default_factory=lambda: get_settings().unknown_recipe_id,
        validation_alias=AliasChoices("recipeId", "recipe_id"),
    )
    original_text: str | None = Field(
        default=None,
        validation_alias=AliasChoices("originalText", "original_text", "rawText", "raw_text"),
    )
    quantity: float | str | None = None
    unit: str | None = None
    name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("name", "ingredientName", "ingredient_name"),
    )

    @field_validator("recipe_id", mode="before")
    @classmethod
    def coerce_recipe_id(cls, v: Any) -> str:
        """Accept numeric ids; missing ids become the unknown sentinel."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return get_settings().unknown_recipe_id
        return str(v).strip()

    @field_validator("original_text", "unit", "name", mode="before")
    @classmethod
    def blank_strings(cls, v: Any) -> Any:
        """Treat empty and whitespace-only strings as missing."""
        return _blank_to_none(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> Any:
        """Booleans are not quantities; blank strings are missing."""
        if isinstance(v, bool):
            return None
        return _blank_to_none(v)


class AggregateOptions(BaseModel):
    """Options for a single aggregation call."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    group_by_recipe: bool = False


# =============================================================================
# Output Schemas
# =============================================================================


class _OutputModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Component(_OutputModel):
    """Per-variant share of a merged item (one bell pepper color)."""

    label: str
    quantity: float
    unit: str | None = None


class ParsedLine(_OutputModel):
    """Quantity, unit and name resolved for one source line."""

    quantity: float | None = None
    unit: str | None = None
    name: str


class SourceLine(_OutputModel):
    """Provenance of an aggregated item."""

    recipe_id: str
    original_text: str | None = None
    parsed: ParsedLine


class AggregatedItem(_OutputModel):
    """One consolidated shopping-list entry."""

    display_name: str
    canonical_key: str
    total_quantity: float | None = None
    unit: str | None = None
    components: list[Component] | None = None
    source_lines: list[SourceLine] = Field(default_factory=list)
    notes: str | None = None
    recipe_id: str | None = None

    def display_quantity(self) -> str:
        """
        Human-readable quantity, e.g. "1 ⅓ tbsp".

        Falls back to the notes when the quantities could not be summed.
        """
        if self.total_quantity is None:
            return self.notes or ""
        quantity = format_quantity(self.total_quantity)
        return f"{quantity} {self.unit}" if self.unit else quantity
