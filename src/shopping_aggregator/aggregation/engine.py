"""
Ingredient aggregation engine.

Groups ingredient lines from many recipes by canonical name and merges each
group into a single shopping-list item. Quantities are summed only when every
line's unit is compatible; otherwise the group carries an explanatory note.
"""

import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from shopping_aggregator.logging_config import LoggingContext, get_logger
from shopping_aggregator.normalize.names import (
    BellPepperName,
    CompoundName,
    FamilyName,
    NormalizedName,
    PlainName,
    normalize_ingredient_name,
)
from shopping_aggregator.normalize.parser import (
    extract_name_from_text,
    format_number,
    parse_ingredient_string,
    to_number,
)
from shopping_aggregator.normalize.units import (
    are_units_compatible,
    convert_quantity,
    normalize_unit,
)
from shopping_aggregator.schemas import (
    AggregatedItem,
    AggregateOptions,
    Component,
    IngredientLine,
    ParsedLine,
    SourceLine,
)

logger = get_logger(__name__)

# parse(text) -> object or mapping with "quantity" and "unit"
IngredientParser = Callable[[str], Any]

UNSPECIFIED_COLOR = "unspecified"


@dataclass(frozen=True)
class GroupedLine:
    """A line resolved to its name, quantity and unit."""

    recipe_id: str
    original_text: str | None
    quantity: float | str | None
    unit: str | None
    name: NormalizedName


@dataclass
class AggregationGroup:
    """Lines sharing a canonical key (and recipe, when grouping by recipe)."""

    canonical_key: str
    name: NormalizedName
    recipe_id: str | None = None
    lines: list[GroupedLine] = field(default_factory=list)


# =============================================================================
# Line Resolution
# =============================================================================


def _coerce_line(raw: Any) -> IngredientLine | None:
    if isinstance(raw, IngredientLine):
        return raw
    if not isinstance(raw, Mapping):
        logger.warning(f"Skipping ingredient line of type {type(raw).__name__}")
        return None
    try:
        return IngredientLine.model_validate(dict(raw))
    except ValidationError as e:
        logger.warning(f"Skipping invalid ingredient line {raw!r}: {e.error_count()} error(s)")
        return None


def _coerce_options(options: Any) -> AggregateOptions:
    if isinstance(options, AggregateOptions):
        return options
    if isinstance(options, Mapping):
        try:
            return AggregateOptions.model_validate(dict(options))
        except ValidationError as e:
            logger.warning(f"Ignoring invalid aggregation options: {e.error_count()} error(s)")
    return AggregateOptions()


def _parser_field(parsed: Any, name: str) -> Any:
    if isinstance(parsed, Mapping):
        return parsed.get(name)
    return getattr(parsed, name, None)


def _resolve_quantity_and_unit(
    line: IngredientLine,
    parser: IngredientParser,
) -> tuple[float | str | None, str | None]:
    """
    Take quantity and unit from the line, asking the parser only for what is missing.

    Example:
        {"quantity": 2, "originalText": "2 eggs"} -> (2, "piece")
    """
    unit = normalize_unit(line.unit) or line.unit
    quantity = line.quantity

    if (quantity is None or not unit) and line.original_text:
        try:
            parsed = parser(line.original_text)
        except Exception as e:
            logger.warning(f"Parser failed on {line.original_text!r}: {e}")
            return quantity, unit

        if quantity is None:
            quantity = _parser_field(parsed, "quantity")
        parsed_unit = _parser_field(parsed, "unit")
        if not unit and parsed_unit:
            unit = normalize_unit(parsed_unit) or parsed_unit

    return quantity, unit


def _group_lines(
    lines: list[Any] | tuple[Any, ...],
    options: AggregateOptions,
    parser: IngredientParser,
) -> dict[tuple[str | None, str], AggregationGroup]:
    groups: dict[tuple[str | None, str], AggregationGroup] = {}

    for raw in lines:
        line = _coerce_line(raw)
        if line is None:
            continue

        raw_name = line.name or extract_name_from_text(line.original_text)
        name = normalize_ingredient_name(raw_name)
        if not name.canonical_key:
            logger.debug(f"Dropping line with no usable name: {line.original_text!r}")
            continue

        quantity, unit = _resolve_quantity_and_unit(line, parser)

        recipe_key = line.recipe_id if options.group_by_recipe else None
        key = (recipe_key, name.canonical_key)
        group = groups.get(key)
        if group is None:
            group = AggregationGroup(
                canonical_key=name.canonical_key,
                name=name,
                recipe_id=recipe_key,
            )
            groups[key] = group

        group.lines.append(
            GroupedLine(
                recipe_id=line.recipe_id,
                original_text=line.original_text or raw_name,
                quantity=quantity,
                unit=unit,
                name=name,
            )
        )

    return groups


# =============================================================================
# Reducers
# =============================================================================


def _source_lines(group: AggregationGroup) -> list[SourceLine]:
    return [
        SourceLine(
            recipe_id=line.recipe_id,
            original_text=line.original_text,
            parsed=ParsedLine(
                quantity=to_number(line.quantity),
                unit=line.unit,
                name=group.name.display_name,
            ),
        )
        for line in group.lines
    ]


def _reduce_bell_peppers(group: AggregationGroup) -> AggregatedItem:
    """
    Merge bell peppers of every color into one item with a per-color breakdown.

    Example:
        1 red + 2 green -> total 3, components [red 1, green 2],
        notes "Breakdown: 1 red, 2 green"
    """
    # color -> [summed quantity, line count]
    colors: dict[str, list[float]] = {}
    grand_total = 0.0
    has_quantity = False

    for line in group.lines:
        color = line.name.color if isinstance(line.name, BellPepperName) else None
        tally = colors.setdefault(color or UNSPECIFIED_COLOR, [0.0, 0])
        tally[1] += 1

        quantity = to_number(line.quantity)
        if quantity is not None:
            tally[0] += quantity
            grand_total += quantity
            has_quantity = True

    components = [
        Component(label=color, quantity=summed or count)
        for color, (summed, count) in colors.items()
        if color != UNSPECIFIED_COLOR or len(colors) == 1
    ]

    breakdown = [
        f"{format_number(component.quantity)} {component.label}"
        for component in components
        if component.label != UNSPECIFIED_COLOR
    ]

    return AggregatedItem(
        display_name=group.name.display_name,
        canonical_key=group.canonical_key,
        total_quantity=grand_total if has_quantity else None,
        unit=None,
        components=components or None,
        source_lines=_source_lines(group),
        notes=f"Breakdown: {', '.join(breakdown)}" if breakdown else None,
        recipe_id=group.recipe_id,
    )


def _mixed_segment(line: GroupedLine) -> str:
    if line.quantity is None:
        return line.original_text or ""
    number = to_number(line.quantity)
    quantity = format_number(number) if number is not None else str(line.quantity)
    return f"{quantity} {line.unit}" if line.unit else quantity


def _build_mixed_notes(lines: list[GroupedLine]) -> str:
    """List each line's amount when they cannot be summed: "Mixed: 2 cup + 200 g"."""
    return "Mixed: " + " + ".join(_mixed_segment(line) for line in lines)


def _reduce_standard(group: AggregationGroup) -> AggregatedItem:
    """Sum a group's quantities in the first line's unit, or explain why not."""
    reference_unit = group.lines[0].unit

    if not all(are_units_compatible(reference_unit, line.unit) for line in group.lines):
        logger.debug(f"Incompatible units for {group.canonical_key!r}, listing separately")
        return AggregatedItem(
            display_name=group.name.display_name,
            canonical_key=group.canonical_key,
            total_quantity=None,
            unit=None,
            source_lines=_source_lines(group),
            notes=_build_mixed_notes(group.lines),
            recipe_id=group.recipe_id,
        )

    total = 0.0
    has_quantity = False
    for line in group.lines:
        quantity = to_number(line.quantity)
        if quantity is None:
            continue
        total += convert_quantity(quantity, line.unit, reference_unit)
        has_quantity = True

    return AggregatedItem(
        display_name=group.name.display_name,
        canonical_key=group.canonical_key,
        total_quantity=total if has_quantity else None,
        unit=reference_unit,
        source_lines=_source_lines(group),
        recipe_id=group.recipe_id,
    )


def _reduce_group(group: AggregationGroup) -> AggregatedItem:
    name = group.name
    if isinstance(name, BellPepperName):
        return _reduce_bell_peppers(group)
    if isinstance(name, (CompoundName, FamilyName, PlainName)):
        return _reduce_standard(group)
    raise TypeError(f"Unhandled normalized name: {type(name).__name__}")


# =============================================================================
# Entry Point
# =============================================================================


def aggregate_ingredients(
    lines: Any,
    options: AggregateOptions | Mapping[str, Any] | None = None,
    *,
    parser: IngredientParser | None = None,
) -> list[AggregatedItem]:
    """
    Consolidate ingredient lines from many recipes into shopping-list items.

    Args:
        lines: IngredientLine objects or mappings with recipeId, originalText,
            quantity, unit and name keys.
        options: AggregateOptions or a mapping such as {"groupByRecipe": True}.
        parser: Callable returning quantity and unit for raw text. Defaults
            to parse_ingredient_string.

    Returns:
        Aggregated items sorted case-insensitively by display name. Lines
        that cannot be named are dropped; nothing is raised for bad input.
    """
    if not isinstance(lines, (list, tuple)):
        logger.warning(f"Expected a list of ingredient lines, got {type(lines).__name__}")
        return []
    if not lines:
        return []

    resolved_options = _coerce_options(options)
    resolved_parser = parser or parse_ingredient_string

    with LoggingContext(aggregation_id=str(uuid.uuid4())):
        groups = _group_lines(lines, resolved_options, resolved_parser)
        items = [_reduce_group(group) for group in groups.values()]
        items.sort(key=lambda item: item.display_name.casefold())

        logger.info(
            f"Aggregated {len(lines)} lines into {len(items)} items "
            f"(group_by_recipe={resolved_options.group_by_recipe})"
        )

    return items
