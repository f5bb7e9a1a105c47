# -*- coding: utf-8 -*-
"""
I/O helpers for loading optimization requests and rendering responses.

JSON request format (camelCase keys as sent by the web form):
  {"minCalorias": 15, "pesoMaximoKg": 10,
   "elementos": [{"id": "E1", "nombre": "Elemento 1", "pesoKg": 5, "calorias": 3}, ...]}

English keys are accepted as well:
  {"min_value": ..., "max_weight_kg": ..., "items": [{"id", "label", "weight_kg", "value"}]}

Numbers are parsed as Decimal so weights such as 0.1 stay exact.
"""

from __future__ import annotations
import json
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from calorie_knapsack.business_objects.errors import SchemaError
from calorie_knapsack.business_objects.items import RawItem
from calorie_knapsack.business_objects.optimization import OptimizationRequest, OptimizationResponse


def _require(obj: dict, keys: Sequence[str], path: str) -> object:
    for key in keys:
        if key in obj:
            return obj[key]
    raise SchemaError(f"{path}: missing required key '{keys[0]}' in object {obj}")


def _optional(obj: dict, keys: Sequence[str]) -> Any:
    for key in keys:
        if key in obj and obj[key] is not None:
            return obj[key]
    return None


def _as_int(raw: object, path: str) -> int:
    if isinstance(raw, bool):
        raise SchemaError(f"{path}: expected an integer, got {raw!r}.")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, Decimal) and raw == raw.to_integral_value():
        return int(raw)
    raise SchemaError(f"{path}: expected an integer, got {raw!r}.")


def parse_request(data: Any, path: str = "<request>") -> OptimizationRequest:
    """Build an OptimizationRequest from already-decoded JSON data."""
    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")

    min_value = _as_int(_require(data, ("minCalorias", "min_value"), path), f"{path}.minCalorias")
    max_weight = _require(data, ("pesoMaximoKg", "max_weight_kg"), path)
    raw_items = _require(data, ("elementos", "items"), path)
    if not isinstance(raw_items, list):
        raise SchemaError(f"{path}: expected 'elementos' to be a JSON array.")

    items: List[RawItem] = []
    for idx, obj in enumerate(raw_items):
        where = f"{path}[{idx}]"
        if not isinstance(obj, dict):
            raise SchemaError(f"{where}: expected an object.")
        iid = _optional(obj, ("id",))
        label = _optional(obj, ("nombre", "label"))
        items.append(RawItem(
            id=None if iid is None else str(iid),
            label=None if label is None else str(label),
            weight_kg=_require(obj, ("pesoKg", "weight_kg"), where),
            value=_as_int(_require(obj, ("calorias", "value"), where), f"{where}.calorias"),
        ))

    return OptimizationRequest(min_value=min_value, max_weight_kg=max_weight, items=items)


def read_request_json(path: str) -> OptimizationRequest:
    """
    Load a request from a JSON file.

    Raises
    ------
    SchemaError
        If the file cannot be read/parsed or violates the expected shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal, parse_int=int)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e
    return parse_request(data, path)


def response_to_dict(response: OptimizationResponse) -> Dict[str, Any]:
    """Render a response with the camelCase keys used by the web form."""
    return {
        "esFactible": response.feasible,
        "pesoTotalKg": float(response.total_weight_kg),
        "caloriasTotales": response.total_value,
        "elementosSeleccionados": [
            {
                "id": it.id,
                "nombre": it.label,
                "pesoKg": float(it.weight_kg),
                "calorias": it.value,
            }
            for it in response.selected_items
        ],
        "algoritmo": response.strategy,
        "escaladoPeso": response.weight_scaling,
        "notas": list(response.notes),
    }
