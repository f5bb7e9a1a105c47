# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError
from .items import RawItem, NormalizedItem, SelectedItem, to_decimal
from .optimization import OptimizationRequest, OptimizationResponse

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    # core models
    "RawItem",
    "NormalizedItem",
    "SelectedItem",
    "OptimizationRequest",
    "OptimizationResponse",
    # helpers
    "to_decimal",
]
