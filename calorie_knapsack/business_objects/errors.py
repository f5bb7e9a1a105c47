# -*- coding: utf-8 -*-
"""
Exceptions shared by the calorie knapsack layers.

Both subclass ValueError. ``optimize`` never lets them escape: it turns them
into "Validation: ..." notes on an infeasible response.
"""


class SchemaError(ValueError):
    """Raised when a request document or raw field has the wrong shape (e.g. a non-numeric weight)."""


class StateValidationError(ValueError):
    """Raised when a request or solver state violates a domain rule (e.g. weight_kg <= 0)."""
