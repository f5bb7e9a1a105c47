#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the calorie knapsack optimizer on a JSON request and print the response.

This script does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py
"""

from __future__ import annotations
import json
import logging

# ====== CONFIGURATION ======
# Path to a request JSON (see problems/sample/request.json); None = built-in sample
REQUEST_PATH = "problems/sample/request.json"

LOG_LEVEL = logging.INFO

# Policy overrides
SCALE_FACTOR = 1000
DP_DIMENSION_CEILING = 250_000
EXHAUSTIVE_ITEM_LIMIT = 25
# ============================

from calorie_knapsack import Policy, optimize, sample_request
from calorie_knapsack.utils.read_jsons import read_request_json, response_to_dict


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    request = read_request_json(REQUEST_PATH) if REQUEST_PATH else sample_request()

    policy = Policy(
        scale_factor=SCALE_FACTOR,
        dp_dimension_ceiling=DP_DIMENSION_CEILING,
        exhaustive_item_limit=EXHAUSTIVE_ITEM_LIMIT,
    )

    response = optimize(request, policy)

    print("\n=== Optimization Result ===")
    print(json.dumps(response_to_dict(response), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
