# -*- coding: utf-8 -*-
"""
Solvers: each takes a ProblemState and returns a SolverOutcome.

  - weight_dp.solve_by_weight   exact, O(items x capacity)
  - value_dp.solve_by_value     exact, O(items x sum of values)
  - greedy.run_greedy           approximate, O(items log items)
  - exhaustive.run_exhaustive   exact ground truth, O(2^items)
"""
