"""
Stable Marriage
=============================================
Computing stable matchings between two groups of equal size with the
Gale-Shapley deferred acceptance algorithm.

Example:

Suppose that we would like to match 2 proposers (m0, m1) with 2 reviewers
(w0, w1). Everyone ranks the whole opposite group, from the most preferable to
the least preferable. Proposer m0 ranks w0 > w1 and proposer m1 ranks w1 > w0:
---------------------------------------------
  >>> proposer_lists = [[0, 1],
  ...                   [1, 0]]
---------------------------------------------
Reviewer w0 ranks m0 > m1 and reviewer w1 ranks m1 > m0:
---------------------------------------------
  >>> reviewer_lists = [[0, 1],
  ...                   [1, 0]]
---------------------------------------------
Create the pool, set the preference lists and run the matching:
---------------------------------------------
  >>> import stablemarriage
  >>> pool = stablemarriage.Pool(2)
  >>> pool = stablemarriage.set_custom_pool_lists(
  ...     pool, proposer_lists, reviewer_lists)
  >>> rounds, stable = stablemarriage.run_matching(pool)
  >>> pool.assignment()
  [0, 1]
---------------------------------------------
Instead of explicit lists, one can use a generator:
set_worst_case_pool_lists (most Gale-Shapley proposals),
set_randomized_pool_lists (uniformly random lists), or
set_exponential_stable_matchings_pool_lists (many stable matchings, power of
two sizes only; only checked for sizes up to 4).

For small pools, all stable matchings can be counted by brute force:
---------------------------------------------
  >>> pool.count_stable_matchings()
  1
---------------------------------------------
"""

from stablemarriage.person import *
from stablemarriage.pool import *
from stablemarriage.preflists import *
from stablemarriage.random import *
from stablemarriage.matching import *
