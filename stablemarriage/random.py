"""Random Pool Generators"""

import numpy as np

import stablemarriage.pool
import stablemarriage.preflists

__all__ = ["set_randomized_pool_lists", "gen_random_pool"]


def random_lists(n, rng=None):
  """Draw n uniformly random permutations of range(n).

  Args:
    n: int
      Size of each permutation.
    rng: numpy.random.Generator, optional
      Source of randomness. Default uses numpy's global random state.
  """
  rng = np.random if rng is None else rng
  return np.argsort(rng.random((n, n))).tolist()


def set_randomized_pool_lists(pool, rng=None):
  """Give everyone in the pool a uniformly random preference list."""
  n = pool.n_people
  return stablemarriage.preflists.set_custom_pool_lists(
      pool, random_lists(n, rng), random_lists(n, rng))


def gen_random_pool(n_people, seed=None):
  """Generate a pool where all preference lists are uniformly random.

  Args:
    n_people: int
      Number of people in each group.
    seed: int, optional
      Seed of the random generator. Default draws fresh entropy.

  Returns:
    A `Pool` object.
  """
  pool = stablemarriage.pool.Pool(n_people)
  return set_randomized_pool_lists(pool, np.random.default_rng(seed))
