"""Preference list generators.

Each generator fills the `pref_list` of every participant of a `Pool` with a
permutation of the opposite group.
"""

from stablemarriage.person import ConfigurationError, PreferenceList

__all__ = [
    "set_custom_pool_lists", "set_worst_case_pool_lists",
    "set_exponential_stable_matchings_pool_lists"
]


def _rotate(li, k):
  """Rotate a list to the left by k (to the right if k is negative)."""
  if not li:
    return list(li)
  k %= len(li)
  return li[k:] + li[:k]


def _sanity_check(n, lists, zero_index, group_name):
  """Check that `lists` holds n permutations of the opposite group."""
  if len(lists) != n:
    raise ConfigurationError(
        "Expected {0} {1} preference lists, got {2}".format(
            n, group_name, len(lists)))
  offset = 0 if zero_index else 1
  expected = list(range(offset, n + offset))
  for i, li in enumerate(lists):
    if sorted(li) != expected:
      raise ConfigurationError(
          "Preference list {0} of {1} is not a permutation of {2}".format(
              i, group_name, expected))


def set_custom_pool_lists(pool, proposer_lists, reviewer_lists,
                          zero_index=True):
  """Set preference lists from explicit rankings.

  Args:
    pool: a `Pool` object.
    proposer_lists: list of n lists, `proposer_lists[i][k]` is the index of the
      k-th most preferred reviewer of proposer i.
    reviewer_lists: same as above for reviewers ranking proposers.
    zero_index: bool, optional
      If False, indices in the lists start from 1. Default is True.

  Returns:
    The pool.

  Raises:
    ConfigurationError if a list is not a permutation of the opposite group.
  """
  n = pool.n_people
  _sanity_check(n, proposer_lists, zero_index, "proposers")
  _sanity_check(n, reviewer_lists, zero_index, "reviewers")
  offset = 0 if zero_index else 1
  for m, li in zip(pool.proposers, proposer_lists):
    m.pref_list = PreferenceList([pool.reviewers[j - offset] for j in li])
  for w, li in zip(pool.reviewers, reviewer_lists):
    w.pref_list = PreferenceList([pool.proposers[j - offset] for j in li])
  return pool


def worst_case_lists(n):
  """Rankings that make Gale-Shapley run n(n-1)+1 proposals.

  See Kapur and Krishnamoorthy, "Worst-case choice for the stable marriage
  problem".
  """
  proposer_lists = []
  for i in range(n):
    li = list(range(n))
    last = li.pop()
    li = _rotate(_rotate(li, -1), i)
    proposer_lists.append(li + [last])
  reviewer_lists = []
  for i in range(n):
    li = list(range(n))
    if i <= n - 3:
      li = _rotate(li, i + 2)
    elif i == n - 2:
      li = _rotate(li, 1)
    reviewer_lists.append(li)
  return proposer_lists, reviewer_lists


def set_worst_case_pool_lists(pool):
  """Set preference lists maximizing the number of Gale-Shapley proposals."""
  proposer_lists, reviewer_lists = worst_case_lists(pool.n_people)
  return set_custom_pool_lists(pool, proposer_lists, reviewer_lists)


def exponential_stable_matchings_lists(n):
  """Rankings meant to admit an exponential number of stable matchings.

  A rotation/reversal shortcut of Thurber's construction ("Concerning the
  maximum number of stable matchings in the stable marriage problem"). It
  gives the maximum for n <= 4 but is not verified for larger n.

  Raises:
    ConfigurationError if n is not a power of two.
  """
  if n < 1 or n & (n - 1):
    raise ConfigurationError(
        "Group size must be a power of two, got {0}".format(n))
  proposer_lists = []
  for i in range(n):
    row = list(range(n))
    if i % 2 == 0:
      row = _rotate(row, i)
    else:
      row = _rotate(row[::-1], i + 1)
    proposer_lists.append(row)
  reviewer_lists = [row[::-1] for row in proposer_lists]
  return proposer_lists, reviewer_lists


def set_exponential_stable_matchings_pool_lists(pool, verbose=False):
  """Set preference lists admitting many stable matchings.

  Args:
    pool: a `Pool` object whose size is a power of two.
    verbose: bool, optional
      If set to True, the generated lists are printed. Default is False.
  """
  proposer_lists, reviewer_lists = exponential_stable_matchings_lists(
      pool.n_people)
  if verbose:
    print("Proposer lists: {0}".format(proposer_lists))
    print("Reviewer lists: {0}".format(reviewer_lists))
  return set_custom_pool_lists(pool, proposer_lists, reviewer_lists)
