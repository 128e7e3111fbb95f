"""Brute-force stability kernels on rank matrices."""

import itertools

import numba as nb
import numpy as np

__all__ = ["rank_matrix", "has_blocking_pair", "stable_permutations"]


def rank_matrix(pref_lists):
  """Transform preference lists of indices into a rank matrix.

  Args:
    pref_lists: list of n lists, `pref_lists[i][k]` is the index of the k-th
      most preferred member of the opposite group for person i.

  Returns:
    An (n, n) int64 array `R` with `R[i, j]` the rank person i gives to
    person j of the opposite group.
  """
  n = len(pref_lists)
  ranks = np.empty((n, n), dtype=np.int64)
  for i, li in enumerate(pref_lists):
    ranks[i, li] = np.arange(len(li))
  return ranks


@nb.njit('boolean(int64[:,:], int64[:,:], int64[:])')
def has_blocking_pair(proposer_ranks, reviewer_ranks, match):
  """Check if a matching admits a blocking pair.

  Args:
    proposer_ranks: (n, n) matrix, `proposer_ranks[m, w]` is the rank of
      reviewer w in proposer m's list.
    reviewer_ranks: (n, n) matrix, `reviewer_ranks[w, m]` is the rank of
      proposer m in reviewer w's list.
    match: `match[m]` is the reviewer matched to proposer m, -1 if single.

  Returns:
    True if some proposer and reviewer strictly prefer each other to their
    current partners. Single people rank their absent partner last.
  """
  n = proposer_ranks.shape[0]
  partner_of = np.full(n, -1, dtype=np.int64)
  for m in range(n):
    if match[m] >= 0:
      partner_of[match[m]] = m
  for m in range(n):
    m_current = n if match[m] < 0 else proposer_ranks[m, match[m]]
    for w in range(n):
      if w == match[m]:
        continue
      if proposer_ranks[m, w] >= m_current:
        continue
      w_current = n
      if partner_of[w] >= 0:
        w_current = reviewer_ranks[w, partner_of[w]]
      if reviewer_ranks[w, m] < w_current:
        return True
  return False


def stable_permutations(proposer_ranks, reviewer_ranks):
  """Enumerate all stable perfect matchings by brute force.

  Tries all n! assignments, so only meant for small n.

  Returns:
    A list of tuples `p`, where proposer m is matched to reviewer `p[m]`.
  """
  n = proposer_ranks.shape[0]
  stable = []
  for perm in itertools.permutations(range(n)):
    if not has_blocking_pair(proposer_ranks, reviewer_ranks,
                             np.array(perm, dtype=np.int64)):
      stable.append(perm)
  return stable
