"""Pool of proposers and reviewers.

Create a pool, set preference lists of everyone, and query the stability of
the current engagements.
"""

import numpy as np

import stablemarriage.core
from stablemarriage.person import (
    ConfigurationError, NotEngagedError, Participant
)

__all__ = ["Pool"]


class Pool():
  """Two groups of equal size whose members rank each other.

  Attributes:
    n_people: size of each group.
    proposers: list of `Participant` objects of the proposer group.
    reviewers: list of `Participant` objects of the reviewer group.
  """
  def __init__(self, n_people):
    """
    Args:
      n_people: number of people in each group, at least 1.

    Raises:
      ConfigurationError if `n_people` is smaller than 1.
    """
    if n_people < 1:
      raise ConfigurationError(
          "A pool needs at least one person per group, got {0}".format(
              n_people))
    self.n_people = n_people
    self.proposers = [Participant(i, True) for i in range(n_people)]
    self.reviewers = [Participant(i, False) for i in range(n_people)]

  def __repr__(self):
    return "<Pool with {n} proposers and {n} reviewers>".format(
        n=self.n_people)

  def group(self, proposers=True):
    return self.proposers if proposers else self.reviewers

  def has_pref_lists(self):
    """True once every participant owns a preference list."""
    return all(p.pref_list is not None
               for p in self.proposers + self.reviewers)

  def assignment(self):
    """Current matching as a list: proposer index -> reviewer index or -1."""
    return [-1 if m.single() else m.engaged_to.index for m in self.proposers]

  def engagements(self):
    """Structured report of the engagements.

    Returns:
      A list with one tuple per proposer: `(name, partner_name,
      preference_distance, partner_preference_distance)`, where the last three
      entries are None for a single proposer.
    """
    report = []
    for m in self.proposers:
      if m.single():
        report.append((m.name, None, None, None))
      else:
        w = m.engaged_to
        report.append((m.name, w.name, m.preference_distance(),
                       w.preference_distance()))
    return report

  def pp_engagements(self):
    """Print the engagements of all proposers."""
    for name, partner, pd, partner_pd in self.engagements():
      if partner is None:
        print("{0}(pd=None) is engaged to --".format(name))
      else:
        print("{0}(pd={1}) is engaged to {2}(pd={3})".format(
            name, pd, partner, partner_pd))

  def _group_preference_distance(self, group):
    total = 0
    for p in group:
      if p.single():
        raise NotEngagedError(
            "{0} is single, preference distance is undefined".format(p.name))
      total += p.preference_distance()
    return total

  def aggregate_preference_distance(self, proposers=True):
    """Sum of preference distances over a group.

    Raises:
      NotEngagedError if any member of the group is single.
    """
    return self._group_preference_distance(self.group(proposers))

  def proposer_preference_distance(self):
    return self.aggregate_preference_distance(proposers=True)

  def reviewer_preference_distance(self):
    return self.aggregate_preference_distance(proposers=False)

  def has_rogue_couples(self):
    """Check if the current engagements contain a blocking pair.

    A proposer m and a reviewer w not engaged to each other form a rogue couple
    if both strictly prefer each other to their current partners. A single
    person prefers anyone to staying single.
    """
    n = self.n_people
    for m in self.proposers:
      m_current = n if m.single() else m.rank_of(m.engaged_to)
      for w in self.reviewers:
        if w is m.engaged_to or m.rank_of(w) >= m_current:
          continue
        w_current = n if w.single() else w.rank_of(w.engaged_to)
        if w.rank_of(m) < w_current:
          return True
    return False

  def rank_matrices(self):
    """Snapshot of all preference lists as rank matrices.

    The snapshot shares no state with the pool, the brute-force routines work
    on it instead of the live engagements.

    Returns:
      1. (n, n) int64 array of ranks proposers give to reviewers.
      2. (n, n) int64 array of ranks reviewers give to proposers.
    """
    assert(self.has_pref_lists())
    proposer_lists = [[w.index for w in m.pref_list] for m in self.proposers]
    reviewer_lists = [[m.index for m in w.pref_list] for w in self.reviewers]
    return (stablemarriage.core.rank_matrix(proposer_lists),
            stablemarriage.core.rank_matrix(reviewer_lists))

  def stable_matchings(self):
    """All stable matchings of the pool, found by brute force over n!
    assignments.

    Returns:
      A list of tuples `p`, where proposer i is matched to reviewer `p[i]`.
    """
    proposer_ranks, reviewer_ranks = self.rank_matrices()
    return stablemarriage.core.stable_permutations(
        proposer_ranks, reviewer_ranks)

  def count_stable_matchings(self):
    return len(self.stable_matchings())

  def is_stable_assignment(self, assignment):
    """Check an assignment (proposer index -> reviewer index) for stability
    without touching the engagements of the pool.

    Raises:
      ValueError if `assignment` is not a matching of this pool, i.e. its
        length differs from the group size, an index is out of range, or a
        reviewer is assigned twice. Use -1 for a single proposer.
    """
    if len(assignment) != self.n_people:
      raise ValueError("Assignment of length {0} for a pool of size {1}".format(
          len(assignment), self.n_people))
    taken = [j for j in assignment if j != -1]
    if any(not 0 <= j < self.n_people for j in taken):
      raise ValueError("Reviewer index out of range in {0}".format(
          list(assignment)))
    if len(taken) != len(set(taken)):
      raise ValueError("Reviewer assigned twice in {0}".format(
          list(assignment)))
    proposer_ranks, reviewer_ranks = self.rank_matrices()
    return not stablemarriage.core.has_blocking_pair(
        proposer_ranks, reviewer_ranks, np.array(assignment, dtype=np.int64))
