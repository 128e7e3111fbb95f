"""Gale-Shapley deferred acceptance on a `Pool`."""

from stablemarriage.person import MatchingStalledError

__all__ = ["GaleShapley", "run_matching"]


class GaleShapley():
  """Deferred acceptance engine.

  In every round, each proposer that is single at the start of the round
  proposes to its current favorite. Rounds are repeated until no proposer is
  single.

  Attributes:
    pool: the `Pool` being matched.
    proposers: the proposing group, `pool.proposers` for the proposer-optimal
      matching or `pool.reviewers` for the reviewer-optimal one.
    advance_on_rejection: if True, a rejected proposer moves on to its next
      candidate right away. If False, only a jilt moves a cursor, and a
      rejected proposer asks the same person again in the next round.
    rounds: number of rounds performed.
    num_proposals: number of proposals issued.
  """
  def __init__(self, pool, proposers_optimal=True, advance_on_rejection=True):
    assert(pool.has_pref_lists())
    self.pool = pool
    self.proposers = pool.group(proposers_optimal)
    self.advance_on_rejection = advance_on_rejection
    self.rounds = 0
    self.num_proposals = 0

  def single_proposers(self):
    return [p for p in self.proposers if p.single()]

  def _round(self, single_proposers, verbose):
    """Let every single proposer propose once.

    Returns:
      Number of accepted proposals.
    """
    accepted = 0
    for p in single_proposers:
      target = p.current_favorite()
      if verbose:
        print("{0} is proposing to {1}".format(p, target.name))
      self.num_proposals += 1
      if p.propose(target):
        accepted += 1
      elif self.advance_on_rejection:
        p.pref_list.advance()
    return accepted

  def match(self, verbose=False):
    """Run rounds until no proposer is single.

    Args:
      verbose: bool, optional
        If set to True, every round is printed. Default is False.

    Returns:
      Number of rounds performed.

    Raises:
      MatchingStalledError if `advance_on_rejection` is False and a round
        ends without any accepted proposal. Such a round would repeat forever.
      CandidatesExhaustedError if a proposer ran out of candidates.
    """
    single_proposers = self.single_proposers()
    while single_proposers:
      self.rounds += 1
      if verbose:
        print("Round {0}".format(self.rounds))
        print("============================")
      accepted = self._round(single_proposers, verbose)
      if verbose:
        print()
        self.pool.pp_engagements()
      single_proposers = self.single_proposers()
      if (not self.advance_on_rejection and single_proposers and
          accepted == 0):
        raise MatchingStalledError(
            "Round {0} ended without any accepted proposal, {1} proposers "
            "are still single".format(self.rounds, len(single_proposers)))
    if verbose:
      print("Took {0} rounds.".format(self.rounds))
      print("There are {0}rogue couples".format(
          "" if self.pool.has_rogue_couples() else "no "))
    return self.rounds


def run_matching(pool, proposers_optimal=True, advance_on_rejection=True,
                 verbose=False):
  """Match a pool with Gale-Shapley's algorithm.

  Args:
    pool: a `Pool` object whose preference lists have been set.
    proposers_optimal: bool, optional
      If True (default), the proposer group proposes and the result is the
      proposer-optimal stable matching. Otherwise the reviewer group proposes.
    advance_on_rejection: bool, optional
      See `GaleShapley`. Default is True.
    verbose: bool, optional
      If set to True, extra information will be printed. Default is False.

  Returns:
    1. Number of rounds taken.
    2. True if the resulting matching has no rogue couples.
  """
  gs = GaleShapley(pool, proposers_optimal, advance_on_rejection)
  rounds = gs.match(verbose=verbose)
  return rounds, not pool.has_rogue_couples()
