"""Unit tests for the Gale-Shapley engine"""

import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import contextlib
import io

import unittest

import stablemarriage


class TestSmallScenario(unittest.TestCase):
  def setUp(self):
    # proposer A1 ranks [B1, B2], A2 ranks [B2, B1];
    # reviewer B1 ranks [A1, A2], B2 ranks [A2, A1]
    self.pool = stablemarriage.set_custom_pool_lists(
        stablemarriage.Pool(2), [[0, 1], [1, 0]], [[0, 1], [1, 0]])

  def test_match(self):
    gs = stablemarriage.GaleShapley(self.pool)
    self.assertEqual(gs.match(), 1)
    self.assertEqual(gs.num_proposals, 2)
    self.assertListEqual(self.pool.assignment(), [0, 1])
    self.assertFalse(self.pool.has_rogue_couples())
    self.assertEqual(self.pool.count_stable_matchings(), 1)

  def test_run_matching(self):
    self.assertEqual(stablemarriage.run_matching(self.pool), (1, True))

  def test_verbose(self):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
      stablemarriage.run_matching(self.pool, verbose=True)
    text = out.getvalue()
    self.assertIn("Round 1", text)
    self.assertIn("Took 1 rounds.", text)
    self.assertIn("There are no rogue couples", text)

  def test_already_matched(self):
    stablemarriage.run_matching(self.pool)
    gs = stablemarriage.GaleShapley(self.pool)
    self.assertEqual(gs.match(), 0)
    self.assertEqual(gs.num_proposals, 0)


class TestWorstCase(unittest.TestCase):
  def test_proposal_count(self):
    for n in (1, 2, 3, 4):
      pool = stablemarriage.set_worst_case_pool_lists(stablemarriage.Pool(n))
      gs = stablemarriage.GaleShapley(pool)
      gs.match()
      self.assertEqual(gs.num_proposals, n * (n - 1) + 1)
      self.assertFalse(pool.has_rogue_couples())

  def test_size_four(self):
    pool = stablemarriage.set_worst_case_pool_lists(stablemarriage.Pool(4))
    gs = stablemarriage.GaleShapley(pool)
    self.assertEqual(gs.match(), 10)
    self.assertEqual(gs.num_proposals, 13)
    self.assertListEqual(pool.assignment(), [3, 2, 0, 1])

  def test_literal_policy(self):
    # no proposal is ever turned down without a jilt, so both policies agree
    pool = stablemarriage.set_worst_case_pool_lists(stablemarriage.Pool(4))
    gs = stablemarriage.GaleShapley(pool, advance_on_rejection=False)
    self.assertEqual(gs.match(), 10)
    self.assertEqual(gs.num_proposals, 13)
    self.assertListEqual(pool.assignment(), [3, 2, 0, 1])

  def test_bounded(self):
    for n in range(5, 9):
      pool = stablemarriage.set_worst_case_pool_lists(stablemarriage.Pool(n))
      gs = stablemarriage.GaleShapley(pool)
      gs.match()
      self.assertLessEqual(gs.num_proposals, n * n)
      self.assertFalse(pool.has_rogue_couples())


class TestRejectionPolicy(unittest.TestCase):
  def setUp(self):
    # both proposers want reviewer 0, who prefers proposer 0
    self.pool = stablemarriage.set_custom_pool_lists(
        stablemarriage.Pool(2), [[0, 1], [0, 1]], [[0, 1], [0, 1]])

  def test_advance_on_rejection(self):
    gs = stablemarriage.GaleShapley(self.pool)
    self.assertEqual(gs.match(), 2)
    self.assertEqual(gs.num_proposals, 3)
    self.assertListEqual(self.pool.assignment(), [0, 1])
    self.assertFalse(self.pool.has_rogue_couples())

  def test_literal_stalls(self):
    gs = stablemarriage.GaleShapley(self.pool, advance_on_rejection=False)
    with self.assertRaises(stablemarriage.MatchingStalledError):
      gs.match()
    self.assertEqual(gs.rounds, 2)
    self.assertListEqual(self.pool.assignment(), [0, -1])


class TestRoundWithoutAcceptance(unittest.TestCase):
  def setUp(self):
    # in round 2 the only single proposer is turned down, but still has a
    # candidate left for round 3
    self.pool = stablemarriage.set_custom_pool_lists(
        stablemarriage.Pool(3),
        [[0, 1, 2], [0, 1, 2], [1, 0, 2]],
        [[0, 1, 2], [2, 0, 1], [0, 1, 2]])

  def test_default_engine_continues(self):
    gs = stablemarriage.GaleShapley(self.pool)
    self.assertEqual(gs.match(), 3)
    self.assertEqual(gs.num_proposals, 5)
    self.assertListEqual(self.pool.assignment(), [0, 2, 1])
    self.assertFalse(self.pool.has_rogue_couples())

  def test_run_matching(self):
    self.assertEqual(stablemarriage.run_matching(self.pool), (3, True))

  def test_literal_stalls(self):
    gs = stablemarriage.GaleShapley(self.pool, advance_on_rejection=False)
    with self.assertRaises(stablemarriage.MatchingStalledError):
      gs.match()

  def test_many_random_pools(self):
    for seed in range(300):
      pool = stablemarriage.gen_random_pool(6, seed=seed)
      rounds, stable = stablemarriage.run_matching(pool)
      self.assertTrue(stable)
      self.assertListEqual(sorted(pool.assignment()), list(range(6)))


class TestRandomPools(unittest.TestCase):
  def test_stable(self):
    for n in range(1, 9):
      for seed in range(5):
        pool = stablemarriage.gen_random_pool(n, seed=100 * n + seed)
        gs = stablemarriage.GaleShapley(pool)
        rounds = gs.match()
        self.assertFalse(pool.has_rogue_couples())
        self.assertLessEqual(gs.num_proposals, n * n)
        self.assertLessEqual(rounds, gs.num_proposals)
        self.assertListEqual(sorted(pool.assignment()), list(range(n)))

  def test_reviewers_optimal_stable(self):
    for seed in range(10):
      pool = stablemarriage.gen_random_pool(7, seed=seed)
      rounds, stable = stablemarriage.run_matching(
          pool, proposers_optimal=False)
      self.assertTrue(stable)
      self.assertTrue(all(not w.single() for w in pool.reviewers))


class TestOptimality(unittest.TestCase):
  def check_optimal(self, pool, proposers_optimal):
    stablemarriage.run_matching(pool, proposers_optimal=proposers_optimal)
    result = tuple(pool.assignment())
    stable = pool.stable_matchings()
    self.assertIn(result, stable)
    proposer_ranks, reviewer_ranks = pool.rank_matrices()
    n = pool.n_people
    for other in stable:
      inverse_result = {w: m for m, w in enumerate(result)}
      inverse_other = {w: m for m, w in enumerate(other)}
      for m in range(n):
        if proposers_optimal:
          self.assertLessEqual(proposer_ranks[m, result[m]],
                               proposer_ranks[m, other[m]])
        else:
          self.assertGreaterEqual(proposer_ranks[m, result[m]],
                                  proposer_ranks[m, other[m]])
      for w in range(n):
        if proposers_optimal:
          self.assertGreaterEqual(reviewer_ranks[w, inverse_result[w]],
                                  reviewer_ranks[w, inverse_other[w]])
        else:
          self.assertLessEqual(reviewer_ranks[w, inverse_result[w]],
                               reviewer_ranks[w, inverse_other[w]])

  def test_proposers_optimal(self):
    for seed in range(10):
      self.check_optimal(stablemarriage.gen_random_pool(5, seed=seed), True)

  def test_reviewers_optimal(self):
    for seed in range(10):
      self.check_optimal(stablemarriage.gen_random_pool(5, seed=seed), False)

  def test_many_stable_matchings(self):
    pool = stablemarriage.set_exponential_stable_matchings_pool_lists(
        stablemarriage.Pool(4))
    self.check_optimal(pool, True)
    self.assertListEqual(pool.assignment(), [0, 1, 2, 3])
    self.assertEqual(pool.proposer_preference_distance(), 0)
    self.assertEqual(pool.reviewer_preference_distance(), 12)


if __name__ == '__main__':
  unittest.main()
