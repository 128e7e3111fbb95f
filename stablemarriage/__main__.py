"""Example driver: build a pool, set its preference lists, then match it or
count its stable matchings.

  python -m stablemarriage -n 4 -s exponential --count
"""

import argparse

import numpy as np

from stablemarriage.matching import GaleShapley
from stablemarriage.pool import Pool
from stablemarriage.preflists import (
    set_exponential_stable_matchings_pool_lists, set_worst_case_pool_lists
)
from stablemarriage.random import set_randomized_pool_lists


def parse_args(argv=None):
  parser = argparse.ArgumentParser(
      description="Stable matchings with the Gale-Shapley algorithm.")
  parser.add_argument("-n", "--size", type=int, default=4,
                      help="Number of people in each group. Default: 4")
  parser.add_argument("-s", "--strategy", default="worst",
                      choices=["worst", "random", "exponential"],
                      help="How preference lists are generated. Default: worst")
  parser.add_argument("--seed", type=int, default=None,
                      help="Seed for the random strategy.")
  parser.add_argument("--reviewers-optimal", action="store_true",
                      help="Let the reviewer group propose.")
  parser.add_argument("--literal", action="store_true",
                      help="Do not advance a rejected proposer's cursor.")
  parser.add_argument("--count", action="store_true",
                      help="Count stable matchings by brute force instead of "
                           "matching.")
  parser.add_argument("-q", "--quiet", action="store_true",
                      help="Only print the summary.")
  return parser.parse_args(argv)


def main(argv=None):
  args = parse_args(argv)
  pool = Pool(args.size)
  if args.strategy == "worst":
    set_worst_case_pool_lists(pool)
  elif args.strategy == "random":
    set_randomized_pool_lists(pool, np.random.default_rng(args.seed))
  else:
    set_exponential_stable_matchings_pool_lists(pool, verbose=not args.quiet)

  if args.count:
    print(pool.count_stable_matchings())
    return 0

  gs = GaleShapley(pool, proposers_optimal=not args.reviewers_optimal,
                   advance_on_rejection=not args.literal)
  gs.match(verbose=not args.quiet)
  print()
  print("Proposals: {0}".format(gs.num_proposals))
  print("Proposers pd={0}".format(pool.proposer_preference_distance()))
  print("Reviewers pd={0}".format(pool.reviewer_preference_distance()))
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
