"""Participants of a stable marriage problem and their preference lists."""

__all__ = [
    "MatchingError", "CandidatesExhaustedError", "NotEngagedError",
    "MatchingStalledError", "ConfigurationError",
    "PreferenceList", "Participant", "person_name"
]

PROPOSER_NAMES = ["James", "John", "Robert", "Michael", "William",
                  "David", "Richard", "Charles", "Joseph", "Thomas"]
REVIEWER_NAMES = ["Mary", "Patricia", "Linda", "Barbara", "Elizabeth",
                  "Jennifer", "Maria", "Susan", "Margaret", "Dorothy"]


class MatchingError(RuntimeError):
  """Base class of all faults raised by the matching engine."""


class CandidatesExhaustedError(MatchingError):
  """The cursor of a preference list would run past its last candidate."""


class NotEngagedError(MatchingError):
  """An operation that needs an engagement was called on a single person."""


class MatchingStalledError(MatchingError):
  """A whole round went by without any proposal being accepted."""


class ConfigurationError(ValueError):
  """Preference lists cannot be built from the given input."""


def person_name(index, is_proposer):
  """Display name of the `index`-th member (0-based) of a group."""
  names = PROPOSER_NAMES if is_proposer else REVIEWER_NAMES
  number = index + 1
  return "{0}{1}".format(names[number % len(names)], number)


class PreferenceList():
  """Ranking of the opposite group, most preferred first.

  The ranking never changes after construction. A cursor points at the
  current favorite, i.e. the next candidate to propose to, and only moves
  forward.

  Attributes:
    ranking: tuple of `Participant` objects, most preferred first.
  """
  def __init__(self, ranking):
    self.ranking = tuple(ranking)
    self._rank = {p: i for i, p in enumerate(self.ranking)}
    assert(len(self._rank) == len(self.ranking))
    self._cursor = 0

  def __len__(self):
    return len(self.ranking)

  def __iter__(self):
    return iter(self.ranking)

  def __getitem__(self, i):
    return self.ranking[i]

  def __repr__(self):
    return "[{0}]".format(", ".join(
        ("!" if i == self._cursor else "") + p.name
        for i, p in enumerate(self.ranking)))

  @property
  def cursor(self):
    return self._cursor

  def current_favorite(self):
    """Returns the candidate under the cursor.

    Raises:
      CandidatesExhaustedError if no candidate is left.
    """
    if self._cursor >= len(self.ranking):
      raise CandidatesExhaustedError("candidates exhausted")
    return self.ranking[self._cursor]

  def advance(self):
    """Moves the cursor one step and returns the new current favorite.

    Raises:
      CandidatesExhaustedError if the cursor is already on the last candidate.
        The cursor is left where it was.
    """
    if self._cursor + 1 >= len(self.ranking):
      raise CandidatesExhaustedError(
          "candidates exhausted: cannot advance past {0}".format(
              self.ranking[-1].name if self.ranking else "an empty list"))
    self._cursor += 1
    return self.ranking[self._cursor]

  def rank_of(self, person):
    """0-based rank of `person`, lower is better.

    Raises:
      KeyError if `person` is not ranked in this list.
    """
    return self._rank[person]


class Participant():
  """A member of the proposer group or of the reviewer group.

  Attributes:
    index: position of the participant inside its group.
    name: display name.
    is_proposer: True for the proposer group, False for the reviewer group.
    engaged_to: current partner, or None while single.
    pref_list: a `PreferenceList` over the opposite group. None until the
      pool's preference lists have been set.
  """
  def __init__(self, index, is_proposer, name=None):
    self.index = index
    self.is_proposer = is_proposer
    self.name = name if name is not None else person_name(index, is_proposer)
    self.engaged_to = None
    self.pref_list = None

  def __repr__(self):
    return "<Participant {0} engaged_to={1} pref_list={2}>".format(
        self.name,
        self.engaged_to.name if self.engaged_to is not None else None,
        self.pref_list)

  def single(self):
    return self.engaged_to is None

  def current_favorite(self):
    return self.pref_list.current_favorite()

  def rank_of(self, person):
    return self.pref_list.rank_of(person)

  def preference_distance(self):
    """Rank of the current partner in own preference list, None if single."""
    if self.engaged_to is None:
      return None
    return self.pref_list.rank_of(self.engaged_to)

  def _engage(self, other):
    self.engaged_to = other
    other.engaged_to = self

  def propose(self, other):
    """Offers an engagement to `other`.

    `other` accepts if it is single, or if it ranks this participant strictly
    better than its current partner; in that case the current partner is
    jilted first.

    Returns:
      True if the proposal was accepted.
    """
    assert(other.is_proposer != self.is_proposer)
    if other.single():
      self._engage(other)
      return True
    if other.rank_of(self) < other.rank_of(other.engaged_to):
      other.jilt()
      self._engage(other)
      return True
    return False

  def jilt(self):
    """Drops the current partner.

    The dropped partner lost this bid, so its own cursor moves past this
    participant, which must be its current favorite. The jilting participant
    keeps its cursor.

    Raises:
      NotEngagedError if this participant is single.
    """
    if self.engaged_to is None:
      raise NotEngagedError("{0} cannot jilt while single".format(self.name))
    dropped = self.engaged_to
    assert(dropped.pref_list.current_favorite() is self)
    dropped.pref_list.advance()
    dropped.engaged_to = None
    self.engaged_to = None
