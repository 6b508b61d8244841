# -*- coding: utf-8 -*-
"""Data containers convenient for/used to interact with kbandit members."""
from collections import OrderedDict
import pprint

import numpy

from kbandit.exceptions import ConfigurationError, UnpulledArmError
from kbandit.utils import get_first_max_index


class ArmEstimate(object):

    """An agent's running knowledge (total_reward, pulls) about one arm.

    The mean reward of the arm is ``total_reward / pulls``; it is undefined until the arm has been pulled once.

    :ivar total_reward: (*float64*) The sum of all rewards received from this arm; may be negative
    :ivar pulls: (*int >= 0*) The number of times this arm has been pulled

    """

    __slots__ = ('_total_reward', '_pulls')

    def __init__(self, total_reward=0.0, pulls=0):
        """Allocate and construct a new instance with the specified data fields; see class docstring for input descriptions."""
        self._total_reward = total_reward
        self._pulls = pulls
        self.validate()

    def __str__(self):
        """Pretty print this object as a dict."""
        return pprint.pformat(self.json_payload())

    def record(self, reward):
        """Record one pull of this arm that paid ``reward``.

        :param reward: the reward received
        :type reward: float64

        """
        self._total_reward += reward
        self._pulls += 1

    def json_payload(self):
        """Convert the arm estimate into a dict to be consumed by json."""
        return {
                'total_reward': self.total_reward,
                'pulls': self.pulls,
                }

    def validate(self):
        """Check this ArmEstimate passes basic validity checks: total reward is finite, pulls is a non-negative integer.

        :raises ConfigurationError: if any member data is non-finite or out of range

        """
        if not numpy.isfinite(self.total_reward):
            raise ConfigurationError('total_reward = {0} is non-finite!'.format(self.total_reward))
        if self.pulls < 0 or int(self.pulls) != self.pulls:
            raise ConfigurationError('pulls = {0} is not a non-negative integer!'.format(self.pulls))
        if self.pulls == 0 and self.total_reward != 0.0:
            raise ConfigurationError('total_reward is not 0 when pulls is 0!')

    @property
    def total_reward(self):
        """Return the sum of the rewards received from this arm."""
        return self._total_reward

    @property
    def pulls(self):
        """Return the number of pulls, always a non-negative integer."""
        return self._pulls

    @property
    def mean(self):
        """Return the mean reward of this arm.

        :raise: UnpulledArmError when the arm has never been pulled.

        """
        if self._pulls == 0:
            raise UnpulledArmError('mean reward of an arm that was never pulled is undefined!')
        return self._total_reward / self._pulls


class WinCounts(object):

    """An accumulator of trial wins per exploration rate label.

    One entry per candidate rate, all starting at 0. Accumulators built from disjoint sets of trials
    can be merged with ``+``; merging only sums counts, so it is commutative and associative.

    :ivar _counts: (*OrderedDict*) mapping of rate label to number of trials won, in candidate order

    """

    __slots__ = ('_counts',)

    def __init__(self, labels=None, counts=None):
        """Create a WinCounts object with a zero count for every label in ``labels``, then add ``counts``.

        :param labels: rate labels, in candidate order
        :type labels: iterable of str
        :param counts: initial win counts
        :type counts: dictionary of (str, int) pairs

        """
        self._counts = OrderedDict()
        for label in labels or []:
            if label in self._counts:
                raise ConfigurationError('label {0:s} appears more than once!'.format(label))
            self._counts[label] = 0

        if counts:
            for label, count in counts.items():
                if count < 0:
                    raise ConfigurationError('count = {0} for label {1:s} is negative!'.format(count, label))
                self._counts[label] = self._counts.get(label, 0) + count

    def __str__(self):
        """Pretty print this object as a dict."""
        return pprint.pformat(self.json_payload())

    def __getitem__(self, label):
        """Return the win count of ``label``."""
        return self._counts[label]

    def __contains__(self, label):
        """Return whether ``label`` is a known rate label."""
        return label in self._counts

    def __iter__(self):
        """Iterate over the rate labels, in candidate order."""
        return iter(self._counts)

    def __len__(self):
        """Return the number of rate labels."""
        return len(self._counts)

    def __eq__(self, other):
        """Two accumulators are equal when they hold the same counts in the same label order."""
        if not isinstance(other, WinCounts):
            return NotImplemented
        return list(self._counts.items()) == list(other.as_dict().items())

    def __add__(self, win_counts):
        """Return a new WinCounts holding the summed counts of this object and ``win_counts``."""
        merged = WinCounts(labels=self._counts.keys(), counts=self._counts)
        merged += win_counts
        return merged

    def __iadd__(self, win_counts):
        """Add the counts of ``win_counts`` into this object; labels unknown to this object are appended."""
        for label, count in win_counts.as_dict().items():
            self._counts[label] = self._counts.get(label, 0) + count
        return self

    def record_win(self, label):
        """Increment the win count of ``label`` by one.

        :param label: label of the winning exploration rate
        :type label: str
        :raise: KeyError when ``label`` is not one of the candidate labels.

        """
        if label not in self._counts:
            raise KeyError('label {0:s} is not a candidate!'.format(label))
        self._counts[label] += 1

    def json_payload(self):
        """Construct a json serializeable dictionary of the win counts."""
        return {'win_counts': dict(self._counts)}

    def as_dict(self):
        """Return a copy of the counts as an OrderedDict of (label, count) pairs in candidate order."""
        return OrderedDict(self._counts)

    @property
    def labels(self):
        """Return the rate labels, in candidate order."""
        return list(self._counts.keys())

    @property
    def total(self):
        """Return the number of trials recorded."""
        return sum(self._counts.values())

    @property
    def winner_label(self):
        """Return the label with the most wins; ties go to the earliest candidate.

        :raise: ValueError when there are no labels.

        """
        labels = self.labels
        return labels[get_first_max_index([self._counts[label] for label in labels])]
