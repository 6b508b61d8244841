# -*- coding: utf-8 -*-
"""Gaussian reward sources: the arms of a k-armed bandit.

A :class:`RewardSource` never changes after it is created. All agents of a
:class:`~kbandit.trial.Trial` read from the same sources, each one drawing with its own
random generator, so sampling leaves the source untouched.

"""
from kbandit.constant import DEFAULT_BIAS_RANGE, REWARD_SCALE
from kbandit.exceptions import ConfigurationError


class RewardSource(object):

    """One bandit arm paying i.i.d. rewards from Normal(bias, 1.0).

    :ivar bias: (*float64*) mean reward of this arm

    """

    __slots__ = ('_bias',)

    def __init__(self, bias):
        """Construct a RewardSource paying rewards centered on ``bias``."""
        self._bias = float(bias)

    def __repr__(self):
        """Return ``RewardSource(bias=...)``."""
        return '{0:s}(bias={1!r})'.format(self.__class__.__name__, self._bias)

    @classmethod
    def from_bias_range(cls, random_state, bias_range=DEFAULT_BIAS_RANGE):
        """Construct a RewardSource whose bias is drawn uniformly from ``bias_range``.

        :param random_state: generator used to draw the bias
        :type random_state: numpy.random.Generator
        :param bias_range: half-open interval [min, max) of the bias
        :type bias_range: tuple of (float64, float64)
        :return: a new reward source
        :rtype: RewardSource

        """
        low, high = bias_range
        return cls(random_state.uniform(low, high))

    def sample(self, random_state):
        """Draw one reward from Normal(bias, 1.0) using ``random_state``.

        :param random_state: generator to draw from; it is the only thing mutated
        :type random_state: numpy.random.Generator
        :rtype: float64

        """
        return float(random_state.normal(self._bias, REWARD_SCALE))

    def json_payload(self):
        """Convert the reward source into a dict to be consumed by json."""
        return {
                'bias': self.bias,
                'scale': REWARD_SCALE,
                }

    @property
    def bias(self):
        """Return the mean reward of this arm."""
        return self._bias


def make_reward_sources(arm_count, random_state, bias_range=DEFAULT_BIAS_RANGE):
    """Create ``arm_count`` fresh reward sources with biases drawn from ``bias_range``.

    :param arm_count: number of arms
    :type arm_count: int > 0
    :param random_state: generator used to draw the biases
    :type random_state: numpy.random.Generator
    :param bias_range: half-open interval [min, max) of the biases
    :type bias_range: tuple of (float64, float64)
    :return: the reward sources, shared read-only by every agent of a trial
    :rtype: tuple of RewardSource
    :raise: ConfigurationError when ``arm_count`` is not positive.

    """
    if arm_count < 1:
        raise ConfigurationError('arm_count = {0} must be positive!'.format(arm_count))
    return tuple(RewardSource.from_bias_range(random_state, bias_range) for _ in range(arm_count))
