# -*- coding: utf-8 -*-
"""One bandit instance raced by one epsilon-greedy agent per candidate exploration rate.

A :class:`Trial` draws a fresh set of :class:`~kbandit.reward_source.RewardSource`, lets every
agent play ``horizon`` steps against that same set, and names the exploration rate whose agent
ended with the highest cumulative reward.

Every agent gets its own random stream, derived from the trial's ``numpy.random.SeedSequence`` and keyed
by the agent's exploration rate rather than its position, so listing the rates in another order does not
change what any agent does.

"""
from collections import OrderedDict
import logging

import numpy

from kbandit.constant import DEFAULT_ARM_COUNT, DEFAULT_BIAS_RANGE, DEFAULT_EXPLORATION_RATES, DEFAULT_HORIZON, DEFAULT_OFFSET_POLICY
from kbandit.epsilon.epsilon_greedy import EpsilonGreedyAgent
from kbandit.exceptions import ConfigurationError, InvariantViolationError
from kbandit.reward_source import make_reward_sources
from kbandit.schemas import TrialConfig, deserialize_config
from kbandit.utils import get_first_max_index, get_rate_label

SOURCE_STREAM_KEY = 0
AGENT_STREAM_KEY = 1


class Trial(object):

    """A single randomized bandit instance shared by one agent per exploration rate.

    :ivar rates: (*list of float64*) candidate exploration rates, in the order used for tie-breaking
    :ivar sources: (*tuple of RewardSource*) the arms; None until :meth:`run`
    :ivar agents: (*list of EpsilonGreedyAgent*) one agent per rate, in rate order; empty until :meth:`run`

    """

    def __init__(
            self,
            rates=DEFAULT_EXPLORATION_RATES,
            arm_count=DEFAULT_ARM_COUNT,
            horizon=DEFAULT_HORIZON,
            bias_range=DEFAULT_BIAS_RANGE,
            offset_policy=DEFAULT_OFFSET_POLICY,
            seed=None,
    ):
        """Construct a Trial; see :class:`kbandit.schemas.TrialConfig` for the parameters.

        :raise: ConfigurationError when the parameters do not pass validation.

        """
        config = deserialize_config(
                TrialConfig(),
                {
                    'rates': rates,
                    'arm_count': arm_count,
                    'horizon': horizon,
                    'bias_range': bias_range,
                    'offset_policy': offset_policy,
                    'seed': seed,
                },
                )

        self._rates = list(config['rates'])
        self._arm_count = config['arm_count']
        self._horizon = config['horizon']
        self._bias_range = tuple(config['bias_range'])
        self._offset_policy = config['offset_policy']
        self._seed = config['seed']
        self._seed_sequence = numpy.random.SeedSequence(self._seed)

        self._sources = None
        self._agents = []

        self.log = logging.getLogger(__name__)

    def get_source_seed_sequence(self):
        """Return the ``numpy.random.SeedSequence`` the reward sources of this trial are drawn from."""
        return numpy.random.SeedSequence(self._seed_sequence.entropy, spawn_key=(SOURCE_STREAM_KEY,))

    def get_agent_seed_sequence(self, rate):
        """Return the ``numpy.random.SeedSequence`` of the agent exploring at ``rate``.

        The stream is keyed by the bit pattern of ``rate``, so it does not depend on where ``rate``
        appears in the candidate list.

        :param rate: exploration rate of the agent
        :type rate: float64
        :return: the agent's seed sequence
        :rtype: numpy.random.SeedSequence

        """
        rate_key = int(numpy.float64(rate).view(numpy.uint64))
        return numpy.random.SeedSequence(self._seed_sequence.entropy, spawn_key=(AGENT_STREAM_KEY, rate_key))

    def run(self, sources=None):
        """Draw the reward sources and let every agent take ``horizon`` steps.

        :param sources: reward sources to use instead of drawing fresh ones (default: None)
        :type sources: sequence of :class:`~kbandit.reward_source.RewardSource`, one per arm
        :return: this trial, for chaining
        :rtype: Trial
        :raise: InvariantViolationError when the trial has already run.
        :raise: ConfigurationError when ``sources`` does not hold exactly ``arm_count`` sources.

        """
        if self._agents:
            raise InvariantViolationError('trial has already run!')

        if sources is None:
            sources = make_reward_sources(self._arm_count, numpy.random.default_rng(self.get_source_seed_sequence()), self._bias_range)
        elif len(sources) != self._arm_count:
            raise ConfigurationError('{0:d} sources given for {1:d} arms!'.format(len(sources), self._arm_count))
        self._sources = tuple(sources)

        for rate in self._rates:
            agent = EpsilonGreedyAgent(
                    rate,
                    arm_count=self._arm_count,
                    random_state=numpy.random.default_rng(self.get_agent_seed_sequence(rate)),
                    offset_policy=self._offset_policy,
                    )
            for _ in range(self._horizon):
                agent.step(self._sources)
            self._agents.append(agent)

        self.log.debug('Trial over {0:d} arms finished: {1}'.format(self._arm_count, dict(self.final_scores())))
        return self

    def _check_has_run(self):
        """Raise InvariantViolationError if :meth:`run` was not called yet."""
        if not self._agents:
            raise InvariantViolationError('trial has not run yet!')

    def winner(self):
        """Return the exploration rate whose agent has the greatest final cumulative score; ties go to the earliest rate.

        :rtype: float64
        :raise: InvariantViolationError when the trial has not run yet.

        """
        self._check_has_run()
        return self._rates[get_first_max_index([agent.final_score for agent in self._agents])]

    def winner_label(self):
        """Return the label of :meth:`winner`, as used by :class:`~kbandit.data_containers.WinCounts`."""
        return get_rate_label(self.winner())

    def final_scores(self):
        """Return the final cumulative score of every agent.

        :rtype: OrderedDict of (agent label, float64) pairs in rate order
        :raise: InvariantViolationError when the trial has not run yet.

        """
        self._check_has_run()
        return OrderedDict((agent.label, agent.final_score) for agent in self._agents)

    def trajectories(self):
        """Return the cumulative score trajectory (length ``horizon``) of every agent, for line-plot rendering.

        :rtype: OrderedDict of (agent label, list of float64) pairs in rate order
        :raise: InvariantViolationError when the trial has not run yet.

        """
        self._check_has_run()
        return OrderedDict((agent.label, list(agent.cumulative_scores)) for agent in self._agents)

    def json_payload(self):
        """Construct a json serializeable dictionary of the trial: its arms, agents and winner."""
        self._check_has_run()
        return {
                'sources': [source.json_payload() for source in self._sources],
                'agents': [agent.json_payload() for agent in self._agents],
                'winner': self.winner_label(),
                }

    @property
    def rates(self):
        """Return the candidate exploration rates."""
        return self._rates

    @property
    def arm_count(self):
        """Return the number of arms."""
        return self._arm_count

    @property
    def horizon(self):
        """Return the number of steps each agent takes."""
        return self._horizon

    @property
    def seed(self):
        """Return the seed of this trial, None if it was drawn from fresh entropy."""
        return self._seed

    @property
    def sources(self):
        """Return the reward sources, None before :meth:`run`."""
        return self._sources

    @property
    def agents(self):
        """Return the agents, one per rate in rate order."""
        return self._agents
