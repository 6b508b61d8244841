# -*- coding: utf-8 -*-
"""Classes (Python) for an epsilon-greedy bandit agent choosing the arm to pull next.

See :class:`kbandit.interfaces.agent_interface.AgentInterface` for further details on agents.

"""
import numpy

from kbandit.constant import DEFAULT_ARM_COUNT, DEFAULT_OFFSET_POLICY
from kbandit.exceptions import ConfigurationError
from kbandit.interfaces.agent_interface import AgentInterface
from kbandit.linkers import OFFSET_POLICIES_TO_OFFSET_RANGES
from kbandit.utils import get_agent_label, get_first_max_index, get_rate_label


class EpsilonGreedyAgent(AgentInterface):

    r"""Implementation of an epsilon-greedy agent.

    A class to encapsulate an agent that pulls the best estimated arm with probability :math:`1-\epsilon`
    and explores with probability :math:`\epsilon`, where :math:`\epsilon` is the exploration rate.

    See superclass :class:`kbandit.interfaces.agent_interface.AgentInterface` for further details.

    """

    def __init__(
            self,
            exploration_rate,
            arm_count=DEFAULT_ARM_COUNT,
            random_state=None,
            offset_policy=DEFAULT_OFFSET_POLICY,
    ):
        """Construct an EpsilonGreedyAgent.

        :param exploration_rate: probability of exploring on a step once every arm was pulled
        :type exploration_rate: float64 in range [0.0, 1.0]
        :param arm_count: number of arms (default: :const:`~kbandit.constant.DEFAULT_ARM_COUNT`)
        :type arm_count: int > 0
        :param random_state: generator owned by this agent (default: a fresh ``numpy.random.default_rng()``)
        :type random_state: numpy.random.Generator
        :param offset_policy: name of the policy choosing exploration offsets (default: :const:`~kbandit.constant.DEFAULT_OFFSET_POLICY`)
        :type offset_policy: str, one of :const:`~kbandit.constant.OFFSET_POLICIES`
        :raise: ConfigurationError when any parameter is out of range.

        """
        if not 0.0 <= exploration_rate <= 1.0:
            raise ConfigurationError('exploration_rate = {0} must be in range [0,1]!'.format(exploration_rate))
        if offset_policy not in OFFSET_POLICIES_TO_OFFSET_RANGES:
            raise ConfigurationError('offset_policy = {0} is not one of {1}!'.format(offset_policy, sorted(OFFSET_POLICIES_TO_OFFSET_RANGES)))

        if random_state is None:
            random_state = numpy.random.default_rng()

        super(EpsilonGreedyAgent, self).__init__(arm_count, random_state)
        self._exploration_rate = exploration_rate
        self._offset_policy = offset_policy
        self._offset_range = OFFSET_POLICIES_TO_OFFSET_RANGES[offset_policy].offset_range(arm_count)

    def __repr__(self):
        """Return the agent label with its progress, e.g. ``<EpsilonGreedyAgent eps = 0.1, 1000 steps>``."""
        return '<{0:s} {1:s}, {2:d} steps>'.format(self.__class__.__name__, self.label, self.steps_taken)

    def select_arm(self):
        r"""Choose the arm to pull next.

        Rules, in this order:

        1. If some arm was never pulled, pull the first such arm. Every arm is tried once before any reward based decision.
        2. Find ``best``, the arm with the greatest mean reward estimate (ties go to the lowest index).
        3. With an exploration rate of 0, pull ``best``; no random number is drawn.
        4. Otherwise draw :math:`u \sim U[0, 1)`. If :math:`u < \epsilon`, draw an integer offset from the
           offset policy's range and pull ``(best + offset) % arm_count``; else pull ``best``.

        With the default ``truncated`` policy the offset is uniform on [0, arm_count - 2], so an exploration
        step may re-select ``best`` and never selects the arm at offset ``arm_count - 1``.

        :return: index of the arm to pull
        :rtype: int

        """
        unpulled_arm_index = self.get_unpulled_arm_index()
        if unpulled_arm_index is not None:
            return unpulled_arm_index

        best_arm_index = self.get_best_arm_index()

        if self._exploration_rate == 0.0:
            return best_arm_index

        if self._random_state.random() < self._exploration_rate:
            return self.get_exploration_arm_index(best_arm_index)

        return best_arm_index

    def get_best_arm_index(self):
        """Return the index of the arm with the greatest mean reward estimate; ties go to the lowest index.

        :raise: UnpulledArmError when some arm was never pulled.

        """
        return get_first_max_index(self.mean_estimates())

    def get_exploration_arm_index(self, best_arm_index):
        """Return the arm an exploration step moves to from ``best_arm_index``, drawing the offset from the offset policy range.

        :param best_arm_index: index of the current best arm
        :type best_arm_index: int
        :rtype: int

        """
        low, high = self._offset_range
        # integers() excludes its upper bound
        offset = int(self._random_state.integers(low, high + 1))
        return (best_arm_index + offset) % self.arm_count

    def json_payload(self):
        """Convert the agent into a dict to be consumed by json."""
        return {
                'label': self.label,
                'exploration_rate': self.exploration_rate,
                'offset_policy': self.offset_policy,
                'estimates': [arm_estimate.json_payload() for arm_estimate in self.estimates],
                'cumulative_scores': list(self.cumulative_scores),
                }

    @property
    def exploration_rate(self):
        """Return the probability of exploring on a step."""
        return self._exploration_rate

    @property
    def offset_policy(self):
        """Return the name of the offset policy."""
        return self._offset_policy

    @property
    def offset_range(self):
        """Return the inclusive (low, high) range exploration offsets are drawn from."""
        return self._offset_range

    @property
    def label(self):
        """Return the human readable name of this agent, e.g. 'eps = 0.1'."""
        return get_agent_label(self._exploration_rate)

    @property
    def rate_label(self):
        """Return the label of this agent's exploration rate, as used in :class:`~kbandit.data_containers.WinCounts`."""
        return get_rate_label(self._exploration_rate)
