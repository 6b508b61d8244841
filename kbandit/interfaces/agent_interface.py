# -*- coding: utf-8 -*-
r"""Interface for bandit agents: learners that repeatedly pick an arm, pull it, and learn from the reward."""
from abc import ABCMeta, abstractmethod

from kbandit.data_containers import ArmEstimate
from kbandit.exceptions import ConfigurationError, InvariantViolationError


class AgentInterface(object, metaclass=ABCMeta):

    r"""Interface for a bandit agent.

    Abstract class holding the per-arm estimates (:class:`~kbandit.data_containers.ArmEstimate`) and
    the cumulative reward trajectory of one agent. Subclasses decide which arm to pull next by
    implementing :meth:`select_arm`. Implementers of this interface will never override
    :meth:`update`, :meth:`step` or :meth:`mean_estimates`.

    An agent owns all of its state; the reward sources it pulls are shared read-only with other agents.

    """

    def __init__(self, arm_count, random_state):
        """Construct an agent that knows nothing about its ``arm_count`` arms.

        :param arm_count: number of arms this agent chooses between
        :type arm_count: int > 0
        :param random_state: generator owned by this agent, used for its own choices and to sample rewards
        :type random_state: numpy.random.Generator
        :raise: ConfigurationError when ``arm_count`` is not positive.

        """
        if arm_count < 1:
            raise ConfigurationError('arm_count = {0} must be positive!'.format(arm_count))

        self._random_state = random_state
        self._estimates = [ArmEstimate() for _ in range(arm_count)]
        self._cumulative_scores = []
        self._total_reward = 0.0

    @abstractmethod
    def select_arm(self):
        r"""Choose the index of the arm to pull next from the current estimates.

        :return: index of the chosen arm
        :rtype: int

        """
        pass

    def update(self, arm_index, reward):
        r"""Learn that pulling arm ``arm_index`` paid ``reward``.

        Adds ``reward`` to the running total, appends the new total to the cumulative scores and
        records the pull in the arm's estimate.

        :param arm_index: index of the pulled arm
        :type arm_index: int
        :param reward: the reward received
        :type reward: float64

        """
        self._total_reward += reward
        self._cumulative_scores.append(self._total_reward)
        self._estimates[arm_index].record(reward)

    def step(self, sources):
        r"""Select an arm, pull it from ``sources`` and learn from the reward.

        :param sources: the reward sources of the trial, one per arm
        :type sources: sequence of :class:`~kbandit.reward_source.RewardSource`
        :return: the pulled arm and the reward it paid
        :rtype: tuple of (int, float64)

        """
        arm_index = self.select_arm()
        reward = sources[arm_index].sample(self._random_state)
        self.update(arm_index, reward)
        return arm_index, reward

    def mean_estimates(self):
        r"""Return the estimated mean reward of every arm.

        :rtype: list of float64
        :raise: UnpulledArmError when some arm was never pulled.

        """
        return [arm_estimate.mean for arm_estimate in self._estimates]

    def get_unpulled_arm_index(self):
        """Return the index of the first arm that was never pulled, or None if every arm was pulled."""
        for arm_index, arm_estimate in enumerate(self._estimates):
            if arm_estimate.pulls == 0:
                return arm_index
        return None

    @property
    def arm_count(self):
        """Return the number of arms."""
        return len(self._estimates)

    @property
    def estimates(self):
        """Return the per-arm estimates, a list of :class:`~kbandit.data_containers.ArmEstimate`."""
        return self._estimates

    @property
    def cumulative_scores(self):
        """Return the running total reward after every step so far."""
        return self._cumulative_scores

    @property
    def total_reward(self):
        """Return the total reward received so far."""
        return self._total_reward

    @property
    def steps_taken(self):
        """Return the number of steps taken so far."""
        return len(self._cumulative_scores)

    @property
    def final_score(self):
        """Return the cumulative score after the last step.

        :raise: InvariantViolationError when no step was taken.

        """
        if not self._cumulative_scores:
            raise InvariantViolationError('agent has not taken any step yet!')
        return self._cumulative_scores[-1]

    @property
    def random_state(self):
        """Return the generator owned by this agent."""
        return self._random_state
