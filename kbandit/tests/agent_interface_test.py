# -*- coding: utf-8 -*-
"""Test the agent interface: updates, stepping and estimates shared by every agent."""
import numpy
import pytest

from kbandit.exceptions import ConfigurationError, InvariantViolationError, UnpulledArmError
from kbandit.interfaces.agent_interface import AgentInterface
from kbandit.tests.bandit_simulation_test_case import BanditSimulationTestCase


class FirstArmAgent(AgentInterface):

    """An agent that always pulls arm 0."""

    def select_arm(self):
        """Always choose arm 0."""
        return 0


class TestAgentInterface(BanditSimulationTestCase):

    """Verify the concrete methods of :class:`kbandit.interfaces.agent_interface.AgentInterface`."""

    def test_abstract(self):
        """Test the interface cannot be instantiated without select_arm."""
        with pytest.raises(TypeError):
            AgentInterface(self.arm_count, self.make_random_state())

    def test_no_arms_invalid(self):
        """Test zero arms raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            FirstArmAgent(0, self.make_random_state())

    def test_init(self):
        """Test a new agent has one empty estimate per arm and no scores."""
        agent = FirstArmAgent(self.arm_count, self.make_random_state())
        assert agent.arm_count == self.arm_count
        assert [(arm.total_reward, arm.pulls) for arm in agent.estimates] == [(0.0, 0)] * self.arm_count
        assert agent.cumulative_scores == []
        assert agent.steps_taken == 0
        assert agent.get_unpulled_arm_index() == 0

    def test_cumulative_scores_are_running_sums(self):
        """Test cumulative_scores[k] equals the sum of the first k+1 rewards."""
        rewards = [0.5, -0.3, 1.2, -2.0, 0.0, 0.7]
        agent = FirstArmAgent(3, self.make_random_state())
        for step, reward in enumerate(rewards):
            agent.update(step % 3, reward)

        for k, score in enumerate(agent.cumulative_scores):
            assert score == pytest.approx(sum(rewards[:k + 1]))
        numpy.testing.assert_allclose(agent.cumulative_scores, numpy.cumsum(rewards))
        assert agent.total_reward == pytest.approx(sum(rewards))
        assert agent.final_score == pytest.approx(sum(rewards))

    def test_update_records_pulls(self):
        """Test pulls[i] equals the number of times arm i was updated."""
        agent = FirstArmAgent(3, self.make_random_state())
        for arm_index in [2, 0, 2, 2]:
            agent.update(arm_index, 1.0)
        assert [arm.pulls for arm in agent.estimates] == [1, 0, 3]
        assert [arm.total_reward for arm in agent.estimates] == [1.0, 0.0, 3.0]
        assert agent.get_unpulled_arm_index() == 1

    def test_step(self):
        """Test a step selects, samples and updates."""
        sources = self.make_scripted_sources([[0.5, 1.5], [9.0]])
        agent = FirstArmAgent(2, self.make_random_state())
        assert agent.step(sources) == (0, 0.5)
        assert agent.step(sources) == (0, 1.5)
        assert agent.cumulative_scores == [0.5, 2.0]
        assert sources[1].num_sampled == 0

    def test_mean_estimates(self):
        """Test the mean estimates once every arm was pulled."""
        agent = FirstArmAgent(2, self.make_random_state())
        agent.update(0, 1.0)
        agent.update(1, -1.0)
        agent.update(0, 2.0)
        assert agent.mean_estimates() == [1.5, -1.0]

    def test_mean_estimates_unpulled_invalid(self):
        """Test the mean estimates raise UnpulledArmError while some arm was never pulled."""
        agent = FirstArmAgent(2, self.make_random_state())
        with pytest.raises(UnpulledArmError):
            agent.mean_estimates()
        agent.update(0, 1.0)
        with pytest.raises(UnpulledArmError):
            agent.mean_estimates()

    def test_final_score_before_step_invalid(self):
        """Test the final score of an agent that never stepped raises InvariantViolationError."""
        with pytest.raises(InvariantViolationError):
            FirstArmAgent(2, self.make_random_state()).final_score
