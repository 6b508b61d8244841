# -*- coding: utf-8 -*-
"""Some default configuration parameters for kbandit components."""

#: Number of arms (:class:`~kbandit.reward_source.RewardSource`) in every trial.
DEFAULT_ARM_COUNT = 10

#: Number of steps each agent takes in one trial.
DEFAULT_HORIZON = 1000

#: Number of independent trials in one experiment.
DEFAULT_SAMPLE_COUNT = 2000

#: Exploration rates raced against each other in every trial.
DEFAULT_EXPLORATION_RATES = [0.0, 0.01, 0.05, 0.1, 0.2, 0.3, 0.5]

#: Half-open interval [min, max) from which each arm's bias (mean reward) is drawn.
DEFAULT_BIAS_RANGE = (-1.0, 1.0)

#: Standard deviation of every arm's Gaussian reward. The variance is therefore 1.0 as well.
REWARD_SCALE = 1.0

# Offset policies: how an exploration step picks an arm relative to the current best arm.
#: Offsets drawn from [0, arm_count - 2]; offset ``arm_count - 1`` is never drawn.
OFFSET_POLICY_TRUNCATED = 'truncated'
#: Offsets drawn from [1, arm_count - 1]; every other arm is equally likely.
OFFSET_POLICY_UNIFORM = 'uniform'
DEFAULT_OFFSET_POLICY = OFFSET_POLICY_TRUNCATED
OFFSET_POLICIES = [
                OFFSET_POLICY_TRUNCATED,
                OFFSET_POLICY_UNIFORM,
                ]

#: Format used to turn an exploration rate into its label, e.g. 0.0 -> '0', 0.05 -> '0.05'.
RATE_LABEL_FORMAT = '{0:g}'

#: Format of an agent's human readable name.
AGENT_LABEL_FORMAT = 'eps = {0:g}'

#: Small values for fast tests
TEST_ARM_COUNT = 4
TEST_HORIZON = 50
TEST_SAMPLE_COUNT = 20
TEST_EXPLORATION_RATES = [0.0, 0.1, 0.5]
