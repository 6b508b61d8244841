# -*- coding: utf-8 -*-
"""Links between offset policy names and the offset ranges they draw exploration steps from.

An exploration step of :class:`~kbandit.epsilon.epsilon_greedy.EpsilonGreedyAgent` moves
away from the current best arm by an integer offset (modulo the number of arms). The
offset policy decides which offsets are possible.

"""
from collections import namedtuple

from kbandit.constant import OFFSET_POLICY_TRUNCATED, OFFSET_POLICY_UNIFORM


def get_truncated_offset_range(arm_count):
    """Return the inclusive offset range [0, arm_count - 2].

    Offset 0 re-selects the best arm and offset ``arm_count - 1`` (the arm just below the best one) is never drawn.
    With a single arm the range is [0, 0].

    :param arm_count: number of arms
    :type arm_count: int > 0
    :return: (lowest offset, highest offset)
    :rtype: tuple of (int, int)

    """
    return 0, max(arm_count - 2, 0)


def get_uniform_offset_range(arm_count):
    """Return the inclusive offset range [1, arm_count - 1]: every arm other than the best one is equally likely.

    With a single arm the range is [0, 0].

    """
    if arm_count == 1:
        return 0, 0
    return 1, arm_count - 1


OffsetPolicy = namedtuple(
        'OffsetPolicy',
        [
            'name',
            'offset_range',
            ],
        )


OFFSET_POLICIES_TO_OFFSET_RANGES = {
        OFFSET_POLICY_TRUNCATED: OffsetPolicy(
            name=OFFSET_POLICY_TRUNCATED,
            offset_range=get_truncated_offset_range,
            ),
        OFFSET_POLICY_UNIFORM: OffsetPolicy(
            name=OFFSET_POLICY_UNIFORM,
            offset_range=get_uniform_offset_range,
            ),
        }
