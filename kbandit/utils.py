# -*- coding: utf-8 -*-
"""Utilities for kbandit."""
from kbandit.constant import AGENT_LABEL_FORMAT, RATE_LABEL_FORMAT


def get_first_max_index(values):
    r"""Return the index of the strictly greatest value in ``values``; ties go to the earliest index.

    Throws an exception when values is empty.

    :param values: the values to compare
    :type values: iterable of float64
    :return: index of the first maximal value
    :rtype: int
    :raise: ValueError when ``values`` is empty.

    """
    best_index = None
    best_value = None
    for index, value in enumerate(values):
        # Strict comparison keeps the first of several equal maxima
        if best_index is None or value > best_value:
            best_index = index
            best_value = value

    if best_index is None:
        raise ValueError('values is empty!')

    return best_index


def get_rate_label(exploration_rate):
    """Return the label used for ``exploration_rate`` in :class:`~kbandit.data_containers.WinCounts`, e.g. 0.0 -> '0'.

    :param exploration_rate: an exploration rate
    :type exploration_rate: float64 in range [0.0, 1.0]
    :rtype: str

    """
    return RATE_LABEL_FORMAT.format(exploration_rate)


def get_agent_label(exploration_rate):
    """Return the human readable name of the agent exploring with ``exploration_rate``, e.g. 'eps = 0.1'."""
    return AGENT_LABEL_FORMAT.format(exploration_rate)
