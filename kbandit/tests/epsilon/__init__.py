# -*- coding: utf-8 -*-
"""Testing code for the epsilon agents.

**Files in this package**
* :mod:`kbandit.tests.epsilon.epsilon_greedy_test`: tests for :class:`kbandit.epsilon.epsilon_greedy.EpsilonGreedyAgent`

"""
