# -*- coding: utf-8 -*-
"""Bandit agents following epsilon policies.

**Files in this package**
* :mod:`kbandit.epsilon.epsilon_greedy`: :class:`~kbandit.epsilon.epsilon_greedy.EpsilonGreedyAgent`
  agent pulling the best estimated arm, except for a fraction of steps where it explores.

"""
