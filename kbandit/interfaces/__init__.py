# -*- coding: utf-8 -*-
"""Interfaces for kbandit components.

**Files in this package**

* :mod:`kbandit.interfaces.agent_interface`: :class:`~kbandit.interfaces.agent_interface.AgentInterface`,
  the abstract base class every bandit agent implements

"""
