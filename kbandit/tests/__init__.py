# -*- coding: utf-8 -*-
r"""Testing code for the kbandit library.

Testing is done via pytest.

This package includes:

* Test cases/test setup files
* Tests for epsilon agents: :mod:`kbandit.tests.epsilon`

**Files in this package**

* :mod:`kbandit.tests.bandit_simulation_test_case`: base test case with reward source test doubles
* :mod:`kbandit.tests.agent_interface_test`: tests for :class:`kbandit.interfaces.agent_interface.AgentInterface`
* :mod:`kbandit.tests.data_containers_test`: tests for :mod:`kbandit.data_containers`
* :mod:`kbandit.tests.exceptions_test`: tests for :mod:`kbandit.exceptions`
* :mod:`kbandit.tests.experiment_test`: tests for :mod:`kbandit.experiment`
* :mod:`kbandit.tests.linkers_test`: tests for :mod:`kbandit.linkers`
* :mod:`kbandit.tests.reward_source_test`: tests for :mod:`kbandit.reward_source`
* :mod:`kbandit.tests.schemas_test`: tests for :mod:`kbandit.schemas`
* :mod:`kbandit.tests.timing_test`: tests for :mod:`kbandit.timing`
* :mod:`kbandit.tests.trial_test`: tests for :mod:`kbandit.trial`
* :mod:`kbandit.tests.utils_test`: tests for :mod:`kbandit.utils`

"""
