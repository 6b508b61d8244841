# -*- coding: utf-8 -*-
"""Monte-Carlo tournament of epsilon-greedy exploration rates on Gaussian k-armed bandits.

**Files in this package**

* :mod:`kbandit.constant`: default configuration values for ``kbandit`` components
* :mod:`kbandit.exceptions`: exception types raised by the simulation
* :mod:`kbandit.data_containers`: :class:`~kbandit.data_containers.ArmEstimate`
  and :class:`~kbandit.data_containers.WinCounts` containers for passing data out of the simulation
* :mod:`kbandit.reward_source`: :class:`~kbandit.reward_source.RewardSource`, one Gaussian bandit arm
* :mod:`kbandit.linkers`: links between offset policy names and their implementations
* :mod:`kbandit.schemas`: colander schemas validating trial and experiment configuration
* :mod:`kbandit.trial`: :class:`~kbandit.trial.Trial`, one bandit instance raced by one agent per exploration rate
* :mod:`kbandit.experiment`: :class:`~kbandit.experiment.Experiment`, the Monte-Carlo loop tallying trial winners
* :mod:`kbandit.timing`: context manager for logging timing information
* :mod:`kbandit.utils`: tie-breaking and labelling helpers

**Interfaces**
:mod:`kbandit.interfaces.agent_interface`

**Agent packages**
:mod:`kbandit.epsilon`: epsilon-greedy agents

Nothing in this package renders images; results are handed out as plain dicts and lists
(see the ``json_payload`` methods) for a separate presentation layer.

"""

#: Following the versioning system at http://semver.org/
#: MAJOR: incremented for incompatible API changes
MAJOR = 0
#: MINOR: incremented for adding functionality in a backwards-compatible manner
MINOR = 1
#: PATCH: incremented for backward-compatible bug fixes and minor capability improvements
PATCH = 0
#: Latest release version of kbandit
__version__ = "{0:d}.{1:d}.{2:d}".format(MAJOR, MINOR, PATCH)
