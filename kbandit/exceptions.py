# -*- coding: utf-8 -*-
"""Exception types raised by the kbandit simulation.

All of them derive from :class:`BanditSimulationError`. They also derive from the closest
builtin exception so callers that only know about ``ValueError`` or ``ZeroDivisionError``
still catch them.

Nothing is retried: the simulation is deterministic given its inputs and a seed, so any of
these errors points at a configuration mistake or a bug.

"""
import pprint


class BanditSimulationError(Exception):

    """Base class for every error raised by :mod:`kbandit`."""


class ConfigurationError(BanditSimulationError, ValueError):

    """Invalid trial, experiment or agent parameters.

    :ivar errors: (*dict*) mapping of parameter name to message, as produced by ``colander.Invalid.asdict()``;
      empty when the error was not found by a schema

    """

    def __init__(self, msg, errors=None):
        """Construct a ConfigurationError with a message and the (optional) per-field errors."""
        super(ConfigurationError, self).__init__(msg)
        self.errors = dict(errors) if errors else {}

    def __str__(self):
        """Append the per-field errors (if any) to the message."""
        msg = super(ConfigurationError, self).__str__()
        if not self.errors:
            return msg
        return '{0:s}\n{1:s}'.format(msg, pprint.pformat(self.errors))


class InvariantViolationError(BanditSimulationError, RuntimeError):

    """An internal invariant of the simulation does not hold, e.g. results were requested before a run."""


class UnpulledArmError(InvariantViolationError, ZeroDivisionError):

    """The mean reward of an arm that was never pulled was requested."""


class RandomSourceExhaustedError(BanditSimulationError, RuntimeError):

    """A bounded random source ran out of entropy.

    numpy generators never raise this; it is reserved for substituted entropy sources.

    """
