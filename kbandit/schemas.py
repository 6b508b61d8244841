# -*- coding: utf-8 -*-
"""Colander schemas validating the configuration of trials and experiments.

:func:`deserialize_config` runs a schema and turns ``colander.Invalid`` into
:class:`~kbandit.exceptions.ConfigurationError`, so callers only ever see the latter.

.. Warning:: Outputs of colander schema deserialization should be treated as
  READ-ONLY. "missing=" values are weak-copied (by reference), so changing
  missing fields in the output dict can modify the schema!

"""
import logging
import numbers

import colander
import numpy

from kbandit.constant import DEFAULT_ARM_COUNT, DEFAULT_BIAS_RANGE, DEFAULT_EXPLORATION_RATES, DEFAULT_HORIZON, DEFAULT_OFFSET_POLICY, DEFAULT_SAMPLE_COUNT, OFFSET_POLICIES
from kbandit.exceptions import ConfigurationError
from kbandit.utils import get_rate_label


class StrictMappingSchema(colander.MappingSchema):

    """A ``colander.MappingSchema`` that raises exceptions when asked to deserialize unknown keys.

    .. Note:: by default, colander.MappingSchema ignores/throws out unknown keys.

    """

    def schema_type(self, **kw):
        """Set MappingSchema to raise ``colander.Invalid`` when deserializing unknown keys.

        This overrides the staticmethod of the same name in ``colander._SchemaNode``.
        See: http://colander.readthedocs.org/en/latest/api.html#colander.Mapping

        """
        return colander.Mapping(unknown='raise')


class StrictInt(colander.Int):

    """A ``colander.Int`` that refuses values which are not already integers.

    ``colander.Int`` calls ``int()`` on its input, so 2.5 would silently become 2. Booleans,
    floats and strings are rejected here instead.

    """

    def deserialize(self, node, cstruct):
        """Raise ``colander.Invalid`` unless ``cstruct`` is null or an integral, non-bool number."""
        if cstruct is not colander.null and (isinstance(cstruct, bool) or not isinstance(cstruct, numbers.Integral)):
            raise colander.Invalid(node, msg='{0!r} is not an integer.'.format(cstruct))
        return super(StrictInt, self).deserialize(node, cstruct)


class PositiveInt(colander.SchemaNode):

    """Colander positive integer."""

    schema_type = StrictInt
    title = 'Positive Int'

    def validator(self, node, cstruct):
        """Raise an exception if the node value (cstruct) is not positive.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param cstruct: the value being validated
        :type cstruct: int
        :raise: colander.Invalid if cstruct value is bad

        """
        if not cstruct > 0:
            raise colander.Invalid(node, msg='Value = {0:d} must be positive.'.format(cstruct))


class ExplorationRate(colander.SchemaNode):

    """Colander float in the closed range [0, 1]."""

    schema_type = colander.Float
    title = 'Exploration Rate'

    def validator(self, node, cstruct):
        """Raise an exception if the node value (cstruct) is not in [0, 1]; NaN is rejected as well."""
        if not 0.0 <= cstruct <= 1.0:
            raise colander.Invalid(node, msg='Value = {0:f} must be in range [0,1].'.format(cstruct))


class ListOfExplorationRates(colander.SequenceSchema):

    """Colander non-empty list of exploration rates with distinct labels (see :func:`kbandit.utils.get_rate_label`)."""

    exploration_rate = ExplorationRate()

    def validator(self, node, cstruct):
        """Raise an exception if the list is empty or two rates share a label."""
        if not cstruct:
            raise colander.Invalid(node, msg='At least one exploration rate is required.')

        labels = [get_rate_label(rate) for rate in cstruct]
        if len(set(labels)) != len(labels):
            raise colander.Invalid(node, msg='Exploration rates {0} must have distinct labels.'.format(labels))


class BiasRange(colander.TupleSchema):

    """A half-open interval [min, max) of arm biases."""

    low = colander.SchemaNode(colander.Float())
    high = colander.SchemaNode(colander.Float())

    def validator(self, node, cstruct):
        """Raise an exception if a bound is non-finite or min >= max."""
        low, high = cstruct
        if not (numpy.isfinite(low) and numpy.isfinite(high)):
            raise colander.Invalid(node, msg='Bias range ({0:f}, {1:f}) must be finite.'.format(low, high))
        if not low < high:
            raise colander.Invalid(node, msg='Bias range min = {0:f} must be less than max = {1:f}.'.format(low, high))


class TrialConfig(StrictMappingSchema):

    """The configuration of a :class:`kbandit.trial.Trial`.

    **Optional fields**

    :ivar rates: (:class:`ListOfExplorationRates`) exploration rates raced in the trial
    :ivar arm_count: (*int > 0*) number of arms
    :ivar horizon: (*int > 0*) number of steps each agent takes
    :ivar bias_range: (:class:`BiasRange`) interval the arm biases are drawn from
    :ivar offset_policy: (*str*) one of :const:`kbandit.constant.OFFSET_POLICIES`
    :ivar seed: (*int >= 0*) seed of the trial's random streams; None draws fresh entropy

    **Example Config**

    .. sourcecode:: python

        {
            "rates": [0.0, 0.01, 0.05, 0.1, 0.2, 0.3, 0.5],
            "arm_count": 10,
            "horizon": 1000,
            "bias_range": [-1.0, 1.0],
            "offset_policy": "truncated",
            "seed": 1234,
        }

    """

    rates = ListOfExplorationRates(missing=DEFAULT_EXPLORATION_RATES)
    arm_count = PositiveInt(missing=DEFAULT_ARM_COUNT)
    horizon = PositiveInt(missing=DEFAULT_HORIZON)
    bias_range = BiasRange(missing=DEFAULT_BIAS_RANGE)
    offset_policy = colander.SchemaNode(
            colander.String(),
            validator=colander.OneOf(OFFSET_POLICIES),
            missing=DEFAULT_OFFSET_POLICY,
            )
    seed = colander.SchemaNode(
            StrictInt(),
            validator=colander.Range(min=0),
            missing=None,
            )


class ExperimentConfig(TrialConfig):

    """The configuration of a :class:`kbandit.experiment.Experiment`: a :class:`TrialConfig` plus the following.

    **Optional fields**

    :ivar sample_count: (*int > 0*) number of independent trials
    :ivar retain_last_trial: (*bool*) whether to keep the last trial for its trajectories

    """

    sample_count = PositiveInt(missing=DEFAULT_SAMPLE_COUNT)
    retain_last_trial = colander.SchemaNode(
            colander.Boolean(),
            missing=True,
            )


def deserialize_config(schema, params):
    """Validate ``params`` against ``schema`` and return the deserialized config, defaults filled in.

    Parameters set to None are treated as missing.

    :param schema: the schema to validate against
    :type schema: :class:`TrialConfig` or :class:`ExperimentConfig` instance
    :param params: the configuration
    :type params: dict
    :return: the deserialized configuration
    :rtype: dict
    :raise: ConfigurationError when ``params`` does not pass validation.

    """
    if "log" not in deserialize_config.__dict__:
        deserialize_config.log = logging.getLogger(__name__)

    cstruct = dict((key, value) for key, value in params.items() if value is not None)
    try:
        return schema.deserialize(cstruct)
    except colander.Invalid as invalid:
        deserialize_config.log.warning('Invalid {0:s}: {1}'.format(schema.__class__.__name__, invalid.asdict()))
        raise ConfigurationError('Invalid {0:s}.'.format(schema.__class__.__name__), errors=invalid.asdict())
