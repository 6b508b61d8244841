# -*- coding: utf-8 -*-
"""The Monte-Carlo loop: run many independent :class:`~kbandit.trial.Trial` and tally which exploration rate wins.

The result is a :class:`~kbandit.data_containers.WinCounts`, a plain mapping from rate label to
number of trials won, ready to be drawn as a histogram by a separate presentation layer.

"""
import logging

import numpy

from kbandit.constant import DEFAULT_ARM_COUNT, DEFAULT_BIAS_RANGE, DEFAULT_EXPLORATION_RATES, DEFAULT_HORIZON, DEFAULT_OFFSET_POLICY, DEFAULT_SAMPLE_COUNT
from kbandit.data_containers import WinCounts
from kbandit.schemas import ExperimentConfig, deserialize_config
from kbandit.timing import timing_context
from kbandit.trial import Trial
from kbandit.utils import get_rate_label


class Experiment(object):

    """Repeat a :class:`~kbandit.trial.Trial` ``sample_count`` times and count the wins of every exploration rate.

    Trial ``i`` is seeded with the ``i``-th value generated by the experiment's ``numpy.random.SeedSequence``,
    so an experiment with a fixed seed always produces the same win counts, and every trial has its own
    independent random streams.

    """

    def __init__(
            self,
            sample_count=DEFAULT_SAMPLE_COUNT,
            rates=DEFAULT_EXPLORATION_RATES,
            arm_count=DEFAULT_ARM_COUNT,
            horizon=DEFAULT_HORIZON,
            bias_range=DEFAULT_BIAS_RANGE,
            offset_policy=DEFAULT_OFFSET_POLICY,
            seed=None,
            retain_last_trial=True,
    ):
        """Construct an Experiment; see :class:`kbandit.schemas.ExperimentConfig` for the parameters.

        :raise: ConfigurationError when the parameters do not pass validation.

        """
        config = deserialize_config(
                ExperimentConfig(),
                {
                    'sample_count': sample_count,
                    'rates': rates,
                    'arm_count': arm_count,
                    'horizon': horizon,
                    'bias_range': bias_range,
                    'offset_policy': offset_policy,
                    'seed': seed,
                    'retain_last_trial': retain_last_trial,
                },
                )

        self._sample_count = config['sample_count']
        self._rates = list(config['rates'])
        self._arm_count = config['arm_count']
        self._horizon = config['horizon']
        self._bias_range = tuple(config['bias_range'])
        self._offset_policy = config['offset_policy']
        self._seed = config['seed']
        self._retain_last_trial = config['retain_last_trial']

        self._win_counts = None
        self._retained_trial = None

        self.log = logging.getLogger(__name__)

    def make_win_counts(self):
        """Return an empty accumulator with a zero count for every candidate rate."""
        return WinCounts(labels=[get_rate_label(rate) for rate in self._rates])

    def get_trial_seeds(self):
        """Return the seed of every trial, derived from the experiment seed (fresh entropy if it is None).

        :rtype: list of int

        """
        seed_sequence = numpy.random.SeedSequence(self._seed)
        return [int(trial_seed) for trial_seed in seed_sequence.generate_state(self._sample_count, dtype=numpy.uint64)]

    def run(self):
        """Run ``sample_count`` independent trials and count how many each exploration rate wins.

        Any error raised by a trial propagates; no partial result is kept.

        :return: the win counts, summing to ``sample_count``
        :rtype: :class:`~kbandit.data_containers.WinCounts`

        """
        self._win_counts = None
        self._retained_trial = None
        win_counts = self.make_win_counts()
        trial = None

        self.log.info('Running {0:d} trials of {1:d} steps over {2:d} arms for rates {3}'.format(
            self._sample_count,
            self._horizon,
            self._arm_count,
            win_counts.labels,
            ))
        with timing_context('Experiment.run'):
            for sample_index, trial_seed in enumerate(self.get_trial_seeds()):
                trial = Trial(
                        rates=self._rates,
                        arm_count=self._arm_count,
                        horizon=self._horizon,
                        bias_range=self._bias_range,
                        offset_policy=self._offset_policy,
                        seed=trial_seed,
                        ).run()
                winner_label = trial.winner_label()
                win_counts.record_win(winner_label)
                self.log.debug('Trial {0:d} won by {1:s}'.format(sample_index, winner_label))

        self.log.info('Win counts: {0}'.format(dict(win_counts.as_dict())))

        self._win_counts = win_counts
        self._retained_trial = trial if self._retain_last_trial else None
        return win_counts

    def trajectories(self):
        """Return the cumulative score trajectories of the retained trial, None if no trial was retained.

        :rtype: OrderedDict of (agent label, list of float64) pairs, or None

        """
        if self._retained_trial is None:
            return None
        return self._retained_trial.trajectories()

    def json_payload(self):
        """Construct a json serializeable dictionary of the experiment results (empty before :meth:`run`)."""
        if self._win_counts is None:
            return {}
        payload = self._win_counts.json_payload()
        payload['trajectories'] = self.trajectories()
        return payload

    @property
    def win_counts(self):
        """Return the win counts of the last :meth:`run` as an OrderedDict of (rate label, count) pairs, None before any run."""
        if self._win_counts is None:
            return None
        return self._win_counts.as_dict()

    @property
    def retained_trial(self):
        """Return the last trial of the last :meth:`run` if trials are retained, else None."""
        return self._retained_trial

    @property
    def sample_count(self):
        """Return the number of trials per run."""
        return self._sample_count

    @property
    def rates(self):
        """Return the candidate exploration rates."""
        return self._rates


def run_experiment(**kwargs):
    """Construct an :class:`Experiment` from ``kwargs`` and run it.

    :param kwargs: parameters of :class:`Experiment`
    :return: the win counts
    :rtype: :class:`~kbandit.data_containers.WinCounts`

    """
    return Experiment(**kwargs).run()
