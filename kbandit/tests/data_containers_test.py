# -*- coding: utf-8 -*-
"""Tests for functions in ArmEstimate and WinCounts."""
import pprint

import pytest

from kbandit.data_containers import ArmEstimate, WinCounts
from kbandit.exceptions import ConfigurationError, UnpulledArmError
from kbandit.tests.bandit_simulation_test_case import BanditSimulationTestCase


class TestArmEstimate(BanditSimulationTestCase):

    """Tests functions in :class:`kbandit.data_containers.ArmEstimate`."""

    def test_default_is_unpulled(self):
        """Test a new estimate has no reward and no pulls."""
        arm_estimate = ArmEstimate()
        assert arm_estimate.total_reward == 0.0
        assert arm_estimate.pulls == 0

    def test_mean_unpulled_invalid(self):
        """Test the mean of an unpulled arm raises UnpulledArmError."""
        with pytest.raises(UnpulledArmError):
            ArmEstimate().mean

    def test_record(self):
        """Test recording rewards updates the total, the pulls and the mean."""
        arm_estimate = ArmEstimate()
        arm_estimate.record(0.5)
        arm_estimate.record(-1.5)
        assert arm_estimate.total_reward == pytest.approx(-1.0)
        assert arm_estimate.pulls == 2
        assert arm_estimate.mean == pytest.approx(-0.5)

    def test_str(self):
        """Test ArmEstimate's __str__ overload operator."""
        arm_estimate = ArmEstimate(total_reward=1.5, pulls=2)
        assert str(arm_estimate) == pprint.pformat(arm_estimate.json_payload())

    def test_validate_invalid(self):
        """Test that bad member data raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ArmEstimate(total_reward=float('nan'), pulls=1)
        with pytest.raises(ConfigurationError):
            ArmEstimate(total_reward=float('inf'), pulls=1)
        with pytest.raises(ConfigurationError):
            ArmEstimate(total_reward=0.0, pulls=-1)
        with pytest.raises(ConfigurationError):
            ArmEstimate(total_reward=0.0, pulls=1.5)
        with pytest.raises(ConfigurationError):
            ArmEstimate(total_reward=1.0, pulls=0)


class TestWinCounts(BanditSimulationTestCase):

    """Tests functions in :class:`kbandit.data_containers.WinCounts`."""

    labels = ['0', '0.1', '0.5']

    def test_init_zero_counts(self):
        """Test every label starts with zero wins, in candidate order."""
        win_counts = WinCounts(labels=self.labels)
        assert win_counts.labels == self.labels
        assert list(win_counts.as_dict().values()) == [0, 0, 0]
        assert win_counts.total == 0
        assert len(win_counts) == 3

    def test_duplicate_labels_invalid(self):
        """Test duplicate labels raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            WinCounts(labels=['0.1', '0.1'])

    def test_negative_count_invalid(self):
        """Test negative counts raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            WinCounts(labels=self.labels, counts={'0': -1})

    def test_record_win(self):
        """Test recording wins increments only the winner."""
        win_counts = WinCounts(labels=self.labels)
        win_counts.record_win('0.1')
        win_counts.record_win('0.1')
        win_counts.record_win('0')
        assert win_counts['0.1'] == 2
        assert win_counts['0'] == 1
        assert win_counts['0.5'] == 0
        assert win_counts.total == 3
        assert win_counts.winner_label == '0.1'

    def test_record_win_unknown_label_invalid(self):
        """Test recording a win for an unknown label raises KeyError."""
        win_counts = WinCounts(labels=self.labels)
        with pytest.raises(KeyError):
            win_counts.record_win('0.3')

    def test_winner_label_ties_go_to_first(self):
        """Test the first candidate wins a tie."""
        win_counts = WinCounts(labels=self.labels, counts={'0.1': 4, '0.5': 4})
        assert win_counts.winner_label == '0.1'

    def test_add_merges_counts(self):
        """Test that merging sums counts, in any order, without modifying the operands."""
        win_counts1 = WinCounts(labels=self.labels, counts={'0': 1, '0.1': 2})
        win_counts2 = WinCounts(labels=self.labels, counts={'0.1': 3, '0.5': 5})
        expected = WinCounts(labels=self.labels, counts={'0': 1, '0.1': 5, '0.5': 5})

        assert win_counts1 + win_counts2 == expected
        assert (win_counts2 + win_counts1).as_dict() == expected.as_dict()
        assert win_counts1.total == 3
        assert win_counts2.total == 8

        win_counts1 += win_counts2
        assert win_counts1 == expected

    def test_add_is_associative(self):
        """Test (a + b) + c == a + (b + c)."""
        win_counts = [WinCounts(labels=self.labels, counts={label: index + 1}) for index, label in enumerate(self.labels)]
        assert (win_counts[0] + win_counts[1]) + win_counts[2] == win_counts[0] + (win_counts[1] + win_counts[2])

    def test_mapping_access(self):
        """Test WinCounts behaves like a read-only mapping."""
        win_counts = WinCounts(labels=self.labels, counts={'0.5': 2})
        assert list(win_counts) == self.labels
        assert '0.5' in win_counts
        assert '0.3' not in win_counts
        assert dict(win_counts.as_dict()) == {'0': 0, '0.1': 0, '0.5': 2}

    def test_equality(self):
        """Test == and != compare counts and label order, and reject other types."""
        win_counts = WinCounts(labels=self.labels, counts={'0.1': 1})
        assert win_counts == WinCounts(labels=self.labels, counts={'0.1': 1})
        assert win_counts != WinCounts(labels=self.labels, counts={'0.1': 2})
        assert win_counts != WinCounts(labels=list(reversed(self.labels)), counts={'0.1': 1})
        assert win_counts != win_counts.as_dict()

    def test_json_payload_and_str(self):
        """Test the json payload and the __str__ overload operator."""
        win_counts = WinCounts(labels=self.labels, counts={'0': 7})
        assert win_counts.json_payload() == {'win_counts': {'0': 7, '0.1': 0, '0.5': 0}}
        assert str(win_counts) == pprint.pformat(win_counts.json_payload())
