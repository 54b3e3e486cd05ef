# tests/test_status_aggregator.py
"""Unit tests for the verification status aggregator."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import itertools
from types import SimpleNamespace
from app.models.enums import VerificationStatus
from app.services.status_aggregator import aggregate, progress


def mats(*flags):
    return [SimpleNamespace(is_verified=f) for f in flags]


class TestAggregate:
    def test_empty_set_is_not_applicable(self):
        assert aggregate([]) == VerificationStatus.NON_APPLICABLE
        assert aggregate(iter(())) == VerificationStatus.NON_APPLICABLE

    def test_all_verified_is_ok(self):
        assert aggregate(mats(True)) == VerificationStatus.OK
        assert aggregate(mats(True, True, True)) == VerificationStatus.OK

    def test_any_unverified_is_anomalie(self):
        assert aggregate(mats(False)) == VerificationStatus.ANOMALIE
        assert aggregate(mats(True, False, True)) == VerificationStatus.ANOMALIE

    def test_every_non_empty_combination(self):
        for size in range(1, 5):
            for flags in itertools.product([True, False], repeat=size):
                expected = VerificationStatus.OK if all(flags) else VerificationStatus.ANOMALIE
                assert aggregate(mats(*flags)) == expected

    def test_quantity_does_not_weigh(self):
        items = [SimpleNamespace(is_verified=True, quantity=50),
                 SimpleNamespace(is_verified=False, quantity=1)]
        assert aggregate(items) == VerificationStatus.ANOMALIE

    def test_status_values_match_stored_strings(self):
        assert VerificationStatus.OK.value == "OK"
        assert VerificationStatus.ANOMALIE.value == "Anomalie"
        assert VerificationStatus.NON_APPLICABLE.value == "Non applicable"


class TestProgress:
    def test_none_verified(self):
        p = progress(mats(False, False, False))
        assert (p.verified, p.total, p.percent) == (0, 3, 0)
        assert str(p) == "0/3 (0%)"

    def test_all_verified(self):
        assert str(progress(mats(True, True, True))) == "3/3 (100%)"

    def test_empty(self):
        p = progress([])
        assert p.percent == 0
        assert str(p) == "0/0 (0%)"

    def test_partial(self):
        p = progress(mats(True, False, False))
        assert round(p.percent, 2) == 33.33
        assert str(p) == "1/3 (33%)"
