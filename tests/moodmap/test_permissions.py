"""Tests for the location permission state machine."""

import pytest

from moodmap.permissions import LocationPermission
from shared_types import PermissionState as P


class TestLocationPermission:
    def test_starts_unknown(self):
        permission = LocationPermission()
        assert permission.state == P.UNKNOWN
        assert not permission.granted

    def test_request_then_grant(self):
        permission = LocationPermission()
        permission.request()
        assert permission.state == P.REQUESTED
        permission.grant()
        assert permission.granted

    def test_request_is_noop_once_decided(self):
        permission = LocationPermission(P.DENIED)
        permission.request()
        assert permission.state == P.DENIED

    def test_cannot_return_to_requested(self):
        permission = LocationPermission(P.GRANTED)
        with pytest.raises(ValueError):
            permission._transition(P.REQUESTED)

    def test_listeners_notified(self):
        permission = LocationPermission()
        events = []
        permission.subscribe(lambda old, new: events.append((old, new)))

        permission.request()
        permission.deny()
        permission.deny()

        assert events == [(P.UNKNOWN, P.REQUESTED), (P.REQUESTED, P.DENIED)]

    def test_unsubscribe(self):
        permission = LocationPermission()
        events = []
        unsubscribe = permission.subscribe(lambda old, new: events.append(new))
        unsubscribe()
        permission.grant()
        assert events == []
