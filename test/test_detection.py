#!/usr/bin/env python3
import json
import unittest

from relay.detection import (
    INCIDENT,
    SUBSCRIPTION_MAP,
    SUBSCRIPTION_STRICT,
    classify,
)
from relay.errors import MalformedPayload, UnrecognizedPayload


def _body(payload):
    return json.dumps(payload).encode("utf-8")


class TestClassify(unittest.TestCase):
    def test_gcp_incident(self):
        result = classify(_body({"incident": {"incident_id": "0.abc", "state": "open"}, "version": "1.2"}))
        self.assertEqual(result.kind, INCIDENT)
        self.assertTrue(result.is_incident)
        self.assertEqual(result.value.incident.incident_id, "0.abc")

    def test_incident_wins_when_both_shapes_match(self):
        payload = {"incident": {"incident_id": "0.abc"}, "event_type": "subscription_started"}
        self.assertEqual(classify(_body(payload)).kind, INCIDENT)

    def test_incident_without_id_is_not_an_incident(self):
        payload = {"incident": {"incident_id": "", "state": "open"}, "event_type": "trial_started"}
        self.assertEqual(classify(_body(payload)).kind, SUBSCRIPTION_STRICT)

    def test_typed_adapty_event(self):
        payload = {"event_type": "subscription_started", "event_properties": {"price_usd": 4.99}}
        result = classify(_body(payload))
        self.assertEqual(result.kind, SUBSCRIPTION_STRICT)
        self.assertEqual(result.value.event_properties.price_usd, 4.99)

    def test_legacy_event_field_is_enough_for_typed_form(self):
        result = classify(_body({"event": "subscription_renewed", "data": {"profile_id": "p1"}}))
        self.assertEqual(result.kind, SUBSCRIPTION_STRICT)

    def test_loose_map_when_typed_decode_fails(self):
        # price_usd inválido quebra o modelo tipado, mas o mapa ainda é aceito
        payload = {"event_type": "subscription_started", "event_properties": {"price_usd": "abc"}}
        result = classify(_body(payload))
        self.assertEqual(result.kind, SUBSCRIPTION_MAP)
        self.assertEqual(result.value["event_type"], "subscription_started")

    def test_event_without_event_type_falls_back_to_map(self):
        result = classify(_body({"event": "custom_thing", "data": "not-an-object"}))
        self.assertEqual(result.kind, SUBSCRIPTION_MAP)
        self.assertEqual(result.value["event"], "custom_thing")

    def test_map_accepts_event_at_top_level_or_under_data(self):
        cases = [
            {"event": "subscription_started", "event_properties": {"price_usd": "abc"}},
            {"data": {"event": "subscription_started"}, "event_properties": {"price_usd": "abc"}},
            {"data": {"event_type": "subscription_started"}, "event_properties": {"price_usd": "abc"}},
        ]
        for payload in cases:
            self.assertEqual(classify(_body(payload)).kind, SUBSCRIPTION_MAP, payload)

    def test_undeclared_keys_survive_typed_decode(self):
        payload = {"event_type": "access_level_updated", "access_level_id": "premium", "extra_flag": "x"}
        result = classify(_body(payload))
        self.assertEqual(result.kind, SUBSCRIPTION_STRICT)
        self.assertEqual(result.value.access_level_id, "premium")
        self.assertEqual(result.value.model_dump()["extra_flag"], "x")

    def test_malformed_payload(self):
        for body in [b"not json", b"", b"{\"incident\": "]:
            with self.assertRaises(MalformedPayload):
                classify(body)

    def test_unrecognized_payload(self):
        for payload in [{"foo": "bar"}, [1, 2, 3], "text", {"event": 42}]:
            with self.assertRaises(UnrecognizedPayload):
                classify(_body(payload))


if __name__ == '__main__':
    unittest.main()
