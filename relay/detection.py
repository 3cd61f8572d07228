import json
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from .errors import MalformedPayload, UnrecognizedPayload
from .schemas import AdaptyWebhook, MonitoringNotification

INCIDENT = "incident"
SUBSCRIPTION_STRICT = "subscription_strict"
SUBSCRIPTION_MAP = "subscription_map"


@dataclass(frozen=True)
class Classification:
    kind: str
    value: Any

    @property
    def is_incident(self):
        return self.kind == INCIDENT


def parse_json(body):
    try:
        return json.loads(body)
    except (TypeError, ValueError) as exc:
        raise MalformedPayload(f"payload is not valid JSON: {exc}") from exc


def match_incident(data):
    if not isinstance(data, dict):
        return None
    try:
        notification = MonitoringNotification.model_validate(data)
    except ValidationError:
        return None
    # JSON válido mas sem incident_id não é notificação do GCP
    if notification.incident is None or not notification.incident.incident_id:
        return None
    return notification


def match_subscription_strict(data):
    if not isinstance(data, dict):
        return None
    try:
        webhook = AdaptyWebhook.model_validate(data)
    except ValidationError:
        return None
    if not (webhook.event or webhook.event_type):
        return None
    return webhook


def _string_field(source, key):
    value = source.get(key) if isinstance(source, dict) else None
    if isinstance(value, str) and value.strip():
        return value
    return None


def match_subscription_map(data):
    # O payload do Adapty varia por tipo de evento; basta ser um objeto com event_type ou event
    if not isinstance(data, dict):
        return None
    nested = data.get("data")
    for key in ("event_type", "event"):
        if _string_field(data, key) or _string_field(nested, key):
            return data
    return None


def classify_data(data) -> Classification:
    notification = match_incident(data)
    if notification is not None:
        return Classification(INCIDENT, notification)

    webhook = match_subscription_strict(data)
    if webhook is not None:
        return Classification(SUBSCRIPTION_STRICT, webhook)

    raw_map = match_subscription_map(data)
    if raw_map is not None:
        return Classification(SUBSCRIPTION_MAP, raw_map)

    raise UnrecognizedPayload("payload format not recognized")


def classify(body) -> Classification:
    """Identifica o formato do payload: incidente GCP, evento Adapty (tipado ou mapa)."""
    return classify_data(parse_json(body))
