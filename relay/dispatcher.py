from .detection import (
    INCIDENT,
    SUBSCRIPTION_MAP,
    SUBSCRIPTION_STRICT,
    classify,
)
from .formatters import format_incident, format_subscription_event
from .schemas import SubscriptionEvent


def to_subscription_event(classification):
    if classification.kind == SUBSCRIPTION_STRICT:
        return SubscriptionEvent.from_webhook(classification.value)
    if classification.kind == SUBSCRIPTION_MAP:
        return SubscriptionEvent.from_mapping(classification.value)
    raise ValueError(f"not a subscription event: {classification.kind}")


def process(body, now=None, debug_mode=False):
    """Converte o corpo bruto da requisição na mensagem do Discord.

    Lança MalformedPayload (JSON inválido) ou UnrecognizedPayload (formato desconhecido).
    A escolha do webhook de destino fica a cargo do chamador, pelo `username` da mensagem.
    """
    classification = classify(body)

    if classification.kind == INCIDENT:
        if debug_mode:
            print("[DEBUG] Processing as GCP Monitoring notification")
        return format_incident(classification.value, now=now, debug_mode=debug_mode)

    if debug_mode:
        print(f"[DEBUG] Processing as Adapty event ({classification.kind})")
    event = to_subscription_event(classification)
    return format_subscription_event(event, now=now, debug_mode=debug_mode)
