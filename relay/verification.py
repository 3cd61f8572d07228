import json

from .constants import ADAPTY_CHECK_KEY, ADAPTY_CHECK_RESPONSE_KEY, MOUNT_EVENT, MOUNT_RESPONSE


def _is_mount_event(source):
    if not isinstance(source, dict):
        return False
    return source.get("event") == MOUNT_EVENT or source.get("event_type") == MOUNT_EVENT


def verification_response(data):
    """Resposta fixa para verificações do webhook, ou None se não for uma verificação."""
    if not isinstance(data, dict):
        return None

    check = data.get(ADAPTY_CHECK_KEY)
    if isinstance(check, str):
        return {ADAPTY_CHECK_RESPONSE_KEY: check}

    if _is_mount_event(data) or _is_mount_event(data.get("data")):
        return dict(MOUNT_RESPONSE)

    return None


def check_verification(body):
    # JSON inválido não é verificação: segue para o dispatcher, que reporta o erro
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return None
    return verification_response(data)
