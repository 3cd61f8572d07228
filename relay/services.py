import requests


def send_discord_payload(webhook_url, payload, timeout=10, debug_mode=False):
    # Entrega única (sem retry): erros de rede sobem como requests.RequestException
    resp = requests.post(webhook_url, json=payload, timeout=timeout)
    if debug_mode:
        print(f"[DEBUG] Discord response: {resp.status_code}")
        if resp.status_code != 204:
            print(f"[DEBUG] Response content: {resp.text[:500]}")
    return resp
