import hmac

import requests
from flask import Flask, jsonify, request

from .config import Settings
from .dispatcher import process
from .errors import MalformedPayload, UnrecognizedPayload
from .services import send_discord_payload
from .verification import check_verification


def _token_matches(received, expected):
    # Token vazio na configuração nunca autentica
    if not expected or received is None:
        return False
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))


def create_app(settings=None):
    if settings is None:
        settings = Settings.from_env().validate()
    debug = settings.debug_mode

    app = Flask(__name__)
    app.config["RELAY_SETTINGS"] = settings

    def is_authenticated():
        if _token_matches(request.headers.get("Authorization"), settings.adapty_auth_token):
            if debug:
                print("[DEBUG] Authenticated via Adapty Authorization header")
            return True
        if _token_matches(request.args.get("auth_token"), settings.gcp_auth_token):
            if debug:
                print("[DEBUG] Authenticated via GCP auth_token query parameter")
            return True
        return False

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'gcp-adapty-discord-relay'}, 200

    @app.route('/', methods=['POST'])
    @app.route('/webhook', methods=['POST'])
    def webhook():
        if debug:
            print(f"[DEBUG] Received request: Method={request.method}, ContentType={request.content_type}")

        if request.mimetype != 'application/json':
            if debug:
                print(f"[DEBUG] Invalid content-type: {request.content_type}")
            return 'invalid request', 400

        if not is_authenticated():
            if debug:
                print("[DEBUG] Authentication failed")
            return 'unauthorized', 401

        body = request.get_data()

        reply = check_verification(body)
        if reply is not None:
            if debug:
                print(f"[DEBUG] Verification request answered: {reply}")
            return jsonify(reply), 200

        try:
            message = process(body, debug_mode=debug)
        except (MalformedPayload, UnrecognizedPayload) as exc:
            if debug:
                print(f"[ERROR] Error processing payload: {exc}")
            return 'invalid payload format', 400

        username = message.get('username')
        webhook_url = settings.webhook_url_for(username)
        if not webhook_url:
            if debug:
                print(f"[ERROR] Unrecognized webhook username: {username}")
            return '', 500

        try:
            resp = send_discord_payload(
                webhook_url,
                message,
                timeout=settings.discord_timeout_seconds,
                debug_mode=debug,
            )
        except requests.RequestException as exc:
            if debug:
                print(f"[ERROR] Error posting to discord: {exc}")
            return '', 500

        if resp.status_code < 200 or resp.status_code >= 300:
            if debug:
                print(f"[ERROR] Unexpected Discord response status: {resp.status_code}")
            return '', 500

        if debug:
            print(f"[DEBUG] Successfully sent to Discord ({username}) with status: {resp.status_code}")
        return jsonify(message), 200

    return app
