#!/usr/bin/env python3
import os
import unittest
from unittest.mock import patch

from relay.config import Settings
from relay.errors import ConfigurationError


class TestSettings(unittest.TestCase):
    def test_from_env(self):
        env = {
            "GCP_DISCORD_WEBHOOK_URL": "https://discord.test/gcp",
            "ADAPTY_DISCORD_WEBHOOK_URL": "https://discord.test/adapty",
            "GCP_AUTH_TOKEN": "g",
            "ADAPTY_AUTH_TOKEN": "a",
            "APP_PORT": "8080",
            "DEBUG_MODE": "true",
            "DISCORD_TIMEOUT_SECONDS": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env().validate()
        self.assertEqual(settings.app_port, 8080)
        self.assertTrue(settings.debug_mode)
        self.assertEqual(settings.discord_timeout_seconds, 5.0)
        self.assertEqual(settings.adapty_auth_token, "a")

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.app_port, 5001)
        self.assertFalse(settings.debug_mode)
        self.assertEqual(settings.discord_timeout_seconds, 10.0)

    def test_validate_requires_both_webhook_urls(self):
        with self.assertRaises(ConfigurationError):
            Settings(gcp_discord_webhook_url="https://discord.test/gcp").validate()
        with self.assertRaises(ConfigurationError):
            Settings(
                gcp_discord_webhook_url="not a url",
                adapty_discord_webhook_url="https://discord.test/adapty",
            ).validate()

    def test_webhook_url_for_sender(self):
        settings = Settings(
            gcp_discord_webhook_url="https://discord.test/gcp",
            adapty_discord_webhook_url="https://discord.test/adapty",
        )
        self.assertEqual(settings.webhook_url_for("GCP Monitoring"), "https://discord.test/gcp")
        self.assertEqual(settings.webhook_url_for("Adapty"), "https://discord.test/adapty")
        self.assertIsNone(settings.webhook_url_for("Someone Else"))


if __name__ == '__main__':
    unittest.main()
