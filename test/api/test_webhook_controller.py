import unittest
from typing import Any
from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.webhook_controller import create_webhook_router
from features.bot.bot_client_stub import BotClientStub
from features.bot.bot_registry import DEFAULT_BOT_ID, BotRegistry
from features.updates.action_registry import action
from features.updates.updates_controller import UpdatesController


class EchoController(UpdatesController):

    @action
    def start(self, *args: str) -> Any:
        return self.respond_with("message", text = " ".join(["started", *args]))

    @action
    def explode(self) -> Any:
        raise RuntimeError("boom")


class WebhookControllerTest(unittest.TestCase):
    bot: BotClientStub
    registry: BotRegistry
    client: TestClient

    def setUp(self):
        self.bot = BotClientStub(username = "echo_bot")
        self.registry = BotRegistry()
        self.registry.register(DEFAULT_BOT_ID, self.bot)
        self.registry.register("other", BotClientStub(username = "other_bot"))
        app = FastAPI()
        app.include_router(create_webhook_router(EchoController, registry = self.registry))
        app.include_router(create_webhook_router(EchoController, bot_id = "other", registry = self.registry))
        app.include_router(create_webhook_router(EchoController, bot_id = "missing", registry = self.registry))
        self.client = TestClient(app)

    @staticmethod
    def message_update(text: str) -> dict:
        return {"update_id": 1, "message": {"message_id": 2, "chat": {"id": 456}, "text": text}}

    def test_dispatches_command(self):
        response = self.client.post("/default/update", json = self.message_update("/start@echo_bot now"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})
        self.assertEqual(self.bot.requests, [("sendMessage", {"chat_id": 456, "text": "started now"})])

    def test_dispatches_to_the_routed_bot(self):
        response = self.client.post("/other/update", json = self.message_update("/start@echo_bot"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.bot.requests, [])

    def test_unsupported_update_is_accepted(self):
        response = self.client.post("/default/update", json = {"update_id": 1, "poll": {"id": "p"}})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.bot.requests, [])

    def test_rejects_non_object_body(self):
        response = self.client.post("/default/update", json = ["message"])

        self.assertEqual(response.status_code, 422)

    def test_unknown_bot(self):
        response = self.client.post("/missing/update", json = self.message_update("/start"))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"]["error_code"], 2001)

    def test_action_failure(self):
        response = self.client.post("/default/update", json = self.message_update("/explode"))

        self.assertEqual(response.status_code, 500)

    @patch("api.auth.config")
    def test_auth_key_required(self, mock_config):
        mock_config.webhook_must_auth = True
        mock_config.webhook_auth_key.get_secret_value.return_value = "secret"

        rejected = self.client.post("/default/update", json = self.message_update("/start"))
        accepted = self.client.post(
            "/default/update",
            json = self.message_update("/start"),
            headers = {"X-Telegram-Bot-Api-Secret-Token": "secret"},
        )

        self.assertEqual(rejected.status_code, 403)
        self.assertEqual(accepted.status_code, 200)
        self.assertEqual(len(self.bot.requests), 1)
