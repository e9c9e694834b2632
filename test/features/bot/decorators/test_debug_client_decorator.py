import unittest
from unittest.mock import MagicMock, patch

from features.bot.bot_client_stub import BotClientStub
from features.bot.decorators.debug_client_decorator import DebugClientDecorator


class DebugClientDecoratorTest(unittest.TestCase):

    @patch("features.bot.decorators.debug_client_decorator.log")
    def test_request_is_logged_and_delegated(self, mock_log):
        stub = BotClientStub(username = "bot")
        client = DebugClientDecorator(stub)

        result = client.request("sendMessage", {"chat_id": 1})

        self.assertEqual(result, stub.response)
        self.assertEqual(stub.requests, [("sendMessage", {"chat_id": 1})])
        self.assertEqual(mock_log.d.call_count, 2)

    @patch("features.bot.decorators.debug_client_decorator.log")
    def test_failure_is_logged_and_raised(self, mock_log):
        wrapped = MagicMock()
        error = ValueError("boom")
        wrapped.request.side_effect = error
        client = DebugClientDecorator(wrapped)

        with self.assertRaises(ValueError):
            client.request("getMe")

        mock_log.w.assert_called_once()
        self.assertIs(mock_log.w.call_args[0][1], error)

    def test_other_attributes_are_delegated(self):
        stub = BotClientStub(username = "bot")
        client = DebugClientDecorator(stub)

        client.send_message(1, "hi")

        self.assertEqual(client.username, "bot")
        self.assertEqual(stub.requests, [("sendMessage", {"chat_id": 1, "text": "hi"})])

    def test_missing_attributes_raise(self):
        client = DebugClientDecorator(BotClientStub(username = "bot"))

        with self.assertRaises(AttributeError):
            _ = client.no_such_attribute
