import unittest
from unittest.mock import sentinel

from features.updates.action_resolver import ResolvedAction, action_for_command, action_for_payload
from features.updates.payload_type import PAYLOAD_TYPES, UNSUPPORTED_PAYLOAD_TYPE
from features.telegram.model.inline_query import InlineQuery


class ActionForCommandTest(unittest.TestCase):

    def test_bypasses_and_downcases_not_conflicting_commands(self):
        self.assertEqual(action_for_command("test"), "test")
        self.assertEqual(action_for_command("TeSt"), "test")
        self.assertEqual(action_for_command("_Te1St"), "_te1st")

    def test_prefixes_conflicting_commands(self):
        for payload_type in PAYLOAD_TYPES:
            self.assertEqual(action_for_command(payload_type), f"on_{payload_type}")
            self.assertEqual(action_for_command(payload_type.upper()), f"on_{payload_type}")

    def test_prefixes_commands_starting_with_digit(self):
        self.assertEqual(action_for_command("1TeSt"), "on_1test")
        self.assertEqual(action_for_command("123"), "on_123")

    def test_unsupported_marker_is_not_reserved(self):
        self.assertEqual(action_for_command("Unsupported_Payload_Type"), "unsupported_payload_type")


class ActionForPayloadTest(unittest.TestCase):

    @staticmethod
    def stub_payload(*fields: str) -> dict:
        return {name: getattr(sentinel, name) for name in fields}

    def test_inline_query(self):
        payload = self.stub_payload("id", "from", "location", "query", "offset")

        result = action_for_payload("inline_query", payload)

        self.assertEqual(result, ResolvedAction(False, "inline_query", [sentinel.query, sentinel.offset]))

    def test_inline_query_typed(self):
        payload = InlineQuery.model_validate(
            {"id": "1", "from": {"id": 7, "first_name": "Ann"}, "query": "q", "offset": "o"},
        )

        result = action_for_payload("inline_query", payload)

        self.assertEqual(result, ResolvedAction(False, "inline_query", ["q", "o"]))

    def test_chosen_inline_result(self):
        payload = self.stub_payload("result_id", "from", "location", "inline_message_id", "query")

        result = action_for_payload("chosen_inline_result", payload)

        self.assertEqual(result, ResolvedAction(False, "chosen_inline_result", [sentinel.result_id, sentinel.query]))

    def test_callback_query(self):
        payload = self.stub_payload("id", "from", "message", "inline_message_id", "data")

        result = action_for_payload("callback_query", payload)

        self.assertEqual(result, ResolvedAction(False, "callback_query", [sentinel.data]))

    def test_callback_query_missing_field(self):
        result = action_for_payload("callback_query", {"id": "1"})

        self.assertEqual(result, ResolvedAction(False, "callback_query", [None]))

    def test_unsupported(self):
        expected = ResolvedAction(False, UNSUPPORTED_PAYLOAD_TYPE, [])

        self.assertEqual(action_for_payload("_unsupported_", {"a": 1}), expected)
        self.assertEqual(action_for_payload(None, {}), expected)

    def test_edited_payloads_never_parse_commands(self):
        for payload_type in ["edited_message", "edited_channel_post"]:
            payload = {"text": "/test arg"}

            result = action_for_payload(payload_type, payload, True)

            self.assertEqual(result, ResolvedAction(False, payload_type, [payload]))

    def test_text_payloads(self):
        for payload_type in ["message", "channel_post"]:
            plain = {"text": "test"}
            self.assertEqual(action_for_payload(payload_type, plain, "bot"), ResolvedAction(False, payload_type, [plain]))

            command = {"text": "/test arg 1 2"}
            self.assertEqual(action_for_payload(payload_type, command, "bot"), ResolvedAction(True, "test", ["arg", "1", "2"]))

            mentioned = {"text": "/test@bot arg 1 2"}
            self.assertEqual(action_for_payload(payload_type, mentioned, "bot"), ResolvedAction(True, "test", ["arg", "1", "2"]))

            other_bot = {"text": "/test@other_bot arg 1 2"}
            self.assertEqual(action_for_payload(payload_type, other_bot, "bot"), ResolvedAction(False, payload_type, [other_bot]))

            without_text = {"audio": {"file_id": 123}}
            self.assertEqual(action_for_payload(payload_type, without_text, "bot"), ResolvedAction(False, payload_type, [without_text]))

    def test_command_names_are_not_mapped(self):
        result = action_for_payload("message", {"text": "/Message"})

        self.assertEqual(result, ResolvedAction(True, "Message", []))

    def test_other_types_pass_the_whole_payload(self):
        custom_types = {
            "message",
            "edited_message",
            "channel_post",
            "edited_channel_post",
            "inline_query",
            "chosen_inline_result",
            "callback_query",
        }
        for payload_type in [x for x in PAYLOAD_TYPES if x not in custom_types]:
            payload = {"id": "1"}

            result = action_for_payload(payload_type, payload)

            self.assertEqual(result, ResolvedAction(False, payload_type, [payload]))
