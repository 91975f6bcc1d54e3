"""
Unit Tests for the Rule-Based Chat Responder
"""
import pytest

from healthguard.services.chat_responder import (
    BLOOD_PRESSURE_REPLY,
    BLOOD_SUGAR_REPLY,
    DEFAULT_REPLY,
    EXERCISE_REPLY,
    NUTRITION_REPLY,
    SLEEP_REPLY,
    STRESS_REPLY,
    THANKS_REPLY,
    respond,
)


class TestRespond:
    @pytest.mark.parametrize("message, expected", [
        ("What about my blood pressure?", BLOOD_PRESSURE_REPLY),
        ("WHAT ABOUT MY BLOOD PRESSURE!!!", BLOOD_PRESSURE_REPLY),
        ("I was told I have HYPERTENSION", BLOOD_PRESSURE_REPLY),
        ("What is a normal blood sugar?", BLOOD_SUGAR_REPLY),
        ("Best workout for beginners?", EXERCISE_REPLY),
        ("Any nutrition tips?", NUTRITION_REPLY),
        ("I can't sleep", SLEEP_REPLY),
        ("Work anxiety is killing me", STRESS_REPLY),
        ("Thanks a lot", THANKS_REPLY),
    ])
    def test_topic_replies(self, message, expected):
        assert respond(message, "Asha") == expected

    def test_earlier_topic_wins(self):
        assert respond("Does diet affect blood pressure?", "Asha") == BLOOD_PRESSURE_REPLY
        assert respond("hi, my diabetes makes me tired", "Asha") == BLOOD_SUGAR_REPLY

    def test_greeting_uses_name(self):
        reply = respond("Hello!", "Asha")

        assert reply.startswith("Hello Asha! I'm your AI health assistant.")

    def test_greeting_matches_inside_words(self):
        # "this" contains "hi"
        assert respond("What is this?", "Ravi").startswith("Hello Ravi!")

    def test_default_reply(self):
        assert respond("What should I eat?", "Asha") == DEFAULT_REPLY
        assert respond("", "Asha") == DEFAULT_REPLY
