"""
Rule-Based Chat Responder
Keyword matching health assistant.

There is no language model behind this: the lower-cased message is
checked for plain substrings, topic by topic, and the first topic with a
matching keyword provides the canned reply. Matching is substring based,
so "hi" also matches inside words such as "this" or "which". Topics
earlier in RESPONSE_RULES win.
"""

BLOOD_PRESSURE_REPLY = (
    "Blood pressure is an important indicator of cardiovascular health. Normal blood pressure is "
    "typically around 120/80 mmHg. If your readings are consistently elevated (above 130/80), I "
    "recommend consulting with your doctor. In the meantime, maintaining a healthy diet low in "
    "sodium, regular exercise, stress management, and adequate sleep can help manage blood "
    "pressure levels."
)

BLOOD_SUGAR_REPLY = (
    "Blood sugar management is crucial for overall health. Normal fasting blood sugar levels are "
    "typically between 70-100 mg/dL. If you're concerned about diabetes risk, maintaining a healthy "
    "weight, eating a balanced diet rich in fiber and low in refined sugars, regular physical "
    "activity, and monitoring your blood glucose levels are important steps. Always consult with "
    "your healthcare provider for personalized advice."
)

EXERCISE_REPLY = (
    "Regular physical activity is one of the best things you can do for your health. The general "
    "recommendation is at least 150 minutes of moderate-intensity aerobic activity or 75 minutes of "
    "vigorous-intensity activity per week, plus muscle-strengthening activities on 2 or more days. "
    "Start slowly if you're new to exercise, and consider activities you enjoy to make it "
    "sustainable. Always consult with your doctor before starting a new exercise program, "
    "especially if you have existing health conditions."
)

NUTRITION_REPLY = (
    "A balanced diet is fundamental to good health. Focus on whole foods including fruits, "
    "vegetables, whole grains, lean proteins, and healthy fats. Limit processed foods, added "
    "sugars, and excessive sodium. Stay well-hydrated by drinking plenty of water. Consider the "
    "Mediterranean diet as a heart-healthy eating pattern. Remember, everyone's nutritional needs "
    "are different, so consulting with a registered dietitian can provide personalized guidance."
)

SLEEP_REPLY = (
    "Quality sleep is essential for physical and mental health. Most adults need 7-9 hours of "
    "sleep per night. To improve sleep quality: maintain a consistent sleep schedule, create a "
    "relaxing bedtime routine, keep your bedroom cool and dark, limit screen time before bed, "
    "avoid caffeine late in the day, and manage stress. If you're experiencing persistent sleep "
    "problems, consult with your healthcare provider."
)

STRESS_REPLY = (
    "Managing stress is crucial for overall health and wellbeing. Effective stress management "
    "techniques include regular exercise, meditation or mindfulness practices, deep breathing "
    "exercises, adequate sleep, maintaining social connections, and engaging in hobbies you enjoy. "
    "If stress or anxiety is significantly impacting your daily life, please consider speaking "
    "with a mental health professional who can provide personalized support."
)

# Formatted with the user's display name
GREETING_REPLY = (
    "Hello {user_name}! I'm your AI health assistant. I'm here to provide general health "
    "information and guidance. How can I help you today? You can ask me about nutrition, "
    "exercise, managing common health conditions, or general wellness topics."
)

THANKS_REPLY = (
    "You're welcome! I'm here to help. Remember, while I can provide general health information, "
    "always consult with your healthcare provider for medical advice specific to your situation. "
    "Is there anything else you'd like to know?"
)

DEFAULT_REPLY = (
    "Thank you for your question. While I can provide general health information, I recommend "
    "discussing specific concerns with your healthcare provider who can give you personalized "
    "medical advice based on your individual health history. Is there a general health topic I "
    "can help you with, such as nutrition, exercise, sleep, or stress management?"
)

# (keywords, reply), checked in order
RESPONSE_RULES = (
    (("blood pressure", "hypertension"), BLOOD_PRESSURE_REPLY),
    (("diabetes", "blood sugar"), BLOOD_SUGAR_REPLY),
    (("exercise", "workout"), EXERCISE_REPLY),
    (("diet", "nutrition", "food"), NUTRITION_REPLY),
    (("sleep", "insomnia"), SLEEP_REPLY),
    (("stress", "anxiety"), STRESS_REPLY),
    (("hello", "hi", "hey", "good morning", "good afternoon"), GREETING_REPLY),
    (("thank", "thanks"), THANKS_REPLY),
)


def respond(message: str, user_name: str) -> str:
    """
    Pick the canned reply for a user message.

    Args:
        message: Raw text typed by the user
        user_name: Name used in the greeting reply

    Returns:
        Reply text, DEFAULT_REPLY when no keyword matches

    Example:
        respond("What should I eat?", "Asha")    # no keyword -> DEFAULT_REPLY
        respond("Any diet tips?", "Asha")        # NUTRITION_REPLY
        respond("Hello there", "Asha")           # "Hello Asha! I'm your AI health assistant..."
    """
    text = message.lower()
    for keywords, reply in RESPONSE_RULES:
        if any(keyword in text for keyword in keywords):
            return reply.format(user_name=user_name) if reply is GREETING_REPLY else reply
    return DEFAULT_REPLY
