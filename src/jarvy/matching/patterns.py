"""Intent library seed data.

Static phrase library loaded at startup. Each intent lists example
phrasings, candidate replies and the follow-up suggestions offered with
a confident match.
"""

from datetime import datetime

from jarvy.models.intent import TrainingPattern


def _time_responses() -> list[str]:
    now = datetime.now()
    time_str = now.strftime("%H:%M:%S")
    date_str = now.strftime("%Y-%m-%d")
    return [
        f"Current time: {time_str}\nDate: {date_str}",
        f"It's {time_str} right now.\nToday is {date_str}",
        f"Time: {time_str}\nHave a great day!",
    ]


INTENT_SEED: list[dict] = [
    {
        "tag": "greeting",
        "patterns": [
            "hi", "hello", "hey", "good morning", "good afternoon",
            "good evening", "howdy", "what's up", "sup",
        ],
        "responses": [
            "Hello! I'm Jarvy, your AI assistant. How can I help you today?",
            "Hi there! I'm here to assist you with anything you need.",
            "Hey! Great to see you. What can I do for you?",
            "Hello! I'm Jarvy, ready to help with your questions.",
        ],
        "suggestions": ["How to use Chattyy", "App features", "Make a video call", "Send files"],
    },
    {
        "tag": "app_help",
        "patterns": [
            "help", "how to use", "guide", "tutorial", "instructions",
            "how does this work", "what can I do",
        ],
        "responses": [
            "I can help you with Chattyy! You can:\n• Send messages and files\n"
            "• Make video/voice calls\n• Create status updates\n"
            "• Use voice messages\n• React to messages\n"
            "What would you like to know more about?",
            "Welcome to Chattyy! This app lets you:\n• Send encrypted messages\n"
            "• Make HD video calls\n• Share disappearing status\n"
            "• Send all types of media\nWhat feature interests you most?",
        ],
        "suggestions": ["Video calls", "Status updates", "File sharing", "Voice messages"],
    },
    {
        "tag": "video_calls",
        "patterns": [
            "video call", "how to call", "make a call", "start video call",
            "video chat", "calling",
        ],
        "responses": [
            "To make a video call:\n1. Open any chat\n2. Click the video camera icon "
            "in the top right\n3. Allow camera/microphone access\n4. Enjoy your call!",
            "Video calling is easy! Just click the video icon in any chat header. "
            "You can also share your screen during calls!",
        ],
        "suggestions": ["Audio problems", "Screen sharing", "Call quality", "Permission issues"],
    },
    {
        "tag": "status_updates",
        "patterns": [
            "status", "story", "how to post status", "create status",
            "status update", "share status",
        ],
        "responses": [
            "Creating status updates:\n1. Open the Status tab\n2. Choose text, photo, "
            "or video\n3. Customize with colors/text\n4. Post to share with contacts\n\n"
            "Status disappears after 24 hours!",
            "To create status:\n• Go to Status section\n• Choose content type\n"
            "• Add text/media\n• Share with all contacts",
        ],
        "suggestions": ["Status privacy", "Delete status", "View status", "Status types"],
    },
    {
        "tag": "file_sharing",
        "patterns": [
            "send file", "share file", "upload", "attach", "send photo",
            "send video", "send document",
        ],
        "responses": [
            "To share files:\n1. Click the paperclip icon in message input\n"
            "2. Select file type from your device\n3. Add caption if desired\n4. Send!",
            "File sharing options:\n• Photos & Videos\n• Documents (PDF, DOC, etc)\n"
            "• Audio files\n• Voice messages (hold mic)\n• Location sharing",
        ],
        "suggestions": ["Voice messages", "Location sharing", "File limits", "Supported formats"],
    },
    {
        "tag": "voice_messages",
        "patterns": [
            "voice message", "record voice", "audio message", "voice note",
            "how to record",
        ],
        "responses": [
            "Recording voice messages:\n1. Hold down the mic button\n2. Speak your "
            "message\n3. Release to send\n4. Slide left to cancel",
            "Voice message tips:\n• Hold mic button to record\n• Clear audio in quiet "
            "environment\n• Keep messages under 2 minutes",
        ],
    },
    {
        "tag": "message_features",
        "patterns": [
            "react to message", "reply", "forward", "star message",
            "message options", "emoji reaction",
        ],
        "responses": [
            "Message features:\n• Double-tap to react with heart\n• Long-press for "
            "more reactions\n• Reply to specific messages\n• Star important messages\n"
            "• Forward to other chats",
        ],
        "suggestions": ["How to reply", "Star messages", "Forward messages", "Delete messages"],
    },
    {
        "tag": "technical_help",
        "patterns": [
            "not working", "error", "bug", "problem", "issue", "troubleshoot", "fix",
        ],
        "responses": [
            "Technical issues? Try these steps:\n1. Refresh the page\n2. Check internet "
            "connection\n3. Clear browser cache\n4. Allow camera/microphone permissions\n"
            "5. Update your browser\n\nStill having issues? Let me know the specific problem!",
            "Troubleshooting:\n• Refresh page\n• Check permissions\n• Stable internet "
            "needed\n• Modern browser required\n• Clear cache if needed",
        ],
        "suggestions": ["Clear cache", "Check permissions", "Update browser", "Internet connection"],
    },
    {
        "tag": "privacy_security",
        "patterns": [
            "privacy", "security", "encryption", "safe", "secure",
            "data protection", "end to end",
        ],
        "responses": [
            "Your privacy matters:\n• Messages encrypted in transit\n• No server-side "
            "message storage\n• Secure file uploads\n• Private video calls",
        ],
    },
    {
        "tag": "app_features",
        "patterns": [
            "features", "what can this app do", "capabilities", "functions", "about app",
        ],
        "responses": [
            "All the features you need:\n• Real-time chat\n• Video calling\n"
            "• Status updates\n• File sharing\n• Voice notes\n• Reactions\n• Dark mode",
        ],
    },
    {
        "tag": "general_qa",
        "patterns": ["what is", "how", "why", "when", "where", "explain", "tell me about"],
        "responses": [
            "I'm here to help with any questions! I can explain features, provide "
            "guidance, or help troubleshoot issues.",
            "I can help with app features, technical issues, or general questions. "
            "What would you like to know?",
        ],
        "suggestions": ["App features", "How to call", "Send files", "Create status"],
    },
    {
        "tag": "weather",
        "patterns": ["weather", "temperature", "climate", "forecast", "rain", "sunny", "cloudy"],
        "responses": [
            "For weather information, I recommend checking your local weather app or "
            "website. Stay safe and dress appropriately!",
        ],
    },
    {
        "tag": "time",
        "patterns": ["time", "what time", "clock", "hour", "minute", "current time"],
        "responses": [],  # filled at load time
    },
    {
        "tag": "goodbye",
        "patterns": [
            "bye", "goodbye", "see you", "talk later", "exit", "quit",
            "farewell", "take care",
        ],
        "responses": [
            "Goodbye! Feel free to ask me anything anytime. Have a great day!",
            "See you later! I'm always here when you need help.",
            "Take care! Remember, I'm just a message away if you need assistance.",
        ],
    },
    {
        "tag": "thanks",
        "patterns": ["thanks", "thank you", "appreciate", "grateful", "helpful"],
        "responses": [
            "You're welcome! Happy to help anytime.",
            "Glad I could assist! Feel free to ask if you need anything else.",
            "My pleasure! That's what I'm here for.",
        ],
    },
]

HELP_FALLBACK_TEXT = (
    "I'm not sure I understand that. I can help you with:\n"
    "• App features and how-to guides\n"
    "• Video calling assistance\n"
    "• File sharing help\n"
    "• Status updates\n"
    "• Technical troubleshooting\n\n"
    "What would you like to know more about?"
)
HELP_FALLBACK_SUGGESTIONS = [
    "App help", "Video calls", "File sharing", "Status updates", "Technical help",
]

EMPTY_INPUT_TEXT = "I'm here to help! What would you like to know about Chattyy?"
EMPTY_INPUT_SUGGESTIONS = [
    "App features", "How to make calls", "Send files", "Create status",
]

QUICK_SUGGESTIONS = [
    "How do I make a video call?",
    "How to send files?",
    "Create status update",
    "Voice message help",
    "App features",
    "Technical support",
]


def load_intents() -> list[TrainingPattern]:
    """Build a fresh intent library from the seed."""
    intents = []
    for entry in INTENT_SEED:
        data = dict(entry)
        if data["tag"] == "time":
            data["responses"] = _time_responses()
        intents.append(TrainingPattern(**data))
    return intents
