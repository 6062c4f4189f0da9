"""Bundled sample training conversations.

A small, curated dataset across several domains, used for bootstrap
training and as a realistic fixture.
"""

from jarvy.models.reasoning import Complexity
from jarvy.models.training import TrainingConversation

SAMPLE_TRAINING_DATA: list[TrainingConversation] = [
    TrainingConversation(
        query="What's the difference between React and Vue.js?",
        response=(
            "React and Vue.js are both popular frontend frameworks:\n\n"
            "**React:**\n"
            "• React is developed by Meta and uses JSX syntax\n"
            "• Its ecosystem is larger and more flexible\n\n"
            "**Vue.js:**\n"
            "• Vue uses template-based syntax that is close to HTML\n"
            "• The learning curve is gentler for beginners\n\n"
            "Popular tooling such as: Vite, Next.js and Nuxt"
        ),
        rating=5,
        category="technology",
        complexity=Complexity.MODERATE,
        tags=("web development", "frameworks", "comparison"),
    ),
    TrainingConversation(
        query="How do I optimize website performance?",
        response=(
            "Website performance optimization involves several strategies:\n\n"
            "**Frontend:**\n"
            "• Image compression is the quickest win for most pages\n"
            "• Lazy loading can defer offscreen images\n"
            "• Browser caching will avoid repeated downloads\n\n"
            "**Tools to measure:**\n"
            "• Audits including: PageSpeed Insights and WebPageTest"
        ),
        rating=5,
        category="technology",
        complexity=Complexity.COMPLEX,
        tags=("web performance", "optimization"),
    ),
    TrainingConversation(
        query="How do I validate a business idea before investing money?",
        response=(
            "Here's a systematic way to validate your business idea:\n\n"
            "• Customer interviews are the cheapest source of evidence\n"
            "• A landing page can measure real demand\n"
            "• Pre-orders are a strong signal of willingness to pay\n\n"
            "Low-cost methods such as: surveys, waitlists and prototype tests"
        ),
        rating=5,
        category="business",
        complexity=Complexity.COMPLEX,
        tags=("startup", "validation"),
    ),
    TrainingConversation(
        query="What are evidence-based ways to improve mental health?",
        response=(
            "Scientifically-backed strategies for better mental health:\n\n"
            "• Regular exercise is linked to lower anxiety\n"
            "• A consistent sleep schedule can stabilize mood\n"
            "• Social connections are protective over the long term\n\n"
            "Professional support including: therapy and support groups"
        ),
        rating=5,
        category="health",
        complexity=Complexity.MODERATE,
        tags=("mental health", "wellness"),
    ),
    TrainingConversation(
        query="What's the most effective way to learn a new skill quickly?",
        response=(
            "An approach to accelerated learning:\n\n"
            "• Retrieval practice is more effective than rereading\n"
            "• Spaced repetition will improve long-term retention\n"
            "• Teaching others can expose gaps in understanding\n\n"
            "Techniques like: the Pomodoro method and deliberate practice"
        ),
        rating=4,
        category="education",
        complexity=Complexity.MODERATE,
        tags=("learning", "productivity"),
    ),
    TrainingConversation(
        query="Can you recommend a good movie?",
        response="Sure! It depends on your taste. What genres do you enjoy?",
        rating=3,
        category="entertainment",
        complexity=Complexity.SIMPLE,
        tags=("movies",),
    ),
]
