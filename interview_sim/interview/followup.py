"""
Follow-up decision engine.

After a sufficiently long answer, a templated follow-up question is offered
with a fixed probability. The outcome is random by nature; pass a seeded
random source for reproducible runs.
"""
import random
from typing import Optional

from ..utils.config import FOLLOW_UP_MIN_WORDS, FOLLOW_UP_PROBABILITY
from ..utils.logger import setup_logger
from ..utils.text_utils import count_words

logger = setup_logger("followup")

FOLLOW_UP_TEMPLATES = {
    "technical": (
        "Can you explain how you would implement that in production?",
        "What are the potential drawbacks of that approach?",
        "How would you scale that solution?",
        "What alternatives did you consider?",
        "Can you walk me through the code structure for that?",
    ),
    "behavioral": (
        "What would you do differently if you faced that situation again?",
        "How did that experience change your approach to similar situations?",
        "What did you learn from that experience?",
        "How did others react to your approach?",
        "What was the outcome of that situation?",
    ),
    "situational": (
        "What if the requirements changed during implementation?",
        "How would you handle that with limited resources?",
        "What if that approach didn't work as expected?",
        "How would you communicate that decision to stakeholders?",
        "What metrics would you use to measure success?",
    ),
}


class FollowUpDecisionEngine:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        min_words: int = FOLLOW_UP_MIN_WORDS,
        probability: float = FOLLOW_UP_PROBABILITY
    ):
        self.rng = rng or random.Random()
        self.min_words = min_words
        self.probability = probability

    def decide(self, answer_text: str, category: str) -> Optional[str]:
        """
        Decide whether to ask a follow-up.

        Args:
            answer_text: The candidate's answer
            category: Category of the question that was answered

        Returns:
            Follow-up question text, or None
        """
        if count_words(answer_text) <= self.min_words:
            return None
        if self.rng.random() >= self.probability:
            return None

        templates = FOLLOW_UP_TEMPLATES.get(category, FOLLOW_UP_TEMPLATES["technical"])
        follow_up = self.rng.choice(templates)
        logger.debug(f"Follow-up selected for {category} answer: {follow_up}")
        return follow_up
