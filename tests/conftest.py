import json
import random

import pytest

from interview_sim.interview import (
    AnswerEvaluator,
    FollowUpDecisionEngine,
    InterviewSessionManager,
    InterviewStateMachine,
    QuestionGenerator,
)

SENIOR_RESUME = (
    "Senior software engineer with 6+ years of experience.\n"
    "Skills: Python, React, Docker, AWS\n"
    "Project: chat app\n"
    "Worked on web development and cloud computing."
)

LONG_ANSWER = (
    "I designed the service around a message queue so that slow consumers "
    "never blocked the request path and we could scale workers independently."
)


class FakeCapability:
    """Scripted external LLM."""

    def __init__(self, generation="", evaluation="Overall Score: 7/10\nFeedback: fine"):
        self.generation = generation
        self.evaluation = evaluation
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        return self.generation

    def evaluate(self, prompt):
        self.prompts.append(prompt)
        return self.evaluation


class FailingCapability:
    """External LLM whose transport always fails."""

    def generate(self, prompt):
        raise ConnectionError("groq unreachable")

    def evaluate(self, prompt):
        raise ConnectionError("groq unreachable")


def ai_questions_json(items):
    return json.dumps([
        {"question": q, "category": c, "difficulty": d, "type": t}
        for q, c, d, t in items
    ])


@pytest.fixture
def rng():
    return random.Random(42)


def build_state_machine(rng, capability=None, follow_up_probability=0.7, time_limit_seconds=120):
    return InterviewStateMachine(
        QuestionGenerator(capability, rng=rng),
        AnswerEvaluator(capability, rng=rng),
        FollowUpDecisionEngine(rng=rng, probability=follow_up_probability),
        time_limit_seconds=time_limit_seconds,
    )


@pytest.fixture
def state_machine(rng):
    return build_state_machine(rng)


@pytest.fixture
def manager(rng):
    return InterviewSessionManager(build_state_machine(rng))
