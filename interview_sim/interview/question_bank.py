"""
Question Bank for the Interview Simulator.

Static catalog of template questions keyed by (category, difficulty), plus the
keyword vocabularies the resume analyzer matches against. Everything here is
read-only and shared by all sessions.
"""
import random
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

from .errors import InputError

CATEGORIES = ("technical", "behavioral", "situational")
DIFFICULTIES = ("easy", "medium", "hard")
DIFFICULTY_RANK = {"easy": 1, "medium": 2, "hard": 3}

# Question type tag per category
QUESTION_TYPES = {
    "technical": "resume-based",
    "behavioral": "general",
    "situational": "scenario-based",
}

QUESTION_BANK: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "technical": {
        "easy": (
            "What programming languages are you most comfortable with?",
            "Can you explain what {technology} is and how you've used it?",
            "What is your favorite development tool and why?",
            "How do you typically debug your code?",
            "What's the difference between {concept1} and {concept2}?",
        ),
        "medium": (
            "Walk me through the architecture of {project} from your resume.",
            "How would you optimize the performance of {technology} application?",
            "Explain a challenging bug you encountered and how you solved it.",
            "How do you ensure code quality in your projects?",
            "What design patterns have you used in {project}?",
        ),
        "hard": (
            "Design a scalable system for {domain} with the technologies you know.",
            "How would you handle {complex_scenario} in a production environment?",
            "Explain the trade-offs between {approach1} and {approach2} for {use_case}.",
            "How would you migrate a legacy system using {old_tech} to {new_tech}?",
            "Design and implement a solution for {complex_problem}.",
        ),
    },
    "behavioral": {
        "easy": (
            "Tell me about yourself and your background.",
            "Why are you interested in this field?",
            "What motivates you in your work?",
            "How do you handle feedback?",
            "What are your career goals?",
        ),
        "medium": (
            "Describe a time when you had to learn a new technology quickly.",
            "Tell me about a project you're particularly proud of.",
            "How do you handle working under pressure?",
            "Describe a time when you had to work with a difficult team member.",
            "What's the most challenging problem you've solved?",
        ),
        "hard": (
            "Tell me about a time when you failed and what you learned from it.",
            "Describe a situation where you had to make a difficult technical decision.",
            "How do you handle conflicting priorities and tight deadlines?",
            "Tell me about a time when you had to convince others of your technical approach.",
            "Describe a situation where you had to take ownership of a critical issue.",
        ),
    },
    "situational": {
        "easy": (
            "How would you approach learning a new framework?",
            "What would you do if you encountered a technology you've never used?",
            "How do you stay updated with new technologies?",
            "What would you do if your code wasn't working as expected?",
            "How would you explain a technical concept to a non-technical person?",
        ),
        "medium": (
            "How would you handle a situation where requirements change mid-project?",
            "What would you do if you disagreed with a technical decision made by your team?",
            "How would you approach optimizing a slow-performing application?",
            "What would you do if you found a security vulnerability in production?",
            "How would you handle a situation where you're behind schedule?",
        ),
        "hard": (
            "How would you design a system to handle millions of users?",
            "What would you do if you had to choose between perfect code and meeting a deadline?",
            "How would you handle a critical production outage?",
            "What would you do if you discovered a major architectural flaw in a live system?",
            "How would you approach refactoring a large, legacy codebase?",
        ),
    },
}

# Vocabularies for resume analysis (matched as lowercase substrings)
TECH_KEYWORDS = (
    'javascript', 'python', 'java', 'react', 'node.js', 'angular', 'vue',
    'html', 'css', 'sql', 'mongodb', 'postgresql', 'mysql', 'docker',
    'kubernetes', 'aws', 'azure', 'gcp', 'git', 'linux', 'windows',
    'c++', 'c#', '.net', 'spring', 'django', 'flask', 'express',
    'typescript', 'php', 'ruby', 'go', 'rust', 'swift', 'kotlin',
    'tensorflow', 'pytorch', 'machine learning', 'ai', 'data science',
)

DOMAIN_KEYWORDS = (
    'web development', 'mobile development', 'data science', 'machine learning',
    'devops', 'cloud computing', 'cybersecurity', 'game development',
    'blockchain', 'iot', 'embedded systems', 'fintech', 'healthcare',
    'e-commerce', 'social media', 'education technology',
)

# Checked in this order; first level with a hit wins
EXPERIENCE_INDICATORS = (
    ("senior", ('senior', 'lead', 'architect', 'principal', '5+ years', '6+ years', '7+ years')),
    ("mid", ('mid-level', '2+ years', '3+ years', '4+ years', 'experienced')),
    ("entry", ('intern', 'junior', 'entry', 'graduate', 'fresh', 'new grad')),
)


@dataclass(frozen=True)
class GeneratedQuestion:
    """A question ready to be asked, with placeholders already resolved."""
    question: str
    category: str
    difficulty: str
    type: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def validate_selection(category: str, difficulty: str) -> None:
    """Raise InputError unless (category, difficulty) names a bank entry."""
    if category not in QUESTION_BANK:
        raise InputError(f"Invalid category: {category!r}")
    if difficulty not in QUESTION_BANK[category]:
        raise InputError(f"Invalid difficulty: {difficulty!r}")


def get_templates(category: str, difficulty: str) -> Tuple[str, ...]:
    """Return the template list for one (category, difficulty) cell."""
    validate_selection(category, difficulty)
    return QUESTION_BANK[category][difficulty]


def question_stats() -> Dict[str, Any]:
    """Summary of the bank: total template count, categories and the bank itself."""
    total = sum(len(templates) for tiers in QUESTION_BANK.values() for templates in tiers.values())
    return {
        "total_questions": total,
        "categories": list(CATEGORIES),
        "difficulties": list(DIFFICULTIES),
        "question_bank": {
            category: {difficulty: list(templates) for difficulty, templates in tiers.items()}
            for category, tiers in QUESTION_BANK.items()
        },
    }


def sample_by_criteria(
    category: str,
    difficulty: str,
    count: int = 5,
    rng: random.Random = None
) -> List[GeneratedQuestion]:
    """
    Draw raw bank questions for one (category, difficulty) cell.

    Draws min(count, bank size) templates uniformly with replacement.
    Placeholders are not resolved.
    """
    templates = get_templates(category, difficulty)
    if count < 1:
        raise InputError("count must be at least 1")
    rng = rng or random.Random()

    return [
        GeneratedQuestion(
            question=rng.choice(templates),
            category=category,
            difficulty=difficulty,
            type="bank-based",
        )
        for _ in range(min(count, len(templates)))
    ]
