"""
Configuration settings for the Interview Simulator.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# LLM configuration (optional: without a key the rule-based/mock paths are used)
GROQ_API_KEY = os.environ.get("GROQ_API_KEY")
GROQ_MODEL_NAME = os.environ.get("GROQ_MODEL_NAME", "llama-3.1-8b-instant")
GROQ_TOP_P = 0.9
GROQ_MAX_TOKENS = 2048
GROQ_SEED = 1
GENERATION_TEMPERATURE = 0.7  # Question generation
EVALUATION_TEMPERATURE = 0.3  # Answer evaluation

# Interview configuration
DEFAULT_QUESTION_COUNT = 10
MAX_QUESTION_COUNT = 50
ANSWER_TIME_LIMIT_SECONDS = int(os.environ.get("ANSWER_TIME_LIMIT_SECONDS", "120"))
FOLLOW_UP_MIN_WORDS = 10  # Answers must be longer than this to get a follow-up
FOLLOW_UP_PROBABILITY = 0.7

# Text processing configuration
RESUME_HEAD_CHARS = 6000  # Characters to keep from start of resume for LLM
RESUME_TAIL_CHARS = 3000  # Characters to keep from end of resume for LLM

# Auth configuration
TOKEN_TTL_MINUTES = int(os.environ.get("TOKEN_TTL_MINUTES", "60"))

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE")
