"""
Groq Cloud LLM service for question generation and answer evaluation.

Wraps ChatGroq behind the TextCapability interface:
- generate(prompt): creative settings for question generation
- evaluate(prompt): low temperature for consistent scoring

Each call is made exactly once; errors propagate to the caller, which owns
the fallback.
"""
import os
from typing import Optional

from langchain_groq import ChatGroq
from langchain_core.prompts import PromptTemplate
from langchain_classic.chains import LLMChain

from ..utils.config import (
    GROQ_API_KEY,
    GROQ_MODEL_NAME,
    GROQ_TOP_P,
    GROQ_MAX_TOKENS,
    GROQ_SEED,
    GENERATION_TEMPERATURE,
    EVALUATION_TEMPERATURE
)
from ..utils.logger import setup_logger

logger = setup_logger("groq_service")


def initialize_llm(
    api_key: str = None,
    model_name: str = None,
    temperature: float = None,
    top_p: float = None,
    max_tokens: int = None,
    seed: int = None
) -> ChatGroq:
    """
    Initialize Groq Cloud LLM.

    Args:
        api_key: Groq API key. If None, uses environment variable or config.
        model_name: Model name. If None, uses config default.
        temperature: Temperature setting. If None, uses generation default.
        top_p: Top-p setting. If None, uses config default.
        max_tokens: Max tokens. If None, uses config default.
        seed: Random seed. If None, uses config default.

    Returns:
        ChatGroq LLM instance
    """
    if api_key is None:
        api_key = os.environ.get("GROQ_API_KEY", GROQ_API_KEY)

    if not api_key:
        raise ValueError("GROQ_API_KEY not found. Please set it in environment or config.")

    if model_name is None:
        model_name = GROQ_MODEL_NAME
    if temperature is None:
        temperature = GENERATION_TEMPERATURE
    if top_p is None:
        top_p = GROQ_TOP_P
    if max_tokens is None:
        max_tokens = GROQ_MAX_TOKENS
    if seed is None:
        seed = GROQ_SEED

    try:
        llm = ChatGroq(
            groq_api_key=api_key,
            model_name=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            max_retries=0,
            model_kwargs={
                "top_p": top_p,
                "seed": seed
            }
        )
        logger.info(
            f"✅ Groq Cloud LLM initialized: {model_name} "
            f"(temp={temperature}, top_p={top_p}, max_tokens={max_tokens})"
        )
        return llm
    except Exception as e:
        logger.error(f"❌ Groq initialization failed: {e}")
        raise


def create_passthrough_chain(llm: ChatGroq, output_key: str) -> LLMChain:
    """Chain that sends an already-rendered prompt to the LLM unchanged."""
    prompt = PromptTemplate(input_variables=["prompt"], template="{prompt}")
    return LLMChain(llm=llm, prompt=prompt, output_key=output_key)


class GroqTextCapability:
    """
    TextCapability backed by Groq Cloud.

    Two ChatGroq instances are kept: one tuned for generation, one for
    evaluation.
    """

    def __init__(
        self,
        generation_llm: Optional[ChatGroq] = None,
        evaluation_llm: Optional[ChatGroq] = None
    ):
        if generation_llm is None:
            generation_llm = initialize_llm(temperature=GENERATION_TEMPERATURE)
        if evaluation_llm is None:
            evaluation_llm = initialize_llm(temperature=EVALUATION_TEMPERATURE)

        self._generation_chain = create_passthrough_chain(generation_llm, "questions")
        self._evaluation_chain = create_passthrough_chain(evaluation_llm, "evaluation")

        logger.info("GroqTextCapability initialized")

    def generate(self, prompt: str) -> str:
        result = self._generation_chain.invoke({"prompt": prompt})
        return result.get("questions", "")

    def evaluate(self, prompt: str) -> str:
        result = self._evaluation_chain.invoke({"prompt": prompt})
        return result.get("evaluation", "")


# Singleton instance
_text_capability = None


def get_text_capability() -> Optional[GroqTextCapability]:
    """
    Get or create the Groq text capability (singleton).

    Returns:
        GroqTextCapability, or None when no API key is configured
    """
    global _text_capability
    if _text_capability is None:
        if not os.environ.get("GROQ_API_KEY", GROQ_API_KEY):
            logger.info("GROQ_API_KEY not set, external generation/evaluation disabled")
            return None
        try:
            _text_capability = GroqTextCapability()
        except Exception as e:
            logger.error(f"Could not initialize Groq text capability: {e}")
            return None
    return _text_capability
