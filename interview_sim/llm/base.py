"""
Interface for the external text capability. The interview engine depends on
this protocol only, so tests and offline runs can plug in fakes.
"""
from typing import Protocol


class TextCapability(Protocol):
    def generate(self, prompt: str) -> str: ...

    def evaluate(self, prompt: str) -> str: ...
