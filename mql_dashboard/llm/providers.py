"""
MQL Dashboard - LLM provider initialization (Mistral AI primary, OpenAI fallback).

Used only when no agent API key is configured: the chat model stands in for the
hosted agents and answers the same prompts.
"""

from __future__ import annotations

import os

from langchain_mistralai import ChatMistralAI
from langchain_openai import ChatOpenAI

from mql_dashboard.config import log_event


def _usable(key: str, placeholder: str) -> bool:
    return bool(key) and key != placeholder


def has_llm_key() -> bool:
    return _usable(os.getenv("MISTRAL_API_KEY") or "", "your-mistral-key-here") or _usable(
        os.getenv("OPENAI_API_KEY") or "", "your-actual-key-here"
    )


def get_llm(temperature: float = 0.2):
    """Agent stand-in: Mistral mistral-large-latest, OpenAI gpt-4o if Mistral is unavailable. None when neither loads."""
    mistral_key = os.getenv("MISTRAL_API_KEY") or ""
    if _usable(mistral_key, "your-mistral-key-here"):
        try:
            llm = ChatMistralAI(model="mistral-large-latest", temperature=temperature, max_tokens=800, mistral_api_key=mistral_key)
            print("LLM loaded: Mistral")
            return llm
        except Exception as e:
            print(f"Mistral LLM failed: {e}")
            log_event("get_llm Mistral failed", {"err": str(e)[:200]}, "LLM")
    openai_key = os.getenv("OPENAI_API_KEY") or ""
    if _usable(openai_key, "your-actual-key-here"):
        try:
            llm = ChatOpenAI(model="gpt-4o", temperature=temperature, max_tokens=800, openai_api_key=openai_key)
            print("LLM loaded: OpenAI fallback")
            return llm
        except Exception as e:
            print(f"OpenAI fallback failed: {e}")
            log_event("get_llm OpenAI failed", {"err": str(e)[:200]}, "LLM")
    return None
