# mindflow/services/ai_gateway.py - LLM-backed mood analysis (facial / journal / chat)
import json
import logging
import re
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from mindflow.core.config import settings

logger = logging.getLogger(__name__)

ANALYSIS_TYPES = ("facial", "journal", "chat")

FACIAL_PROMPT = """You are an empathetic AI wellness assistant specializing in emotional analysis.
Analyze the facial expression in the image and determine the person's likely emotional state.
Respond with ONLY a JSON object in this exact format:
{
  "mood": "happy" | "calm" | "tired" | "anxious" | "neutral" | "sad" | "energetic",
  "confidence": 0-100,
  "insight": "A brief, supportive observation about their emotional state",
  "suggestion": "A helpful wellness tip based on their mood"
}
Be compassionate and encouraging in your insights."""

JOURNAL_PROMPT = """You are an empathetic AI wellness assistant. Analyze the user's journal entry and provide emotional insights.
Respond with ONLY a JSON object in this exact format:
{
  "mood": "happy" | "calm" | "tired" | "anxious" | "neutral" | "sad" | "energetic",
  "sentiment": "positive" | "neutral" | "negative",
  "emotions": ["array of detected emotions"],
  "insight": "A thoughtful observation about their feelings",
  "affirmation": "A personalized positive affirmation",
  "suggestion": "A wellness activity recommendation"
}"""

CHAT_PROMPT = """You are MindPal, a warm and supportive AI wellness companion. You help users with:
- Emotional support and validation
- Mindfulness and breathing exercises
- Cognitive reframing of negative thoughts
- Stress management techniques
- Sleep hygiene tips
- General wellness advice

Be empathetic, encouraging, and practical. Keep responses concise but meaningful.
Use gentle language and occasional emojis to feel warm and approachable."""

_JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


# ================= Errors =================

class GatewayError(Exception):
    """Upstream analysis failure, carries the HTTP status to surface."""
    status_code = 500
    default_message = "AI analysis failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RateLimitedError(GatewayError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again in a moment."


class QuotaExhaustedError(GatewayError):
    status_code = 402
    default_message = "AI credits exhausted. Please add funds."


class InvalidAnalysisRequest(ValueError):
    pass


# ================= Helpers =================

def strip_data_uri(image_base64: str) -> str:
    if "," in image_base64 and image_base64.lstrip().startswith("data:"):
        return image_base64.split(",", 1)[1]
    return image_base64


def build_messages(analysis_type: str, image_base64: Optional[str] = None,
                   user_input: Optional[str] = None) -> List[Dict[str, Any]]:
    if analysis_type == "facial":
        if not image_base64:
            raise InvalidAnalysisRequest("imageBase64 is required for facial analysis")
        return [
            {"role": "system", "content": FACIAL_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Please analyze this person's facial expression and determine their emotional state."},
                    {"type": "image_url", "image_url": {"url": f"data:image/jpeg;base64,{strip_data_uri(image_base64)}"}},
                ],
            },
        ]

    if analysis_type in ("journal", "chat"):
        text = (user_input or "").strip()
        if not text:
            raise InvalidAnalysisRequest(f"userInput is required for {analysis_type} analysis")
        prompt = JOURNAL_PROMPT if analysis_type == "journal" else CHAT_PROMPT
        return [
            {"role": "system", "content": prompt},
            {"role": "user", "content": text},
        ]

    raise InvalidAnalysisRequest("Invalid analysis type")


def parse_reply(content: Optional[str]) -> Dict[str, Any]:
    """Pull the JSON object out of a reply that may be wrapped in prose or code fences."""
    content = content or ""
    match = _JSON_BLOCK.search(content)
    if match:
        try:
            parsed = json.loads(match.group(0))
            if isinstance(parsed, dict):
                return parsed
        except json.JSONDecodeError:
            pass
    return {"response": content}


# ================= Gateway client =================

class MoodAnalyzer:
    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 model: Optional[str] = None, client: Optional[OpenAI] = None):
        self.api_key = api_key if api_key is not None else settings.AI_GATEWAY_API_KEY
        self.base_url = base_url or settings.AI_GATEWAY_URL
        self.model = model or settings.AI_MODEL
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise GatewayError("AI_GATEWAY_API_KEY is not configured")
            # a single attempt per request
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                max_retries=0,
                timeout=settings.AI_TIMEOUT_SECONDS,
            )
        return self._client

    def analyze(self, analysis_type: str, image_base64: Optional[str] = None,
                user_input: Optional[str] = None) -> Dict[str, Any]:
        messages = build_messages(analysis_type, image_base64, user_input)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=settings.AI_MAX_TOKENS,
            )
        except openai.RateLimitError:
            logger.warning("AI gateway rate limited (%s)", analysis_type)
            raise RateLimitedError()
        except openai.APIStatusError as e:
            if e.status_code == 402:
                logger.warning("AI gateway credits exhausted (%s)", analysis_type)
                raise QuotaExhaustedError()
            logger.error("AI gateway error: %s %s", e.status_code, e.message)
            raise GatewayError()
        except openai.APIError as e:
            logger.error("AI gateway request failed: %s", e)
            raise GatewayError()

        content = response.choices[0].message.content if response.choices else ""
        return parse_reply(content)


_analyzer: Optional[MoodAnalyzer] = None


def get_analyzer() -> MoodAnalyzer:
    global _analyzer
    if _analyzer is None:
        _analyzer = MoodAnalyzer()
    return _analyzer
