"""Rule-based intent detection and canned replies for the chat endpoint."""

import re
from enum import Enum


class Intent(str, Enum):
    CASUAL = "casual"
    FINANCIAL = "financial"
    UNSUPPORTED = "unsupported"


_GREETING = re.compile(r"^(hi|hello|hey|bonjour|salut|xin chào|chào|cảm ơn|thanks?)", re.IGNORECASE)
_FINANCE_KEYWORD = re.compile(
    r"(budget|save|saving|invest|money|debt|loan|finance|"
    r"épargne|investissement|dette|argent|"
    r"ngân sách|tiết kiệm|đầu tư|nợ)",
    re.IGNORECASE,
)

DEFAULT_LOCALE = "en"

CANNED_REPLIES = {
    Intent.CASUAL: {
        "en": "Hello 👋 How can I help you today?",
        "fr": "Bonjour 👋 Comment puis-je vous aider ?",
        "vi": "Xin chào 👋 Tôi có thể giúp gì cho bạn?",
    },
    Intent.UNSUPPORTED: {
        "en": "Sorry, I can only answer finance-related questions.",
        "fr": "Désolé, je ne peux répondre qu'aux questions financières.",
        "vi": "Xin lỗi, tôi chỉ hỗ trợ các câu hỏi liên quan đến tài chính.",
    },
}

LANGUAGE_INSTRUCTIONS = {
    "en": (
        "You are a helpful financial advisor assistant. Please respond only in English. "
        "Provide clear, actionable financial advice with structured strategies and steps."
    ),
    "fr": (
        "Vous êtes un assistant conseiller financier utile. Veuillez répondre uniquement en français. "
        "Fournissez des conseils financiers clairs et exploitables avec des stratégies et des étapes structurées."
    ),
    "vi": (
        "Bạn là một trợ lý tư vấn tài chính hữu ích. Vui lòng chỉ trả lời bằng tiếng Việt. "
        "Cung cấp lời khuyên tài chính rõ ràng, có thể thực hiện với các chiến lược và bước thực hiện có cấu trúc."
    ),
}

LANGUAGE_NAMES = {"en": "English", "fr": "French", "vi": "Vietnamese"}


def detect_intent(prompt: str) -> Intent:
    """Classify a prompt as a greeting, a finance question, or anything else."""
    text = prompt.strip().lower()
    if _GREETING.match(text):
        return Intent.CASUAL
    if _FINANCE_KEYWORD.search(text):
        return Intent.FINANCIAL
    return Intent.UNSUPPORTED


def canned_reply(intent: Intent, locale: str) -> str:
    replies = CANNED_REPLIES[intent]
    return replies.get(locale, replies[DEFAULT_LOCALE])


def build_system_prompt(locale: str) -> str:
    """System prompt asking for structured financial advice in the user's language."""
    instruction = LANGUAGE_INSTRUCTIONS.get(locale, LANGUAGE_INSTRUCTIONS[DEFAULT_LOCALE])
    language = LANGUAGE_NAMES.get(locale, LANGUAGE_NAMES[DEFAULT_LOCALE])
    return (
        f"{instruction}\n\n"
        "You are a financial advisor AI assistant. Your role is to provide comprehensive "
        "financial advice including strategies, actionable steps, and helpful tips. "
        f"Always respond in the specified language: {language}.\n\n"
        "Structure your response to include:\n"
        "- A clear title for the financial advice\n"
        "- A brief description of the context\n"
        "- Specific strategies with detailed explanations\n"
        "- Step-by-step actionable instructions\n"
        "- Additional helpful tips\n\n"
        "Always ensure your advice is practical, ethical, and appropriate for general financial planning."
    )
