"""Chat endpoint streaming financial advice from the LLM."""

import logging

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse, StreamingResponse

from ..chat.intent import Intent, build_system_prompt, canned_reply, detect_intent
from ..chat.recipe import RECIPE_JSON_SCHEMA
from ..config import settings
from ..llm import BaseLLMClient, GenerationConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


def get_llm_client() -> BaseLLMClient:
    """Get the LLM client. Set at app startup."""
    return _llm_client


_llm_client: BaseLLMClient = None  # type: ignore


def set_llm_client(client: BaseLLMClient):
    global _llm_client
    _llm_client = client


@router.post("/chat")
async def chat_endpoint(
    prompt: str = Body(...),
    locale: str = Body(settings.default_locale),
):
    intent = detect_intent(prompt)
    if intent is not Intent.FINANCIAL:
        return JSONResponse(content={"type": intent.value, "content": canned_reply(intent, locale)})

    logger.info(f"[chat] Financial prompt ({len(prompt)} chars, locale={locale})")
    fragments = get_llm_client().generate_stream(
        prompt,
        system=build_system_prompt(locale),
        config=GenerationConfig(format=RECIPE_JSON_SCHEMA),
    )

    # Pull the first fragment before answering so backend failures become a 502.
    try:
        first = await anext(fragments)
    except StopAsyncIteration:
        first = ""
    except Exception as e:
        logger.error(f"[chat] LLM backend failed: {type(e).__name__} - {e}")
        await fragments.aclose()
        return JSONResponse(status_code=502, content={"error": f"{type(e).__name__}: {e}"})

    async def body():
        try:
            if first:
                yield first
            async for text in fragments:
                yield text
        finally:
            await fragments.aclose()

    return StreamingResponse(body(), media_type="text/plain; charset=utf-8")
