"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from .chat import chat_service
from .config import settings
from .llm import OllamaClient
from .routes import chat

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(message)s",
    datefmt="%H:%M:%S",
)


async def _check_ollama_connectivity():
    """Attempt a lightweight health check against the configured Ollama instance."""
    # Derive base URL from the generate endpoint (strip /api/generate)
    base_url = settings.ollama_url.rsplit("/api/", 1)[0]
    print(f"[startup] Ollama URL: {settings.ollama_url}")
    print(f"[startup] Model: {settings.model_name}")
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.get(base_url, timeout=5)
            if resp.status_code == 200:
                print(f"[startup] Ollama is reachable at {base_url}")
            else:
                print(f"[startup] WARNING: Ollama returned status {resp.status_code} at {base_url}")
    except httpx.HTTPError as e:
        print(f"[startup] WARNING: Cannot reach Ollama at {base_url}: {e}")
        print("[startup] Financial prompts will fail until Ollama is available.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - wires the LLM client into the routes."""
    await _check_ollama_connectivity()

    llm = OllamaClient(settings.ollama_url, settings.model_name)
    chat.set_llm_client(llm)

    yield

    # Shutdown
    await llm.close()
    await chat_service.close()
    print("LLM and chat clients closed")


app = FastAPI(lifespan=lifespan)

app.include_router(chat.router)


@app.get("/health")
async def health():
    return {"status": "ok", "model": settings.model_name}
