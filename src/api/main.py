import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes.share import router as share_router
from src.api.routes.summarize import router as summarize_router
from src.config import settings

app = FastAPI(
    title="Meeting Notes Summarizer API",
    description="LLM-powered transcript summarization with email sharing",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(summarize_router)
app.include_router(share_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


def run() -> None:
    """Start the API with uvicorn on the configured host and port."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
