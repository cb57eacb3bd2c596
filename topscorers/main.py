from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from .core.events import startup_event, shutdown_event
from .routes import health, score

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event()
    yield
    await shutdown_event()

app = FastAPI(
    default_response_class=ORJSONResponse,
    title="TopScorers API",
    description="Stores people's scores and reports the top scorers",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(health.router)
app.include_router(score.router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "topscorers.main:app",
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
