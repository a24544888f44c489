import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.attempts import router as attempts_router
from routers.engine import router as engine_router
from routers.health import router as health_router
from routers.questions import router as questions_router
from routers.sessions import router as sessions_router

logger = logging.getLogger("quantum-tutor")
logging.basicConfig(level=logging.INFO)

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",") if o.strip()
]

app = FastAPI(title="Quantum Tutor – Adaptive Quiz API")

# Allow calls from the quiz front-end dev servers (and whatever CORS_ORIGINS adds)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(sessions_router)  # /sessions/...
app.include_router(engine_router)  # /generate, /update
app.include_router(questions_router)  # /questions/...
app.include_router(attempts_router)  # /attempts/...
app.include_router(health_router)  # /health/...

logger.info("CORS origins: %s", CORS_ORIGINS)
