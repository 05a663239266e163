"""
Diff Workbench Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff, session
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.workbench_session import SessionStore, set_session_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Diff Workbench Backend...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")

    settings = config_manager.diff_settings()
    session_settings = config_manager.session_settings()
    store = SessionStore(
        DiffGenerator.from_settings(settings),
        max_sessions=int(session_settings["maxSessions"]),
    )
    set_session_store(store)
    print(
        f"[Backend] SessionStore initialized "
        f"(inlineHighlight={settings['inlineHighlight']}, cacheSize={settings['cacheSize']}, "
        f"maxSessions={session_settings['maxSessions']})"
    )

    yield
    print("[Backend] Shutting down Diff Workbench Backend...")
    store.clear()
    set_session_store(None)


app = FastAPI(
    title="Diff Workbench Backend",
    description="Side-by-side text comparison with word-level highlighting and hunk navigation",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the local editor front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(session.router, prefix="/api/session", tags=["session"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "diff-workbench-backend"}


def run():
    """Console entry point"""
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    run()
