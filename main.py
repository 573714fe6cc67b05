"""
===========================================
HEDGE STAKE CALCULATOR - MAIN API
===========================================
Splits a stake across two outcomes so both pay the same.
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.SessionEngine.router import router as session_router
from src.SessionEngine.service import get_session_registry

# Load environment variables
load_dotenv()

# ===========================================
# CONFIGURATION
# ===========================================
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))


# ===========================================
# FASTAPI APP
# ===========================================
app = FastAPI(
    title="Hedge Stake Calculator",
    description="Balanced stake split and profit/loss summary for two-outcome bets",
    version="1.0.0"
)

# Enable CORS for the presentation layer
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session_router)


@app.get("/api/health")
async def health_check():
    """Health check for monitoring"""
    return {
        "status": "online",
        "service": "Hedge Stake Calculator",
        "active_sessions": len(get_session_registry())
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
