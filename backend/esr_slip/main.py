import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from esr_slip.core.config import settings
from esr_slip.routes import (
    health,
    slips,
)

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.API_V1_STR)
app.include_router(slips.router, prefix=settings.API_V1_STR)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
