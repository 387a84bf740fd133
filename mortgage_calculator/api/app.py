"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_calculator.api.routes import loans, tools
from mortgage_calculator.config import settings

app = FastAPI(
    title=settings.app_name,
    description="Fixed-rate loan payment and amortization schedules",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(loans.router)
app.include_router(tools.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
