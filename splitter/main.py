import logging
from fastapi import FastAPI

from .config import config
from .routes.settlement import router as settlement_router

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title="Expense Split Settlement")

# include routers
app.include_router(settlement_router)


@app.get("/health")
def health():
    return {"status": "ok"}
