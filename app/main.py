import uvicorn
from fastapi import Depends, FastAPI

from .config import settings
from .errors import ReceiptError, receipt_error_handler
from .routes.receipts import router as receipts_router
from .store import ScoreStore, get_store

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

app.state.store = ScoreStore()

app.add_exception_handler(ReceiptError, receipt_error_handler)
app.include_router(receipts_router)

@app.get("/health")
def health(store: ScoreStore = Depends(get_store)):
    return {"ok": True, "receipts": len(store)}

def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
