from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .config import settings
from .errors import MalformedInputError, ReceiptError
from .routes.receipts import router as receipts_router
from .schemas import HealthResponse
from .services.receipts import ReceiptService
from .store import ScoreStore
from .utils.logging import logger

def _error_response(exc: ReceiptError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code,
                        content={"detail": exc.detail, "error": type(exc).__name__})

async def receipt_error_handler(request: Request, exc: ReceiptError):
    return _error_response(exc)

async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected undecodable request to %s: %d error(s)",
                   request.url.path, len(exc.errors()))
    return _error_response(MalformedInputError())

def create_app(store: ScoreStore | None = None) -> FastAPI:
    """Build the API around its own score store (a fresh one unless given)."""
    app = FastAPI(title=settings.APP_NAME,
                  description="Scores receipts and serves their points",
                  version="0.1.0",
                  docs_url="/docs",
                  redoc_url="/redoc",
                  openapi_url="/openapi.json")

    app.state.store = store if store is not None else ScoreStore()
    app.state.receipt_service = ReceiptService(app.state.store)

    app.add_exception_handler(ReceiptError, receipt_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(receipts_router)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(ok=True, receipts=len(app.state.store))

    return app

app = create_app()

def run() -> None:
    import uvicorn

    logger.info("Server is running on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.ENV)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
