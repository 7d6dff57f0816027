from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from app.core.config import settings
from app.core.exceptions import LearningConsoleError
from app.core.logging import configure_logging
from app.endpoints import planned_test, test, user_test
from fastapi.exceptions import RequestValidationError
from app.middleware.exceptions import domain_exception_handler, global_exception_handler, validation_exception_handler
from app.middleware.logging import RequestLoggingMiddleware
from app.core.scheduler import start_scheduler, stop_scheduler

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(LearningConsoleError, domain_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(test.router, prefix="/tests", tags=["Tests"])
app.include_router(planned_test.router, prefix="/planned-tests", tags=["Planned Tests"])
app.include_router(user_test.router, prefix="/user-tests", tags=["User Tests"])

@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok", "version": settings.VERSION}

@app.on_event("startup")
async def startup_event():
    configure_logging()
    start_scheduler()

@app.on_event("shutdown")
async def shutdown_event():
    stop_scheduler()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
