import logging
import time
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .core.database import init_db, check_db_connection
from .routers import tarefa
from .routers.tarefa import TarefaInvalidaError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Organizador API",
    description="Task management service",
    version=settings.service_version
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log all requests with timing"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Process-Time"] = str(process_time)

    # Skip logging for health checks to reduce noise
    if request.url.path != "/health":
        logger.info(f"{request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

    return response


@app.exception_handler(TarefaInvalidaError)
async def tarefa_invalida_handler(request: Request, exc: TarefaInvalidaError):
    """Render caller errors as {"Erro": message}"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"Erro": exc.message}
    )


app.include_router(
    tarefa.router,
    prefix=settings.api_prefix + "/Tarefa",
    tags=["Tarefa"]
)


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info(f"Starting {settings.service_name}...")
    if init_db():
        logger.info("Database initialized successfully")
    else:
        logger.error("Database initialization failed")
    logger.info(f"{settings.service_name} startup completed")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "message": "Organizador API is operational"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    db_healthy = check_db_connection()
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "healthy" if db_healthy else "unhealthy",
        "database": "connected" if db_healthy else "disconnected",
        "timestamp": time.time()
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("organizador_api.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
