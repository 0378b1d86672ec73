from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from treko.api.health import router as health_router
from treko.api.routes_login import router as login_router
from treko.api.routes_produtos import router as produtos_router
from treko.config import settings
from treko.db import init_db
from treko.utils.log import get_logger

log = get_logger("treko.store")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db(seed=settings.STORE_SEED_DEMO)
    yield


app = FastAPI(title="Treko - Development Store", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # same body shape as the other store errors: {"error": ...}
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "body"
    message = f"Dados inválidos ({field}): {first.get('msg', 'invalid')}"
    log.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(login_router, prefix="/api")

app.include_router(produtos_router, prefix="/api")


def run():
    import uvicorn

    uvicorn.run("treko.main:app", host=settings.STORE_HOST, port=settings.STORE_PORT)


if __name__ == "__main__":
    run()
