"""FastAPI application exposing person profiles and proximity search."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import APIRouter, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, build_bio_generator, load_settings
from .core import (
    InputSanitizer,
    Location,
    LocationRequest,
    Person,
    PersonNotFoundError,
    PersonRequest,
)
from .database import COUNTERS_COLLECTION, PERSONS_COLLECTION, connect, ensure_indexes
from .services import LocationService, PersonRepository, PersonService, SequenceGenerator

logger = logging.getLogger("persons_finder")


def configure_logging(level: str = "INFO") -> None:
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


# ==========================================
# Routes
# ==========================================

router = APIRouter(prefix="/api/v1/persons", tags=["persons"])


def _person_service(request: Request) -> PersonService:
    return request.app.state.person_service


def _location_service(request: Request) -> LocationService:
    return request.app.state.location_service


@router.post("", response_model=Person)
def create_or_update_person(body: PersonRequest, request: Request) -> Person:
    return _person_service(request).save(body)


@router.get("/nearby", response_model=List[Location])
def find_nearby(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    radius_in_km: float = Query(..., alias="radiusInKm", ge=0, le=20000),
    page: int | None = Query(None, ge=1),
    limit: int | None = Query(None, ge=1, le=1000),
) -> List[Location]:
    return _location_service(request).find_around(lat, lon, radius_in_km, page, limit)


@router.get("/{person_id}", response_model=Person)
def get_person(person_id: int, request: Request) -> Person:
    return _person_service(request).get_by_id(person_id)


@router.put("/{person_id}/location", status_code=status.HTTP_204_NO_CONTENT)
def update_location(person_id: int, body: LocationRequest, request: Request) -> None:
    _location_service(request).add_location(
        Location(reference_id=person_id, latitude=body.latitude, longitude=body.longitude)
    )


@router.delete("/{person_id}/location", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(person_id: int, request: Request) -> None:
    _location_service(request).remove_location(person_id)


# ==========================================
# Error handlers
# ==========================================

async def handle_not_found(request: Request, exc: PersonNotFoundError) -> JSONResponse:
    logger.info("%s %s -> 404: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.info("%s %s -> 400: %d invalid fields", request.method, request.url.path, len(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ==========================================
# App factory
# ==========================================

def create_app(
    settings: Settings | None = None,
    person_service: PersonService | None = None,
    location_service: LocationService | None = None,
) -> FastAPI:
    """Build the application.

    Services passed in are used as-is; otherwise they are wired against
    MongoDB on startup.
    """

    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        bio_generator = None
        if person_service is None or location_service is None:
            client = connect(settings)
            db = client[settings.mongodb_database]
            ensure_indexes(db)
            repository = PersonRepository(db[PERSONS_COLLECTION])
            if person_service is None:
                bio_generator = build_bio_generator(settings)
            app.state.person_service = person_service or PersonService(
                repository=repository,
                sequence_generator=SequenceGenerator(db[COUNTERS_COLLECTION]),
                bio_generator=bio_generator,
                sanitizer=InputSanitizer(settings.sanitizer_max_length),
            )
            app.state.location_service = location_service or LocationService(
                repository, default_limit=settings.nearby_default_limit
            )
        logger.info("Persons finder started with ai_provider=%s", settings.ai_provider)
        yield
        if bio_generator is not None:
            bio_generator.close()
        if client is not None:
            client.close()
        logger.info("Persons finder stopped")

    app = FastAPI(title="Persons Finder", lifespan=lifespan)
    app.state.settings = settings
    if person_service is not None:
        app.state.person_service = person_service
    if location_service is not None:
        app.state.location_service = location_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PersonNotFoundError, handle_not_found)
    app.add_exception_handler(RequestValidationError, handle_validation)
    app.add_exception_handler(Exception, handle_unexpected)
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "persons_finder"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
