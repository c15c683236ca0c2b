from fastapi import Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from .config import get_settings
from .logging_config import configure_logging
from .schemas import (
    APIError,
    HealthProviderStatus,
    HealthResponse,
    UpstreamFailure,
    UpstreamResult,
)
from .services.calendar_service import CalendarClient, get_calendar_client

# ---------------------------------------------------------------------------
# Init
# ---------------------------------------------------------------------------

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Vacation Calendar API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Missing / malformed query params are a plain 400, not FastAPI's 422.
    return JSONResponse(
        status_code=400,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "code": "invalid_params",
        },
    )


def _relay(result: UpstreamResult) -> Response:
    if isinstance(result, UpstreamFailure):
        return Response(status_code=500)
    return Response(content=result.body, media_type="application/json")


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

@app.get("/api/health", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """
    Configuration-level health summary. Does not call the provider.
    """
    providers: list[HealthProviderStatus] = [
        HealthProviderStatus(name="api", status="up"),
    ]

    if settings.CALENDARIFIC_API_KEY.get_secret_value():
        providers.append(HealthProviderStatus(name="calendarific", status="up"))
    else:
        providers.append(
            HealthProviderStatus(
                name="calendarific",
                status="degraded",
                detail="CALENDARIFIC_API_KEY is not set",
            )
        )

    overall = "up"
    if any(p.status == "degraded" for p in providers):
        overall = "degraded"

    return HealthResponse(status=overall, providers=providers)


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

@app.get(
    "/api/v1/calendar/countries",
    responses={500: {"description": "Upstream provider failed (empty body)"}},
)
def get_countries_endpoint(
    client: CalendarClient = Depends(get_calendar_client),
) -> Response:
    """
    Supported countries, relayed verbatim from Calendarific.
    """
    return _relay(client.fetch_countries())


@app.get(
    "/api/v1/calendar/holidays",
    responses={
        400: {"model": APIError},
        500: {"description": "Upstream provider failed (empty body)"},
    },
)
def get_holidays_endpoint(
    year: int = Query(
        ...,
        ge=-(2**31),
        le=2**31 - 1,
        description="Calendar year, e.g. 2025 (32-bit int)",
    ),
    country: str = Query(..., description="ISO-3166 country code, e.g. US"),
    client: CalendarClient = Depends(get_calendar_client),
) -> Response:
    """
    Holidays for one country and year, relayed verbatim from Calendarific.

    - 200: provider JSON, untouched.
    - 400: `year` or `country` missing / not parseable.
    - 500: provider unreachable, non-2xx, or non-JSON body. Empty body.
    """
    return _relay(client.fetch_holidays(year=year, country=country))
