"""
FastAPI application exposing the scenario store and FERS calculations
to the desktop shell.
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .config import (
    API_DESCRIPTION,
    API_HOST,
    API_PORT,
    API_TITLE,
    API_VERSION,
    CORS_CREDENTIALS,
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGINS,
    DATA_DIR,
    LOG_FORMAT,
    LOG_LEVEL,
    RECENT_SCENARIOS_LIMIT,
)
from .errors import StorageError
from .models import (
    AnnuitySupplementRequest,
    AnnuitySupplementResult,
    PensionRequest,
    PensionResult,
    SavedScenario,
    SocialSecurityRequest,
    SocialSecurityResult,
    StatusResponse,
)
from .pension import (
    calculate_annuity_supplement,
    calculate_fers_pension,
    calculate_social_security_benefit,
)
from .store import ScenarioStore, init_database

logger = logging.getLogger(__name__)


def create_app(scenario_store: Optional[ScenarioStore] = None) -> FastAPI:
    """
    Build the API.

    With no ``scenario_store`` the database under ``DATA_DIR`` is opened at startup;
    a failure there aborts startup since nothing works without persistence.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if scenario_store is None:
            logger.info("Opening scenario store in %s", DATA_DIR)
            app.state.store = init_database(DATA_DIR)
            owned = True
        else:
            app.state.store = scenario_store
            owned = False
        try:
            yield
        finally:
            if owned:
                app.state.store.close()

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=CORS_CREDENTIALS,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        # Rejected input is not echoed back; it may not be encodable
        errors = [{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()]
        return JSONResponse(status_code=422, content={"detail": errors})

    @app.get("/")
    def root():
        return {"message": API_TITLE, "docs": "Visit /docs for API documentation"}

    @app.post("/api/scenarios", response_model=StatusResponse)
    def save_scenario(scenario: SavedScenario, store: ScenarioStore = Depends(get_store)):
        try:
            store.save(scenario)
        except StorageError as e:
            raise HTTPException(status_code=500, detail=str(e))
        return StatusResponse()

    @app.get("/api/scenarios", response_model=List[SavedScenario])
    def load_scenarios(store: ScenarioStore = Depends(get_store)):
        try:
            return store.list()
        except StorageError as e:
            raise HTTPException(status_code=500, detail=str(e))

    # Declared before /{sid} so "recent" isn't taken for an id
    @app.get("/api/scenarios/recent", response_model=List[SavedScenario])
    def recent_scenarios(limit: int = RECENT_SCENARIOS_LIMIT, store: ScenarioStore = Depends(get_store)):
        try:
            return store.recent(limit)
        except StorageError as e:
            raise HTTPException(status_code=500, detail=str(e))

    @app.get("/api/scenarios/{sid}", response_model=SavedScenario)
    def get_scenario(sid: str, store: ScenarioStore = Depends(get_store)):
        try:
            scenario = store.get(sid)
        except StorageError as e:
            raise HTTPException(status_code=500, detail=str(e))
        if scenario is None:
            raise HTTPException(404, "Not found")
        return scenario

    @app.delete("/api/scenarios/{sid}", response_model=StatusResponse)
    def delete_scenario(sid: str, store: ScenarioStore = Depends(get_store)):
        try:
            store.delete(sid)
        except StorageError as e:
            raise HTTPException(status_code=500, detail=str(e))
        return StatusResponse()

    @app.post("/api/pension", response_model=PensionResult)
    def calculate_pension(req: PensionRequest):
        benefit = calculate_fers_pension(req.service_years, req.high_three, req.age_at_retirement)
        return PensionResult(annual_benefit=benefit)

    @app.post("/api/annuity-supplement", response_model=AnnuitySupplementResult)
    def annuity_supplement(req: AnnuitySupplementRequest):
        amount = calculate_annuity_supplement(req.service_years, req.ss_benefit_at_62)
        return AnnuitySupplementResult(annual_supplement=amount)

    @app.post("/api/social-security", response_model=SocialSecurityResult)
    def social_security(req: SocialSecurityRequest):
        benefit = calculate_social_security_benefit(
            req.benefit_at_fra, req.claiming_age, req.full_retirement_age
        )
        return SocialSecurityResult(benefit=benefit)

    return app


def get_store(request: Request) -> ScenarioStore:
    """The store opened for this application at startup"""
    return request.app.state.store


logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
app = create_app()


def run():
    """Serve the API for the desktop shell (``ferex-server``)."""
    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())
