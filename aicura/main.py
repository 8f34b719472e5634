"""FastAPI application: symptom prediction and analysis endpoints."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from aicura.analysis.adapter import analyze_with_outcome
from aicura.config import settings
from aicura.matcher.catalog import SymptomCatalog, build_default_catalog
from aicura.matcher.guidance import severity_guidance
from aicura.matcher.ranking import rank
from aicura.matcher.tokenizer import match_known_symptoms, tokenize
from aicura.models import (
    AnalysisResponse,
    ConditionInfoResponse,
    PredictionItem,
    PredictionResponse,
    SymptomInput,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the symptom catalog on startup."""
    app.state.catalog = build_default_catalog()
    logger.info(
        "Symptom catalog loaded: %s conditions, %s symptoms",
        len(app.state.catalog),
        len(app.state.catalog.all_symptoms()),
    )
    if settings.analysis_enabled:
        logger.info(
            "Analysis model configured at: %s (model: %s)",
            settings.analysis_base_url,
            settings.analysis_model,
        )
    else:
        logger.info("Analysis model disabled; /api/analyze serves the offline fallback.")
    yield
    logger.info("Shutting down.")


app = FastAPI(
    title="AIcura",
    description="Symptom intake with a local rule-based matcher and an AI analysis adapter",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_catalog(request: Request) -> SymptomCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        catalog = build_default_catalog()
        request.app.state.catalog = catalog
    return catalog


@app.get("/health")
async def health(catalog: SymptomCatalog = Depends(get_catalog)):
    return {
        "status": "ok",
        "model": settings.analysis_model,
        "analysis_enabled": settings.analysis_enabled,
        "catalog_size": len(catalog),
    }


@app.get("/api/symptoms")
async def list_symptoms(catalog: SymptomCatalog = Depends(get_catalog)):
    return {"symptoms": catalog.all_symptoms()}


@app.get("/api/conditions/{disease_name}", response_model=ConditionInfoResponse)
async def condition_info(disease_name: str, catalog: SymptomCatalog = Depends(get_catalog)):
    info = catalog.get_disease_info(disease_name)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown condition: {disease_name}")
    return ConditionInfoResponse(
        disease_name=disease_name,
        description=info.description,
        severity=info.severity,
        guidance=severity_guidance(info.severity),
    )


@app.post("/api/predict", response_model=PredictionResponse)
async def predict_conditions(
    payload: SymptomInput,
    catalog: SymptomCatalog = Depends(get_catalog),
):
    matched = match_known_symptoms(tokenize(payload.symptoms), catalog.all_symptoms())
    results = rank(matched, catalog, top_n=settings.matcher_top_n)
    if not results:
        logger.info("No catalog matches for submitted symptoms.")
    return PredictionResponse(
        input=payload.symptoms,
        matched_symptoms=sorted(matched),
        results=[
            PredictionItem(**result.model_dump(), guidance=severity_guidance(result.severity))
            for result in results
        ],
    )


@app.post("/api/analyze", response_model=AnalysisResponse)
async def analyze_symptoms(payload: SymptomInput):
    outcome = await analyze_with_outcome(payload.symptoms, payload.demographics())
    return AnalysisResponse(analysis=outcome.result, source=outcome.source)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "aicura.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
