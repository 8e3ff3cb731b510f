"""Main FastAPI application for the Field Analysis service"""
import logging
from datetime import datetime

from fastapi import FastAPI, HTTPException

from .config import AnalysisConfig, settings
from .models import AnalyzeRequest, CompositeRequest, DetectRequest, HealthCheckResponse
from .pipeline import FieldAnalysisPipeline
from .semantic import DetectionCache, get_best_match

# Set up logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.SERVICE_NAME,
    description="Semantic field classification, importance scoring and grouping",
    version="1.0.0"
)

# One detection cache per process, shared by every analysis pass
detection_cache = DetectionCache()
pipeline = FieldAnalysisPipeline(AnalysisConfig.load(settings), cache=detection_cache)


@app.get("/health", response_model=HealthCheckResponse)
def health_check():
    """Service health and detection cache statistics"""
    return HealthCheckResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        version="1.0.0",
        timestamp=datetime.utcnow().isoformat() + "Z",
        cache={
            "entries": len(detection_cache),
            "hits": detection_cache.hits,
            "misses": detection_cache.misses
        }
    )


@app.post("/v1/semantics/detect")
def detect_semantics(payload: DetectRequest):
    """Ranked semantic categories for one field"""
    try:
        results = pipeline.detector.detect(
            payload.path,
            payload.name,
            payload.type,
            payload.sampleValues,
            payload.hints.to_hints() if payload.hints else None
        )
        best = get_best_match(results)
        return {
            "path": payload.path,
            "results": [r.to_dict() for r in results],
            "bestMatch": best.to_dict() if best else None,
            "metadata": pipeline.detector.describe(results).to_dict()
        }
    except Exception as e:
        logger.exception(f"Semantic detection failed for {payload.path}")
        raise HTTPException(status_code=500, detail=f"Semantic detection failed: {str(e)}")


@app.post("/v1/semantics/composite")
def detect_composite_semantics(payload: CompositeRequest):
    """Composite (array item structure) match for an array field"""
    try:
        result = pipeline.detector.detect_composite(
            payload.path,
            payload.name,
            [f.to_item_field() for f in payload.itemFields],
            payload.sampleItems
        )
        return {
            "path": payload.path,
            "result": result.to_dict() if result else None
        }
    except Exception as e:
        logger.exception(f"Composite detection failed for {payload.path}")
        raise HTTPException(status_code=500, detail=f"Composite detection failed: {str(e)}")


@app.post("/v1/fields/analyze")
def analyze_fields(payload: AnalyzeRequest):
    """Semantics, importance and grouping for a field list"""
    try:
        report = pipeline.analyze([f.to_raw_field() for f in payload.fields])
        return report.to_dict()
    except Exception as e:
        logger.exception("Field analysis failed")
        raise HTTPException(status_code=500, detail=f"Field analysis failed: {str(e)}")


@app.delete("/v1/semantics/cache")
def clear_semantic_cache():
    """Drop every memoized detection result"""
    removed = pipeline.detector.clear_cache()
    return {"cleared": removed}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.SERVICE_HOST, port=settings.SERVICE_PORT)
