"""FastAPI entrypoint for query/state/source/trace endpoints."""

from __future__ import annotations

import os
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from portus_agent.agent.generator import create_generator
from portus_agent.agent.pipeline import OrchestrationPipeline
from portus_agent.config import AgentConfig, GeneratorConfig, RetrievalConfig
from portus_agent.data.dataset import DEFAULT_SNAPSHOT
from portus_agent.logger import LOGGER
from portus_agent.obs.tracing import TraceStore
from portus_agent.retrieval.index import DocumentIndex
from portus_agent.state.store import SharedState, SharedStateStore
from portus_agent.types import Coordinates, MapFocus


class QueryRequest(BaseModel):
    question: str = Field(min_length=1)


class SourceSearchRequest(BaseModel):
    query: str
    top_k: int = Field(default=3, ge=1, le=20)


class VesselSelection(BaseModel):
    vessel_id: str | None = None


class EventSelection(BaseModel):
    event: str | None = None


class FocusRequest(BaseModel):
    entity_id: str | None = None
    x: float | None = None
    y: float | None = None
    zoom: float | None = Field(default=None, gt=0.0)


def _create_index() -> DocumentIndex:
    corpus_path = os.getenv("PORTUS_CORPUS_PATH")
    if corpus_path:
        LOGGER.info("Loading knowledge base from %s", corpus_path)
        return DocumentIndex.from_json(corpus_path, config=RetrievalConfig())
    return DocumentIndex(config=RetrievalConfig())


app = FastAPI(title="PORTUS Trade Intelligence Agent", version="0.1.0")

_agent_config = AgentConfig()
_generator_config = GeneratorConfig.from_env(request_timeout_seconds=_agent_config.timeout_seconds)
_index = _create_index()
_trace_store = TraceStore()
_store = SharedStateStore()
_pipeline = OrchestrationPipeline(
    index=_index,
    generator=create_generator(_generator_config),
    snapshot=DEFAULT_SNAPSHOT,
    trace_store=_trace_store,
    config=_agent_config,
)


def _state_payload(state: SharedState) -> dict[str, Any]:
    focus = state.map_focus
    return {
        "current_analysis": (
            state.current_analysis.for_display().to_payload()
            if state.current_analysis is not None
            else None
        ),
        "selected_vessel": state.selected_vessel,
        "selected_event": state.selected_event,
        "map_focus": {
            "entity_id": focus.entity_id,
            "coordinates": asdict(focus.coordinates) if focus.coordinates else None,
            "zoom": focus.zoom,
        },
    }


@app.get("/health")
def health() -> dict[str, Any]:
    return {
        "status": "ok",
        "llm_configured": _pipeline.configured,
        "provider": _generator_config.provider,
        "documents": len(_index),
        "trace_count": len(_trace_store),
    }


@app.post("/query")
def query(request: QueryRequest) -> dict[str, Any]:
    run = _pipeline.run_detailed(request.question)
    _store.commit(run.result)
    return {
        "analysis": run.result.for_display().to_payload(),
        "language": run.language.value,
        "documents": [doc.id for doc in run.documents],
        "outcome": run.outcome.value,
        "trace_id": run.trace_id,
        "latency_ms": run.latency_ms,
        "latency_target_met": run.latency_target_met,
    }


@app.get("/state")
def state() -> dict[str, Any]:
    return _state_payload(_store.state)


@app.post("/state/vessel")
def select_vessel(request: VesselSelection) -> dict[str, Any]:
    _store.select_vessel(request.vessel_id)
    return _state_payload(_store.state)


@app.post("/state/event")
def select_event(request: EventSelection) -> dict[str, Any]:
    _store.select_event(request.event.lower() if request.event else None)
    return _state_payload(_store.state)


@app.post("/state/focus")
def set_focus(request: FocusRequest) -> dict[str, Any]:
    if (request.x is None) != (request.y is None):
        raise HTTPException(status_code=422, detail="x and y must be given together")
    coordinates = (
        Coordinates(x=request.x, y=request.y)
        if request.x is not None and request.y is not None
        else None
    )
    _store.set_focus(MapFocus(entity_id=request.entity_id, coordinates=coordinates, zoom=request.zoom))
    return _state_payload(_store.state)


@app.post("/sources/search")
def source_search(request: SourceSearchRequest) -> dict[str, Any]:
    hits = _index.rank(request.query, request.top_k)
    return {
        "items": [
            {
                "doc_id": hit.document.id,
                "title": hit.document.title,
                "score": hit.score,
                "text": hit.document.text,
            }
            for hit in hits
        ]
    }


@app.get("/dataset")
def dataset() -> dict[str, Any]:
    return asdict(_pipeline.snapshot)


@app.get("/traces")
def traces(limit: int = 20) -> dict[str, Any]:
    records = [asdict(record) for record in _trace_store.list_recent(limit=limit)]
    return {"items": records}


@app.get("/traces/{trace_id}")
def trace_detail(trace_id: str) -> dict[str, Any]:
    try:
        record = _trace_store.get(trace_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return asdict(record)


@app.get("/metrics")
def metrics() -> dict[str, Any]:
    return _trace_store.summary()
