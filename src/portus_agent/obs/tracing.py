"""Per-query tracing, latency and cost accounting."""

from __future__ import annotations

import math
import re
import threading
import time
import uuid
from collections import Counter, OrderedDict
from dataclasses import dataclass
from datetime import datetime, timezone

from portus_agent.types import ToolTrace

# Words and standalone punctuation; close enough to BPE counts for cost estimates.
_TOKEN_PATTERN = re.compile(r"\w+|[^\w\s]", flags=re.UNICODE)

_BILLABLE_OUTCOMES = frozenset({"ok", "invalid"})


@dataclass(slots=True)
class TraceRecord:
    trace_id: str
    timestamp_utc: str
    question: str
    language: str
    document_ids: list[str]
    outcome: str
    explain: str
    sources: list[str]
    tool_traces: list[ToolTrace]
    input_tokens: int
    output_tokens: int
    estimated_cost_usd: float
    latency_ms: float
    latency_target_met: bool = True


@dataclass(slots=True)
class CostModel:
    """USD prices per 1K prompt and completion tokens."""

    input_per_1k: float = 0.005
    output_per_1k: float = 0.015

    def estimate_cost(self, input_tokens: int, output_tokens: int) -> float:
        weighted = input_tokens * self.input_per_1k + output_tokens * self.output_per_1k
        return weighted / 1000.0


class TraceStore:
    """Bounded in-memory log of pipeline runs, newest last.

    Only runs that actually reached a model are billed; mock and failure
    answers are recorded at zero cost. Once ``max_records`` is reached the
    oldest run is evicted.
    """

    def __init__(self, *, cost_model: CostModel | None = None, max_records: int = 1000) -> None:
        self.cost_model = cost_model or CostModel()
        self.max_records = max_records
        self._records: OrderedDict[str, TraceRecord] = OrderedDict()
        self._lock = threading.Lock()

    def create_record(
        self,
        *,
        question: str,
        language: str,
        document_ids: list[str],
        outcome: str,
        explain: str,
        sources: list[str],
        tool_traces: list[ToolTrace],
        input_tokens: int,
        output_tokens: int,
        latency_ms: float,
        latency_target_met: bool = True,
    ) -> TraceRecord:
        cost = 0.0
        if outcome in _BILLABLE_OUTCOMES:
            cost = self.cost_model.estimate_cost(input_tokens, output_tokens)

        record = TraceRecord(
            trace_id=uuid.uuid4().hex,
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
            question=question,
            language=language,
            document_ids=document_ids,
            outcome=outcome,
            explain=explain,
            sources=sources,
            tool_traces=tool_traces,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            estimated_cost_usd=cost,
            latency_ms=latency_ms,
            latency_target_met=latency_target_met,
        )
        with self._lock:
            self._records[record.trace_id] = record
            while len(self._records) > self.max_records:
                self._records.popitem(last=False)
        return record

    def get(self, trace_id: str) -> TraceRecord:
        with self._lock:
            try:
                return self._records[trace_id]
            except KeyError:
                raise KeyError(f"Unknown trace id: {trace_id}") from None

    def list_recent(self, limit: int = 20) -> list[TraceRecord]:
        if limit <= 0:
            return []
        with self._lock:
            snapshot = list(self._records.values())
        return snapshot[-limit:]

    def __len__(self) -> int:
        return len(self._records)

    def summary(self) -> dict[str, object]:
        """Latency, outcome mix, token and cost totals across stored runs."""
        with self._lock:
            records = list(self._records.values())

        count = len(records)
        outcomes = Counter(record.outcome for record in records)
        latencies = [record.latency_ms for record in records]
        fallbacks = count - outcomes.get("ok", 0)

        return {
            "total_requests": count,
            "avg_latency_ms": sum(latencies) / count if count else 0.0,
            "p95_latency_ms": _percentile(latencies, 0.95),
            "fallback_rate": fallbacks / count if count else 0.0,
            "outcomes": dict(outcomes),
            "total_input_tokens": sum(record.input_tokens for record in records),
            "total_output_tokens": sum(record.output_tokens for record in records),
            "total_estimated_cost_usd": sum(record.estimated_cost_usd for record in records),
        }


def _percentile(values: list[float], fraction: float) -> float:
    # Nearest-rank method.
    if not values:
        return 0.0
    ordered = sorted(values)
    rank = max(1, math.ceil(fraction * len(ordered)))
    return ordered[rank - 1]


class Timer:
    """Context manager measuring wall time in milliseconds."""

    def __init__(self) -> None:
        self.started_at: float | None = None
        self.elapsed_ms = 0.0

    def __enter__(self) -> Timer:
        self.started_at = time.perf_counter()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.started_at is not None:
            self.elapsed_ms = (time.perf_counter() - self.started_at) * 1000.0


def estimate_token_count(text: str) -> int:
    return len(_TOKEN_PATTERN.findall(text))
