"""Query lifecycle: detect, retrieve, assemble, generate, validate."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from dataclasses import dataclass
from enum import Enum
from time import perf_counter

from portus_agent.agent.generator import Generator, GeneratorError
from portus_agent.agent.language import Language, LanguageDetector
from portus_agent.agent.prompt import PromptAssembler
from portus_agent.agent.schema import AnalysisResult
from portus_agent.agent.validator import FailureReason, ResponseValidator
from portus_agent.config import AgentConfig
from portus_agent.data.dataset import DEFAULT_SNAPSHOT
from portus_agent.logger import LOGGER
from portus_agent.obs.tracing import Timer, TraceStore, estimate_token_count
from portus_agent.retrieval.index import DocumentIndex
from portus_agent.types import DatasetSnapshot, Document, PromptPackage, ToolTrace

_GENERATOR_POOL = ThreadPoolExecutor(max_workers=4, thread_name_prefix="portus-generator")


class Outcome(str, Enum):
    OK = "ok"
    NOT_CONFIGURED = "not_configured"
    TIMEOUT = "timeout"
    ERROR = "error"
    INVALID = "invalid"


@dataclass(slots=True)
class PipelineRun:
    result: AnalysisResult
    language: Language
    documents: list[Document]
    outcome: Outcome
    latency_ms: float
    trace_id: str | None = None
    latency_target_met: bool = True


class OrchestrationPipeline:
    """Runs one query end to end and always returns a complete answer.

    The remote call is raced against ``AgentConfig.timeout_seconds``. The
    pipeline reads the generator future exactly once; if the timer wins, the
    in-flight call is left to finish on its worker thread and its reply is
    dropped. Committing the returned answer to shared state is the caller's
    job, so a late reply can never reach it.
    """

    def __init__(
        self,
        *,
        index: DocumentIndex | None = None,
        generator: Generator | None = None,
        snapshot: DatasetSnapshot | None = None,
        detector: LanguageDetector | None = None,
        assembler: PromptAssembler | None = None,
        validator: ResponseValidator | None = None,
        trace_store: TraceStore | None = None,
        config: AgentConfig | None = None,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.index = index if index is not None else DocumentIndex()
        self.generator = generator
        self.snapshot = snapshot or DEFAULT_SNAPSHOT
        self.detector = detector or LanguageDetector()
        self.assembler = assembler or PromptAssembler()
        self.validator = validator or ResponseValidator(detector=self.detector)
        self.trace_store = trace_store
        self.config = config or AgentConfig()
        self._executor = executor or _GENERATOR_POOL

    @property
    def configured(self) -> bool:
        return self.generator is not None

    def run(self, query: str) -> AnalysisResult:
        return self.run_detailed(query).result

    def run_detailed(self, query: str) -> PipelineRun:
        tool_traces: list[ToolTrace] = []

        with Timer() as timer:
            language = self.detector.detect(query)
            documents = self.index.retrieve(query, self.config.top_k)
            LOGGER.info(
                "Query language=%s documents=%s",
                language.value,
                [doc.id for doc in documents],
            )

            prompt = self.assembler.assemble(query, self.snapshot, documents, language)

            if self.generator is None:
                LOGGER.info("No generator configured, answering from mock templates")
                result = self.validator.mock(query, language)
                outcome = Outcome.NOT_CONFIGURED
            else:
                result, outcome = self._generate(self.generator, prompt, tool_traces)

        LOGGER.info("Query finished outcome=%s latency_ms=%.1f", outcome.value, timer.elapsed_ms)

        target_met = timer.elapsed_ms <= self.config.target_latency_seconds * 1000.0
        trace_id: str | None = None
        if self.trace_store is not None:
            prompt_text = f"{prompt.system_instruction}\n{prompt.user_content}"
            record = self.trace_store.create_record(
                question=query,
                language=language.value,
                document_ids=[doc.id for doc in documents],
                outcome=outcome.value,
                explain=result.explain,
                sources=list(result.sources),
                tool_traces=tool_traces,
                input_tokens=estimate_token_count(prompt_text),
                output_tokens=estimate_token_count(result.explain),
                latency_ms=timer.elapsed_ms,
                latency_target_met=target_met,
            )
            trace_id = record.trace_id

        return PipelineRun(
            result=result,
            language=language,
            documents=documents,
            outcome=outcome,
            latency_ms=timer.elapsed_ms,
            trace_id=trace_id,
            latency_target_met=target_met,
        )

    def _generate(
        self,
        generator: Generator,
        prompt: PromptPackage,
        tool_traces: list[ToolTrace],
    ) -> tuple[AnalysisResult, Outcome]:
        timeout = self.config.timeout_seconds
        start = perf_counter()
        future = self._executor.submit(
            generator.generate, prompt, temperature=self.config.temperature
        )
        raw: str | None = None
        try:
            raw = future.result(timeout=timeout)
        except FuturesTimeoutError:
            # Only a call still queued behind busy workers can be cancelled.
            if future.cancel():
                LOGGER.warning("Generator call still queued after %.1fs, cancelled", timeout)
            else:
                future.add_done_callback(_discard_late_reply)
                LOGGER.warning("Generator did not reply within %.1fs, using timeout fallback", timeout)
            return self.validator.validate(None, failure=FailureReason.TIMEOUT), Outcome.TIMEOUT
        except GeneratorError as exc:
            LOGGER.warning("Generator failed, using error fallback: %s", exc)
            return self.validator.validate(None, failure=FailureReason.ERROR), Outcome.ERROR
        except Exception:
            LOGGER.exception("Unexpected generator failure, using error fallback")
            return self.validator.validate(None, failure=FailureReason.ERROR), Outcome.ERROR
        finally:
            tool_traces.append(
                ToolTrace(
                    name="chat_completion",
                    input_payload={"temperature": self.config.temperature},
                    output_preview=(raw or "")[:320],
                    latency_ms=(perf_counter() - start) * 1000.0,
                )
            )

        parsed = self.validator.parse(raw)
        if parsed is None:
            return self.validator.validate(None, failure=FailureReason.ERROR), Outcome.INVALID
        return parsed, Outcome.OK


def _discard_late_reply(future: Future[str]) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        LOGGER.debug("Late generator call failed after timeout: %s", exc)
    else:
        LOGGER.info("Discarded generator reply that arrived after the timeout")
