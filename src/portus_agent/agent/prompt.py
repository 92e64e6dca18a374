"""Prompt assembly for the chat-completion backend."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import asdict

from portus_agent.agent.language import Language
from portus_agent.types import DatasetSnapshot, Document, PromptPackage

_SYSTEM_PROMPT = """
You are PORTUS AI, a conversational trade intelligence agent for the Port of Singapore Authority (PSA).
Your purpose is to help logistics managers make real-time, data-driven decisions during global trade disruptions.
You must analyze the user's query against the provided structured data (vessels, ports, weather, routes)
and the retrieved operational documents in the RAG CONTEXT block.

IMPORTANT: The user's query is in {language}. You MUST respond in the SAME LANGUAGE as the user's query.
Every free-text field (plan, action, impact_estimate, explain, trace messages) must be written in {language}.

Rules:
1) Ground every statement in the AVAILABLE DATA or RAG CONTEXT; do not invent vessels, ports or events.
2) Identify relevant entities, simulate impacts, and recommend concrete actions.
3) For sources, use the format 'dataset:id' or 'dataset:name' (e.g., 'vessels:V102', 'weather:Sandstorm').
4) Always provide a step-by-step plan of how you reached your conclusion.
5) Confidence is a number between 0.0 and 1.0.

Your response MUST be a single valid JSON object with the following structure:
{schema}
""".strip()

_SCHEMA_EXAMPLE = {
    "plan": ["step1", "step2", "step3"],
    "recommendations": [
        {
            "action": "concrete action",
            "impact_estimate": "estimated impact",
            "confidence": 0.85,
        }
    ],
    "sources": ["vessels:V101", "weather:Sandstorm"],
    "explain": "summary in the user's language",
    "trace": [
        {"type": "thinking", "message": "Analyzing the situation..."},
        {"type": "action", "actionName": "check_vessel_status", "arguments": {"vessel_id": "V101"}},
        {"type": "observation", "observation": "Vessel V101 is currently delayed by 2 hours"},
        {"type": "final", "message": "Based on analysis, here are my recommendations"},
    ],
}


class PromptAssembler:
    """Combines dataset, retrieved documents and the query into one request."""

    def assemble(
        self,
        query: str,
        snapshot: DatasetSnapshot,
        documents: Sequence[Document],
        language: Language,
    ) -> PromptPackage:
        system_instruction = _SYSTEM_PROMPT.format(
            language=language.value,
            schema=json.dumps(_SCHEMA_EXAMPLE, indent=2, ensure_ascii=False),
        )

        parts = [_format_dataset(snapshot)]
        rag_block = _format_documents(documents)
        if rag_block:
            parts.append(rag_block)
        parts.append(f'USER QUERY: "{query}"')

        return PromptPackage(
            system_instruction=system_instruction,
            user_content="\n\n".join(parts),
        )


def _format_dataset(snapshot: DatasetSnapshot) -> str:
    sections = [
        ("Vessels", snapshot.vessels),
        ("Ports", snapshot.ports),
        ("Weather Disruption Events", snapshot.weather),
        ("Trade Routes", snapshot.routes),
    ]
    lines = ["AVAILABLE DATA:", "---"]
    for label, records in sections:
        payload = json.dumps([asdict(record) for record in records], indent=2, ensure_ascii=False)
        lines.append(f"{label}: {payload}")
        lines.append("---")
    return "\n".join(lines)


def _format_documents(documents: Sequence[Document]) -> str:
    if not documents:
        return ""
    entries = [
        f"#{idx} {doc.title} (DocID: {doc.id})\n{doc.text}"
        for idx, doc in enumerate(documents, start=1)
    ]
    return f"RAG CONTEXT (Top {len(documents)}):\n" + "\n---\n".join(entries)
