from portus_agent.agent.language import Language
from portus_agent.agent.prompt import _SYSTEM_PROMPT, PromptAssembler
from portus_agent.data.dataset import DEFAULT_SNAPSHOT
from portus_agent.retrieval.index import DocumentIndex


def test_system_prompt_contains_grounding_and_schema_rules() -> None:
    assert "SAME LANGUAGE" in _SYSTEM_PROMPT
    assert "valid JSON object" in _SYSTEM_PROMPT
    assert "'dataset:id'" in _SYSTEM_PROMPT


def test_assembled_prompt_names_detected_language() -> None:
    package = PromptAssembler().assemble("¿Hola?", DEFAULT_SNAPSHOT, [], Language.SPANISH)

    assert "The user's query is in Spanish" in package.system_instruction
    assert '"actionName": "check_vessel_status"' in package.system_instruction


def test_user_content_layout() -> None:
    query = "If Suez canal is delayed 48 hours, which shipments are affected?"
    documents = DocumentIndex().retrieve(query, 3)

    package = PromptAssembler().assemble(query, DEFAULT_SNAPSHOT, documents, Language.ENGLISH)
    content = package.user_content

    assert content.startswith("AVAILABLE DATA:")
    sections = ["Vessels:", "Ports:", "Weather Disruption Events:", "Trade Routes:", "RAG CONTEXT (Top 3):"]
    positions = [content.index(section) for section in sections]
    assert positions == sorted(positions)
    assert '"vessel_id": "V102"' in content
    for idx, doc in enumerate(documents, start=1):
        assert f"#{idx} {doc.title} (DocID: {doc.id})\n{doc.text}" in content
    assert content.count("\n---\n#") == 2
    assert content.endswith(f'USER QUERY: "{query}"')


def test_rag_block_omitted_without_documents() -> None:
    package = PromptAssembler().assemble("hello", DEFAULT_SNAPSHOT, [], Language.ENGLISH)

    assert "RAG CONTEXT" not in package.user_content
