from portus_agent.agent.schema import AnalysisResult
from portus_agent.state.store import SharedState, SharedStateStore
from portus_agent.types import Coordinates, MapFocus


def _result(explain: str) -> AnalysisResult:
    return AnalysisResult(plan=["p"], recommendations=[], sources=[], explain=explain)


def test_commit_updates_fields_in_order() -> None:
    store = SharedStateStore()
    observed: list[SharedState] = []
    store.subscribe(observed.append)
    result = _result("V101 is exposed to the storm front")

    store.commit(result)

    assert len(observed) == 4
    analysis_set, vessel_set, event_set, focus_set = observed
    assert analysis_set.current_analysis == result
    assert analysis_set.selected_vessel is None
    assert vessel_set.selected_vessel == "V101"
    assert vessel_set.selected_event is None
    assert event_set.selected_event == "storm"
    assert event_set.map_focus == MapFocus()
    assert focus_set.map_focus == MapFocus(
        entity_id="V101", coordinates=Coordinates(x=200, y=150), zoom=1.5
    )
    assert store.state == focus_set


def test_commit_without_entities_only_replaces_analysis() -> None:
    store = SharedStateStore()
    store.commit(_result("V102 delayed"))
    observed: list[SharedState] = []
    store.subscribe(observed.append)

    store.commit(_result("All clear."))

    assert len(observed) == 1
    assert store.state.current_analysis.explain == "All clear."
    assert store.state.selected_vessel == "V102"
    assert store.state.selected_event == "delay"


def test_commit_none_leaves_derived_fields() -> None:
    store = SharedStateStore()
    store.commit(_result("V102 delayed near Suez"))

    store.commit(None)

    assert store.state.current_analysis is None
    assert store.state.selected_vessel == "V102"
    assert store.state.selected_event == "suez"
    assert store.state.map_focus.entity_id == "V102"


def test_unknown_vessel_keeps_previous_focus() -> None:
    store = SharedStateStore()
    store.commit(_result("V101 at berth"))

    store.commit(_result("V201 on time"))

    assert store.state.selected_vessel == "V201"
    assert store.state.map_focus.entity_id == "V101"


def test_setters_replace_state_and_notify() -> None:
    store = SharedStateStore()
    observed: list[SharedState] = []
    store.subscribe(observed.append)
    before = store.state

    store.select_vessel("V103")
    store.select_event("typhoon")
    store.set_focus(MapFocus(entity_id="P02", zoom=2.0))
    store.select_vessel(None)

    assert before == SharedState()
    assert [state.selected_vessel for state in observed] == ["V103", "V103", "V103", None]
    assert observed[-1].selected_event == "typhoon"
    assert observed[-1].map_focus == MapFocus(entity_id="P02", zoom=2.0)


def test_unsubscribe_stops_notifications() -> None:
    store = SharedStateStore()
    observed: list[SharedState] = []
    unsubscribe = store.subscribe(observed.append)

    store.select_vessel("V101")
    unsubscribe()
    store.select_vessel("V102")
    unsubscribe()

    assert len(observed) == 1


def test_failing_subscriber_does_not_interrupt_commit() -> None:
    store = SharedStateStore()
    observed: list[SharedState] = []

    def _broken_view(state: SharedState) -> None:
        raise RuntimeError("view crashed")

    store.subscribe(_broken_view)
    store.subscribe(observed.append)

    store.commit(_result("V101 storm"))

    assert store.state.selected_vessel == "V101"
    assert store.state.selected_event == "storm"
    assert store.state.map_focus.entity_id == "V101"
    assert len(observed) == 4
