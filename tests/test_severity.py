from contractlens.analysis.severity import classify_missing_clauses, overall_severity, MISSING_CLAUSE_RULES
from contractlens.analysis.validator import validate_clauses
from contractlens.utils.types import ClauseSet, CLAUSE_KEYS, MissingClauseEntry, Severity


def full_clauses(**overrides):
    values = {attr: f"{attr} provision" for attr in CLAUSE_KEYS}
    values.update(overrides)
    return ClauseSet(**values)


def test_all_present_is_green():
    entries, severity = classify_missing_clauses(full_clauses())
    assert entries == []
    assert severity is Severity.GREEN


def test_informational_clauses_do_not_affect_severity():
    entries, severity = classify_missing_clauses(full_clauses(special_conditions="", riders="", language=""))
    assert entries == []
    assert severity is Severity.GREEN


def test_red_clause_blank_gives_red_and_validator_issue():
    for attr, issue in [
        ("parties", "Missing parties clause"),
        ("signatories", "Missing signatures/signatory information"),
        ("governing_law", "Missing governing law clause"),
    ]:
        clauses = full_clauses(**{attr: "  "})
        entries, severity = classify_missing_clauses(clauses)
        assert severity is Severity.RED
        assert len(entries) == 1
        assert issue in validate_clauses(clauses)


def test_amber_only():
    entries, severity = classify_missing_clauses(full_clauses(payment="", liability=""))
    assert [e.name for e in entries] == ["Liability", "Payment"]
    assert all(e.severity is Severity.AMBER for e in entries)
    assert severity is Severity.AMBER


def test_empty_clause_set_reports_all_nine_in_table_order():
    entries, severity = classify_missing_clauses(ClauseSet())
    assert [e.key for e in entries] == [rule[0] for rule in MISSING_CLAUSE_RULES]
    assert len(entries) == 9
    assert entries[0] == MissingClauseEntry("parties", "Parties", Severity.RED, "No parties identified")
    assert entries[-1].reason == "Contract duration missing"
    assert severity is Severity.RED


def test_classification_is_idempotent():
    clauses = full_clauses(term="", signatories="")
    assert classify_missing_clauses(clauses) == classify_missing_clauses(clauses)


def test_overall_severity_of_empty_list():
    assert overall_severity([]) is Severity.GREEN
