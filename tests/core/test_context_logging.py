# tests/core/test_context_logging.py
"""
Testes do log estruturado do ValidationContext.

Os testes asseguram que:
- eventos carregam run_id, check, level, message e timestamp
- a validação registra início, cada job, o workflow e o estado final
- cada validação sem contexto explícito recebe um contexto novo
- a configuração do contexto não compartilha estado com os defaults
- limites explícitos são refletidos na configuração e no hash do contexto
"""

from pipeline_gate.core.config.hashing import compute_config_hash
from pipeline_gate.core.config.limits import ValidationLimits
from pipeline_gate.core.context import ValidationContext
from pipeline_gate.core.engine import validate_document


def test_log_event_shape(dummy_ctx):
    dummy_ctx.log(check="job", level="INFO", message="checked", job="main")

    event = dummy_ctx.events[-1]
    assert event["run_id"] == "run-test-001"
    assert event["check"] == "job"
    assert event["level"] == "INFO"
    assert event["message"] == "checked"
    assert event["job"] == "main"
    assert "timestamp" in event


def test_config_hash_is_computed(dummy_ctx):
    assert dummy_ctx.config_hash == compute_config_hash(dummy_ctx.config)


def test_validation_events_in_order(make_doc, dummy_ctx):
    result = validate_document(make_doc("test"), ctx=dummy_ctx)

    assert result.run_id == "run-test-001"
    assert [(e["check"], e["message"]) for e in dummy_ctx.events] == [
        ("phase", "functional validation started"),
        ("job", 'Job "main" checked'),
        ("job", 'Job "test" checked'),
        ("workflow", "workflow generated"),
        ("phase", "document accepted"),
    ]


def test_rejection_is_logged_as_error(make_doc, dummy_ctx):
    validate_document(make_doc("test", workflow=[]), ctx=dummy_ctx)

    workflow_events = dummy_ctx.events_for("workflow")
    assert workflow_events[0]["message"] == "workflow declared"
    assert workflow_events[1]["level"] == "ERROR"
    assert dummy_ctx.events[-1]["state"] == "rejected"
    assert dummy_ctx.events[-1]["error_count"] == 1


def test_each_validation_gets_its_own_context(make_doc):
    first = validate_document(make_doc("a"))
    second = validate_document(make_doc("a"))
    assert first.run_id != second.run_id


def test_create_uses_default_config():
    ctx = ValidationContext.create()
    assert ctx.config["limits"] == {"max_environment_vars": 25, "max_permutations": 25}
    assert len(ctx.config_hash) == 64


def test_context_config_is_isolated_from_defaults(make_doc, make_job):
    ctx = ValidationContext.create()
    ctx.config["limits"]["max_permutations"] = 1

    doc = make_doc("test")
    doc["jobs"]["test"] = make_job(matrix={"NODE": ["18", "20"]})
    result = validate_document(doc)

    assert result.accepted
    assert ValidationContext.create().config["limits"]["max_permutations"] == 25


def test_caller_config_is_copied():
    config = {"limits": {"max_environment_vars": 3, "max_permutations": 3}}
    ctx = ValidationContext.create(config=config)
    ctx.config["limits"]["max_permutations"] = 1

    assert config["limits"]["max_permutations"] == 3


def test_explicit_limits_are_reflected_in_context(make_doc, dummy_ctx):
    default_hash = dummy_ctx.config_hash
    validate_document(make_doc("test"), limits=ValidationLimits(max_permutations=30), ctx=dummy_ctx)

    assert dummy_ctx.config["limits"] == {"max_environment_vars": 25, "max_permutations": 30}
    assert dummy_ctx.config_hash == compute_config_hash(dummy_ctx.config)
    assert dummy_ctx.config_hash != default_hash
    assert dummy_ctx.events[0]["config_hash"] == dummy_ctx.config_hash
