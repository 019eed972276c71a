# tests/core/checks/test_job_matrix.py
"""
Testes do Job Matrix Checker.

Os testes asseguram que:
- permutações são o produto do número de candidatos por variável
- matrix vazia gera 1 permutação (nunca 0, nunca erro)
- os limites são inclusivos (25 aceito, 26 rejeitado)
- environment + matrix acima do limite gera exatamente um erro com a contagem real
"""

import pytest

from pipeline_gate.core.checks.job_matrix import check_job_matrix, count_permutations
from pipeline_gate.core.config.limits import ValidationLimits
from pipeline_gate.core.errors import ENVIRONMENT_LIMIT_EXCEEDED, PERMUTATION_LIMIT_EXCEEDED

PREFIX = 'Job "test"'


def _env(n, start=0):
    return {f"VAR_{i}": "x" for i in range(start, start + n)}


@pytest.mark.parametrize(
    "matrix, expected",
    [
        ({}, 1),
        ({"NODE": ["16", "18", "20"]}, 3),
        ({"NODE": ["16", "18"], "OS": ["linux", "mac", "win"]}, 6),
        ({"NODE": []}, 0),
    ],
)
def test_count_permutations(matrix, expected):
    assert count_permutations(matrix) == expected


def test_empty_matrix_is_valid(make_job):
    assert check_job_matrix(make_job(), PREFIX) == []


def test_permutations_at_limit_accepted(make_job):
    job = make_job(matrix={"A": list(range(5)), "B": list(range(5))})
    assert check_job_matrix(job, PREFIX) == []


def test_permutations_over_limit_rejected(make_job):
    job = make_job(matrix={"A": list(range(2)), "B": list(range(13))})
    errors = check_job_matrix(job, PREFIX)

    assert [e.type for e in errors] == [PERMUTATION_LIMIT_EXCEEDED]
    assert errors[0].message == 'Job "test": "matrix" cannot contain >25 permutations (currently 26)'
    assert errors[0].details == {"limit": 25, "count": 26}


def test_combined_environment_over_limit(make_job):
    job = make_job(environment=_env(20), matrix={f"M_{i}": ["a"] for i in range(6)})
    errors = check_job_matrix(job, PREFIX)

    assert [e.type for e in errors] == [ENVIRONMENT_LIMIT_EXCEEDED]
    assert errors[0].message == (
        'Job "test": "environment" and "matrix" can only have a combined maximum of '
        "25 environment variables defined (currently 26)"
    )


def test_combined_environment_at_limit(make_job):
    job = make_job(environment=_env(24), matrix={"NODE": ["18"]})
    assert check_job_matrix(job, PREFIX) == []


def test_environment_only_over_limit_reports_true_count(make_job):
    errors = check_job_matrix(make_job(environment=_env(30)), PREFIX)
    assert len(errors) == 1
    assert errors[0].details["count"] == 30


def test_both_limits_reported_together(make_job):
    job = make_job(
        environment=_env(24),
        matrix={"A": list(range(3)), "B": list(range(3)), "C": list(range(3))},
    )
    errors = check_job_matrix(job, PREFIX)
    assert [e.type for e in errors] == [ENVIRONMENT_LIMIT_EXCEEDED, PERMUTATION_LIMIT_EXCEEDED]
    assert errors[1].details["count"] == 27


def test_custom_limits(make_job):
    job = make_job(matrix={"A": [1, 2, 3]})
    errors = check_job_matrix(job, PREFIX, limits=ValidationLimits(max_permutations=2))
    assert errors[0].message == 'Job "test": "matrix" cannot contain >2 permutations (currently 3)'


def test_malformed_fields_do_not_raise(make_job):
    job = make_job(environment="nope", matrix={"A": "not-a-list", "B": [1, 2]})
    assert check_job_matrix(job, PREFIX) == []
    assert check_job_matrix(None, PREFIX) == []
