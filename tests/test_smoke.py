# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Pipeline Gate.

Garantem apenas que o pacote pode ser importado e expõe sua API pública.
Não validam regras de negócio.
"""


def test_smoke():
    import pipeline_gate

    assert pipeline_gate.MAX_ENVIRONMENT_VARS == 25
    assert pipeline_gate.MAX_PERMUTATIONS == 25
    assert callable(pipeline_gate.run_functional_phase)
