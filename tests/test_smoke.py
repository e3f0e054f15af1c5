# tests/test_smoke.py
"""
Teste de sanidade estrutural.

Garante apenas que o pacote importa e que o registry de processo é
construído sem erro (imports circulares entre core e steps).
"""


def test_smoke():
    import idf_pipeline
    from idf_pipeline.core.pipeline.registry import STEP_REGISTRY

    assert idf_pipeline.__version__
    assert len(STEP_REGISTRY) == 3
