"""
Shared fixtures: a registry with one stub provider per backend family and
an analysis context built on it.
"""
import pytest

from nlp_backends import BackendRegistry
from nlp_bridge import AnalysisContext
from stubs import all_family_providers


@pytest.fixture
def providers():
    return all_family_providers()


@pytest.fixture
def registry(providers):
    return BackendRegistry(providers)


@pytest.fixture
def context(registry):
    ctx = AnalysisContext(registry)
    yield ctx
    ctx.close()
