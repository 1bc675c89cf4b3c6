import pytest

from kappa.evaluation.evaluator import evaluate
from kappa.reader.parser import tokenize, parse
from kappa.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty environment."""
    return Environment()


@pytest.fixture
def run(env):
    """Read and evaluate one input unit against the `env` fixture."""
    def _run(source: str):
        return evaluate(parse(tokenize(source)), env)
    return _run
