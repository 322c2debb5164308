import pytest

from minischeme.reader.parser import read_expr
from minischeme.evaluation.evaluator import evaluate


# Most tests state programs as source text. The `run` fixture reads one
# expression and evaluates it, so error assertions see exactly what a REPL
# user would get before rendering.
@pytest.fixture
def run():
    def _run(source: str):
        return evaluate(read_expr(source))
    return _run
