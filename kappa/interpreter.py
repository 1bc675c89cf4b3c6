from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from kappa import LispValue
from kappa.config import get_prelude_path
from kappa.evaluation.evaluator import evaluate
from kappa.printer import to_string
from kappa.reader.parser import tokenize, parse
from kappa.types.environment import Environment
from kappa.types.error import Error

log = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Kappa source against one Environment that persists
    across calls. Each call to `eval` is one complete input unit: it is
    tokenized, parsed into a single form and evaluated.
    """

    def __init__(
        self,
        prelude: str | Path | None | Literal['auto'] = 'auto',
        env: Environment | None = None,
    ):
        self.env: Environment = env if env is not None else Environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path.is_file():
                self.load_prelude(path)
            else:
                log.debug("no prelude at %s", path)
        else:
            self.load_prelude(Path(prelude))

    def load_prelude(self, path: Path | None = None) -> LispValue:
        """Evaluate a bootstrap file; raises FileNotFoundError if it is missing."""
        path = path if path is not None else get_prelude_path()
        log.debug("loading prelude %s", path)
        return self.eval_prelude(path.read_text(encoding='utf-8'))

    def eval_prelude(self, code: str) -> LispValue:
        result = self.eval(code)
        if isinstance(result, Error):
            log.warning("prelude evaluated to %s", to_string(result))
        return result

    def eval(self, code: str) -> LispValue:
        form = parse(tokenize(code))
        log.debug("evaluating %r", form)
        return evaluate(form, self.env)

    def render(self, code: str) -> str:
        return to_string(self.eval(code))
