import json
import time

from py_mini_racer import (
    JSEvalException,
    JSOOMException,
    JSTimeoutException,
    LibAlreadyInitializedError,
    LibNotFoundError,
    MiniRacer,
)

from coreason_coderunner.models import ExecutionOutcome
from coreason_coderunner.runtime import ExecutionEngine
from coreason_coderunner.utils.logger import logger

# Builtins used by the harness are bound before the submitted source runs.
_HARNESS = """
(function (source) {
  const toText = String;
  const stringify = JSON.stringify;
  const ErrorType = Error;
  const lines = [];

  // Timer shims installed by the embedding are not part of the granted capabilities.
  globalThis.setTimeout = undefined;
  globalThis.clearTimeout = undefined;

  function format(args) {
    let line = "";
    for (let i = 0; i < args.length; i++) {
      line += (i === 0 ? "" : " ") + toText(args[i]);
    }
    return line;
  }

  function describe(thrown) {
    try {
      return thrown instanceof ErrorType ? toText(thrown.message) : toText(thrown);
    } catch (inner) {
      return "Uncaught exception of unprintable type";
    }
  }

  const sandboxConsole = Object.freeze({
    log: function (...args) { lines[lines.length] = format(args); },
    error: function (...args) { lines[lines.length] = "Error: " + format(args); },
    warn: function (...args) { lines[lines.length] = "Warning: " + format(args); },
  });

  let failure = null;
  try {
    new Function("console", source)(sandboxConsole);
  } catch (e) {
    failure = describe(e);
  }
  return stringify({ lines: lines, failure: failure });
})(%s)
"""


def _well_formed(text: str) -> str:
    """Replace lone UTF-16 surrogates, which JS strings may carry, with U+FFFD."""
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


class MiniRacerRuntime(ExecutionEngine):
    """
    Embedded V8 implementation of the ExecutionEngine.

    Every call gets a fresh isolate. V8 has no filesystem, network or stdio
    bindings and the timer shims are cleared, so the only capability handed
    to the evaluated source is the capture console.
    """

    def __init__(self, timeout: float | None = None, max_memory: int | None = None):
        self.timeout = timeout
        self.max_memory = max_memory

    def execute(self, source: str) -> ExecutionOutcome:
        script = _HARNESS % json.dumps(source)
        logger.debug(f"Evaluating JavaScript source ({len(source)} chars)")

        start_time = time.perf_counter()
        try:
            raw = MiniRacer().eval(script, timeout_sec=self.timeout, max_memory=self.max_memory)
        except JSTimeoutException:
            logger.warning(f"JavaScript evaluation timed out after {self.timeout}s")
            return ExecutionOutcome(captured_output="", failure=f"Execution timed out after {self.timeout}s")
        except JSOOMException:
            logger.warning("JavaScript evaluation exceeded the memory limit")
            return ExecutionOutcome(captured_output="", failure="Execution exceeded the memory limit")
        except (JSEvalException, LibNotFoundError, LibAlreadyInitializedError) as e:
            logger.error(f"JavaScript engine failure: {e}")
            return ExecutionOutcome(captured_output="", failure=str(e))
        duration = time.perf_counter() - start_time

        captured = json.loads(raw)
        failure = captured["failure"]
        outcome = ExecutionOutcome(
            captured_output=_well_formed("\n".join(captured["lines"])),
            failure=None if failure is None else _well_formed(failure),
        )

        if outcome.failure is not None:
            logger.info(f"Evaluation threw after {len(captured['lines'])} line(s): {outcome.failure}")
        logger.debug(f"Evaluation finished in {duration:.4f}s")
        return outcome
