"""Cooperative drivers for search strategies.

Strategies never loop on their own; each ``step()`` advances by one frontier
element and hands control back. The helpers here are the host-side loops:

* :func:`iter_steps` - generator, one ``StepResult`` per step.
* :func:`run_to_completion` - back-to-back stepping with an optional delay.
* :class:`StepScheduler` - clock-driven pacing for hosts with their own frame
  loop (call ``tick()`` once per frame).

Cancellation is the strategy's ``stop()``; every driver checks ``done`` after
each step, so a stopped search ends the loop on the next step.
"""

import logging
import time
from typing import Callable, Iterator, List, Optional

from maze_search.algorithms.common import SearchAlgorithm, StepResult
from maze_search.config import DEFAULT_STEP_DELAY
from maze_search.errors import SearchBudgetExceeded
from maze_search.types import CompleteCallback, Path, StepCallback

logger = logging.getLogger(__name__)


def iter_steps(search: SearchAlgorithm) -> Iterator[StepResult]:
    """Yield step results until the search reports ``done``.

    The search must already be started. The terminal result is yielded too.
    """
    while True:
        result = search.step()
        yield result
        if result.done:
            return


def run_to_completion(
    search: SearchAlgorithm,
    on_step: Optional[StepCallback] = None,
    on_complete: Optional[CompleteCallback] = None,
    delay: float = 0.0,
    sleep: Callable[[float], None] = time.sleep,
    max_steps: Optional[int] = None,
) -> Optional[Path]:
    """Start ``search`` and step it until it finishes.

    Arguments:
        search: Unstarted strategy instance.
        on_step: Forwarded to ``search.start``.
        on_complete: Forwarded to ``search.start``.
        delay: Seconds to sleep between steps (0 runs back-to-back).
        sleep: Sleep function, injectable for tests.
        max_steps: Optional budget; exceeding it stops the search.

    Returns:
        The path, or ``None`` if the goal is unreachable or the search was
        stopped from a callback.

    Raises:
        SearchBudgetExceeded: More than ``max_steps`` steps were needed.
    """
    search.start(on_step, on_complete)
    steps = 0
    for result in iter_steps(search):
        if result.done:
            return result.path
        steps += 1
        if max_steps is not None and steps >= max_steps:
            search.stop()
            raise SearchBudgetExceeded(
                f"{search.name} did not finish within {max_steps} steps"
            )
        if delay > 0:
            sleep(delay)
    return None


class StepScheduler:
    """Clock-paced stepping for hosts with their own update loop.

    One step becomes due every ``delay`` seconds. ``tick`` runs every due step
    (at least one per call when ``delay`` is 0) and returns their results.
    """

    def __init__(
        self,
        search: SearchAlgorithm,
        delay: float = DEFAULT_STEP_DELAY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.search = search
        self.delay = delay
        self._clock = clock
        self._next_due: Optional[float] = None
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def tick(self) -> List[StepResult]:
        if self._done:
            return []
        now = self._clock()
        if self._next_due is None:
            self._next_due = now
        results: List[StepResult] = []
        while not self._done:
            if self.delay > 0 and self._next_due > now:
                break
            result = self.search.step()
            results.append(result)
            self._done = result.done
            if self.delay == 0:
                break
            self._next_due += self.delay
        return results

    def cancel(self) -> None:
        self.search.stop()
        self._done = True
        logger.debug("Cancelled scheduled %s search", self.search.name)
