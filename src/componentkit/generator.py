"""Run one component generation from precondition check to written files."""

from __future__ import annotations

import logging
from enum import Enum

from .config import ProjectPaths
from .errors import ComponentKitError, UserCancellation
from .models import ComponentSpec
from .prompts import InputCollector
from .scaffold import ComponentScaffolder, MaterializeReport

__all__ = ["ComponentGenerator", "GeneratorState"]


LOGGER = logging.getLogger(__name__)


class GeneratorState(str, Enum):
    """Progress of a :class:`ComponentGenerator` run."""

    UNINITIALIZED = "uninitialized"
    ROOTS_VERIFIED = "roots_verified"
    INPUT_COLLECTED = "input_collected"
    CONFIRMED = "confirmed"
    MATERIALIZING = "materializing"
    DONE = "done"
    ABORTED = "aborted"


class ComponentGenerator:
    """Coordinate the input collector and the scaffolder for a single run.

    Every failure moves the generator to :attr:`GeneratorState.ABORTED` and
    re-raises; the caller decides how the process exits.
    """

    def __init__(
        self,
        paths: ProjectPaths,
        collector: InputCollector,
        scaffolder: ComponentScaffolder,
    ) -> None:
        self.paths = paths
        self.collector = collector
        self.scaffolder = scaffolder
        self.state = GeneratorState.UNINITIALIZED
        self.spec: ComponentSpec | None = None

    def _advance(self, state: GeneratorState) -> None:
        LOGGER.debug("generator state %s -> %s", self.state.value, state.value)
        self.state = state

    def run(self) -> MaterializeReport:
        try:
            self.paths.verify()
            self._advance(GeneratorState.ROOTS_VERIFIED)

            self.collector.welcome()
            self.spec = self.collector.collect()
            self._advance(GeneratorState.INPUT_COLLECTED)

            if not self.collector.confirm(self.spec):
                raise UserCancellation("Quitting: try again with the correct inputs.")
            self._advance(GeneratorState.CONFIRMED)

            self._advance(GeneratorState.MATERIALIZING)
            report = self.scaffolder.materialize(self.spec)
        except ComponentKitError:
            self._advance(GeneratorState.ABORTED)
            raise

        self._advance(GeneratorState.DONE)
        return report
