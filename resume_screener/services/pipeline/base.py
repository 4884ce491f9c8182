"""Abstract base class for all screening pipeline stages."""

from abc import ABC, abstractmethod
from typing import Any
import logging

from resume_screener.exceptions import ScreeningError

logger = logging.getLogger(__name__)


class PipelineStage(ABC):
    """Base class for one step of the screening pipeline.

    Subclasses must implement:
        - stage_name: identifier used in logs
        - error_class: ScreeningError subclass this stage raises
        - failure_prefix: prepended to the message of wrapped errors
        - process(**kwargs): do the work and return a typed schema

    Stages hold no per-call state, so one instance may serve concurrent calls.
    """

    stage_name: str = ""
    error_class: type[ScreeningError] = ScreeningError
    failure_prefix: str = ""

    @abstractmethod
    def process(self, **kwargs: Any) -> Any:
        """Run the stage. Returns a Pydantic schema defined per stage."""

    def run(self, **kwargs: Any) -> Any:
        """Run the stage, annotating any failure with this stage's error class.

        Every escaping error becomes an instance of error_class whose message
        starts with failure_prefix, e.g. "Failed to parse resume: ...".
        """
        try:
            return self.process(**kwargs)
        except Exception as exc:
            if isinstance(exc, self.error_class) and exc.message.startswith(self.failure_prefix):
                raise
            if isinstance(exc, ScreeningError):
                reason, details = exc.message, exc.details
            else:
                reason, details = str(exc), None
            message = f"{self.failure_prefix}{reason}"
            logger.debug("Stage %s failed: %s", self.stage_name, message)
            raise self.error_class(message, details=details, cause=exc) from exc
