"""Concrete pipeline stages: parse -> extract -> evaluate.

Each stage is a thin wrapper over a pure service function; the wrapping
only adds stage-specific error annotation (see PipelineStage.run).
"""

from collections.abc import Mapping
from typing import Any

from resume_screener.exceptions import EvaluationError, ExtractionError, ParsingError
from resume_screener.models.responses import DetailedReport, ScreeningResult
from resume_screener.models.schemas.candidate_profile import CandidateProfile
from resume_screener.models.schemas.features import DetailedFeatures, ExtractedFeatures
from resume_screener.models.schemas.job_requirements import JobRequirements
from resume_screener.services import evaluator, feature_extractor, resume_parser
from resume_screener.services.pipeline.base import PipelineStage


class ParseStage(PipelineStage):
    stage_name = "parse"
    error_class = ParsingError
    failure_prefix = "Failed to parse resume: "

    def process(self, **kwargs: Any) -> CandidateProfile:
        return resume_parser.parse_resume(
            kwargs["resume_input"],
            scoped=kwargs.get("scoped"),
            current_year=kwargs.get("current_year"),
        )


class ExtractStage(PipelineStage):
    stage_name = "extract"
    error_class = ExtractionError
    failure_prefix = "Failed to extract features: "

    def process(self, **kwargs: Any) -> ExtractedFeatures | DetailedFeatures:
        profile: CandidateProfile = kwargs["profile"]
        if kwargs.get("detailed"):
            return feature_extractor.extract_detailed_features(
                profile, current_year=kwargs.get("current_year")
            )
        return feature_extractor.extract_features(profile)


def coerce_requirements(requirements: JobRequirements | Mapping) -> JobRequirements:
    """Accept a JobRequirements or a plain mapping shaped like one."""
    if isinstance(requirements, JobRequirements):
        return requirements
    if isinstance(requirements, Mapping):
        return JobRequirements.model_validate(requirements)
    raise TypeError(f"Unsupported requirements type: {type(requirements).__name__}")


class EvaluateStage(PipelineStage):
    stage_name = "evaluate"
    error_class = EvaluationError
    failure_prefix = "Failed to evaluate candidate: "

    def process(self, **kwargs: Any) -> ScreeningResult | DetailedReport:
        profile: CandidateProfile = kwargs["profile"]
        requirements = coerce_requirements(kwargs["requirements"])
        if kwargs.get("detailed"):
            return evaluator.build_detailed_report(
                profile, requirements, result=kwargs.get("result")
            )
        return evaluator.evaluate(profile, requirements)
