import logging
from typing import Optional, Sequence

from . import report_templates as templates
from .analysis_pipeline import AnalysisPipeline
from ..constants.constants import *
from ..models.sequence_models import AnalysisOutcome, AnalysisResult, Diagnostic
from ..settings import settings

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Render pipeline outcomes as the plain-text, line-per-field report."""

    def __init__(self, decimal_places: Optional[int] = None):
        self.decimal_places = (
            settings.weight_decimal_places if decimal_places is None else decimal_places
        )

    def generate_report(self, outcomes: Sequence[AnalysisOutcome], include_summary: bool = True) -> str:
        report_parts = [self.format_outcome(outcome) for outcome in outcomes]

        if include_summary:
            report_parts.append(self._format_summary(outcomes))

        return "\n\n".join(report_parts)

    def format_outcome(self, outcome: AnalysisOutcome) -> str:
        if isinstance(outcome, AnalysisResult):
            return self._format_result(outcome)
        return self._format_diagnostic(outcome)

    def _format_result(self, result: AnalysisResult) -> str:
        return "\n".join(
            [
                templates.PROCESSING_SEQUENCE_TEMPLATE.format(sequence_id=result.sequence_id),
                templates.SEQUENCE_TEMPLATE.format(sequence=result.dna),
                templates.PROTEIN_SEQUENCE_TEMPLATE.format(protein=result.protein),
                templates.MOLECULAR_WEIGHT_TEMPLATE.format(
                    weight=result.molecular_weight, places=self.decimal_places, unit=WEIGHT_UNIT
                ),
                templates.PALINDROME_DETECTED
                if result.is_palindrome
                else templates.NO_PALINDROME_DETECTED,
            ]
        )

    def _format_diagnostic(self, diagnostic: Diagnostic) -> str:
        lines = []
        if diagnostic.sequence_id is not None:
            lines.append(
                templates.PROCESSING_SEQUENCE_TEMPLATE.format(sequence_id=diagnostic.sequence_id)
            )
        lines.append(templates.ERROR_TEMPLATE.format(message=diagnostic.message))
        if diagnostic.details:
            lines.append(templates.ERROR_DETAILS_TEMPLATE.format(details=diagnostic.details))
        return "\n".join(lines)

    def _format_summary(self, outcomes: Sequence[AnalysisOutcome]) -> str:
        summary = AnalysisPipeline.summarize(outcomes)
        return "\n".join(
            [
                templates.BATCH_SUMMARY_HEADER,
                templates.BATCH_SUMMARY_TEMPLATE.format(
                    analyzed=summary.analyzed,
                    failed=summary.failed,
                    skipped=summary.skipped,
                    palindromes=summary.palindromes,
                    total_weight=summary.total_weight,
                    places=self.decimal_places,
                    unit=WEIGHT_UNIT,
                    success_rate=summary.success_rate,
                ),
            ]
        )
