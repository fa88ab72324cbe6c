import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Mapping, Optional

from ..constants.constants import *
from ..settings import settings
from ..models.sequence_models import (
    AnalysisOutcome,
    AnalysisResult,
    BatchSummary,
    Diagnostic,
    DiagnosticType,
    NucleotideSequence,
)
from ..tools.bio.alphabet import AlphabetError, describe_invalid_symbols
from ..tools.bio.palindrome import is_palindrome
from ..tools.bio.residue_weights import total_weight
from ..tools.bio.transcription import transcribe_sequence
from ..tools.bio.translation import translate

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Validate, transcribe, translate, weigh and palindrome-check a batch of sequences.

    Each sequence is analyzed independently: a sequence that fails validation
    produces a ``Diagnostic`` and the rest of the batch carries on. Outcomes
    are returned in input order, whether or not the batch runs on a thread
    pool.
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.max_workers = max_workers or settings.max_workers
        self.cancel_event = cancel_event

    def analyze(self, sequences: Optional[Mapping[str, str]]) -> list[AnalysisOutcome]:
        if not sequences:
            logger.error("No sequences provided for analysis")
            return [Diagnostic(error_type=DiagnosticType.EMPTY_BATCH, message=EMPTY_BATCH_MESSAGE)]

        items = list(sequences.items())
        logger.info(f"Analyzing {len(items)} sequence(s)")

        if self.max_workers > 1 and self.cancel_event is None:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outcomes = list(executor.map(lambda item: self.analyze_sequence(*item), items))
        else:
            outcomes = self._analyze_sequentially(items)

        summary = self.summarize(outcomes)
        logger.info(
            f"Analysis finished: {summary.analyzed} analyzed, {summary.failed} failed "
            f"and {summary.skipped} skipped "
            f"({summary.success_rate} success)"
        )
        return outcomes

    def _analyze_sequentially(self, items: list[tuple[str, str]]) -> list[AnalysisOutcome]:
        outcomes: list[AnalysisOutcome] = []
        for index, (sequence_id, raw_sequence) in enumerate(items):
            if self.cancel_event is not None and self.cancel_event.is_set():
                logger.warning(f"Analysis cancelled with {len(items) - index} sequence(s) remaining")
                outcomes.extend(
                    Diagnostic(
                        error_type=DiagnosticType.CANCELLED,
                        message=CANCELLED_MESSAGE.format(sequence_id=skipped_id),
                        sequence_id=skipped_id,
                    )
                    for skipped_id, _ in items[index:]
                )
                break
            outcomes.append(self.analyze_sequence(sequence_id, raw_sequence))
        return outcomes

    def analyze_sequence(self, sequence_id: str, raw_sequence: str) -> AnalysisOutcome:
        try:
            dna = NucleotideSequence(sequence_id=sequence_id, sequence=raw_sequence)
        except AlphabetError as e:
            details = describe_invalid_symbols(e.invalid_symbols)
            logger.warning(f"Sequence {sequence_id} failed alphabet validation: {details}")
            return Diagnostic(
                error_type=DiagnosticType.ALPHABET_ERROR,
                message=ALPHABET_ERROR_MESSAGE.format(sequence_id=sequence_id),
                sequence_id=sequence_id,
                details=f"Invalid symbol(s): {details}",
            )

        rna = transcribe_sequence(dna)
        protein = translate(rna)
        weight = total_weight(protein)
        palindrome = is_palindrome(dna.sequence)

        logger.debug(
            f"{sequence_id}: {len(dna)} bp -> {len(protein)} residues, "
            f"{weight:.2f} {WEIGHT_UNIT}, palindrome={palindrome}"
        )
        return AnalysisResult(
            sequence_id=sequence_id,
            dna=dna.sequence,
            rna=rna.sequence,
            protein=protein.residues,
            molecular_weight=weight,
            is_palindrome=palindrome,
        )

    @staticmethod
    def summarize(outcomes: Iterable[AnalysisOutcome]) -> BatchSummary:
        summary = BatchSummary()
        for outcome in outcomes:
            if isinstance(outcome, AnalysisResult):
                summary.analyzed += 1
                summary.total_weight += outcome.molecular_weight
                if outcome.is_palindrome:
                    summary.palindromes += 1
            elif outcome.error_type == DiagnosticType.ALPHABET_ERROR:
                summary.failed += 1
            elif outcome.error_type == DiagnosticType.CANCELLED:
                summary.skipped += 1
        return summary
