ANALYZING_MESSAGE = "Analyzing sequences..."
SELECTED_FILE_TEMPLATE = "Selected file: {path}"

PROCESSING_SEQUENCE_TEMPLATE = "Processing sequence: {sequence_id}"
SEQUENCE_TEMPLATE = "Sequence: {sequence}"
PROTEIN_SEQUENCE_TEMPLATE = "Protein Sequence: {protein}"
MOLECULAR_WEIGHT_TEMPLATE = "Molecular Weight: {weight:.{places}f} {unit}"
PALINDROME_DETECTED = "Palindrome detected."
NO_PALINDROME_DETECTED = "No palindrome detected."

ERROR_TEMPLATE = "Error: {message}"
ERROR_DETAILS_TEMPLATE = "  {details}"

# Batch summary
BATCH_SUMMARY_HEADER = "Summary"
BATCH_SUMMARY_TEMPLATE = """  Analyzed: {analyzed}
  Failed: {failed}
  Skipped: {skipped}
  Palindromes: {palindromes}
  Total weight: {total_weight:.{places}f} {unit}
  Success rate: {success_rate}"""
