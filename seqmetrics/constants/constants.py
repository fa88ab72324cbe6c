# Nucleotide alphabet (standard bases plus IUPAC ambiguity codes)
STANDARD_BASES = "ATGC"
AMBIGUITY_CODES = "NRYKMSWBDHV"
VALID_NUCLEOTIDES = frozenset(STANDARD_BASES + AMBIGUITY_CODES)

# Transcription
DNA_THYMINE = "T"
RNA_URACIL = "U"

# Translation
CODON_LENGTH = 3
STOP_MARKER = "*"
UNKNOWN_RESIDUE = "X"

# Weights
EMPTY_WEIGHT = 0.0
WEIGHT_UNIT = "Da"

# Diagnostics
UNKNOWN_SEQUENCE_ID = "<unnamed>"
INVALID_SYMBOL_PREVIEW_LIMIT = 10
ALPHABET_ERROR_MESSAGE = "Invalid sequence format for sequence: {sequence_id}"
EMPTY_BATCH_MESSAGE = "Invalid sequences: no sequences were provided for analysis"
CANCELLED_MESSAGE = "Analysis cancelled before sequence {sequence_id} was analyzed"

# Input
DEFAULT_FASTA_FORMAT = "fasta"
FASTA_READ_FAILED_TEMPLATE = "Failed to read FASTA file {path}: {error}"

# Logging
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

PERCENTAGE_MULTIPLIER = 100
