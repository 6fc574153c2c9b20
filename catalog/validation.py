"""Structural validation of file records before upload."""

from catalog.domain import MAX_INTEGER, FileRecord, ValidityReport


def check_file_validity(record: FileRecord) -> ValidityReport:
    """
    Check a candidate record. Only the first failing check is reported.

    Args:
        record: Candidate file record

    Returns:
        ValidityReport with the reason of the first failed check, if any
    """
    if record.name is None or not record.name.strip():
        return ValidityReport(valid=False, reason="file name is missing")
    if record.size is None:
        return ValidityReport(valid=False, reason="file size is missing")
    if record.size < 0:
        return ValidityReport(valid=False, reason="file size is negative")
    if record.size > MAX_INTEGER:
        return ValidityReport(valid=False, reason="file size is too large")
    return ValidityReport(valid=True)
