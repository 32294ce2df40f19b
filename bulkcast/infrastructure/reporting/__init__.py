from .report_writer import ResultCollector, ReportWriter, WriteError, REPORT_COLUMNS

__all__ = ["ResultCollector", "ReportWriter", "WriteError", "REPORT_COLUMNS"]
