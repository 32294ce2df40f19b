from .csv_parser import RecipientCsvParser, ReadError, parse_recipients, count_rows

__all__ = ["RecipientCsvParser", "ReadError", "parse_recipients", "count_rows"]
