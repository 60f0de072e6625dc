"""CSV reader for contact bulk imports."""

import csv
import io
import logging
import re

from contact_manager.application.converters import parse_bool, parse_date, parse_decimal
from contact_manager.application.interfaces import ContactFileReader
from contact_manager.application.schemas.contact import ContactDto
from contact_manager.domain.exceptions import CsvParseError

logger = logging.getLogger(__name__)

# Normalised header → ContactDto field
_COLUMNS: dict[str, str] = {
    "name": "name",
    "birthdate": "birth_date",
    "ismarried": "is_married",
    "phonenumber": "phone_number",
    "salary": "salary",
}

# Header aliases for flexibility
HEADER_ALIASES: dict[str, str] = {
    "fullname": "name",
    "dateofbirth": "birthdate",
    "dob": "birthdate",
    "married": "ismarried",
    "phone": "phonenumber",
    "telephone": "phonenumber",
}

# Columns that are recognised but never read
_IGNORED_COLUMNS = frozenset({"id"})


def normalize_header(header: str) -> str:
    """Normalise a CSV header: ``Birth Date``, ``birth_date`` and ``BirthDate`` → ``birthdate``."""
    h = re.sub(r"[\s_\-]+", "", header.strip().lower())
    return HEADER_ALIASES.get(h, h)


class ContactCsvReader(ContactFileReader):
    """Parses comma-separated contact files with a header row.

    The whole file is parsed before anything is returned, so a structural
    fault anywhere (bad encoding, missing column, wrong field count, a value
    that is not a date/boolean/decimal) surfaces as a single CsvParseError.
    Empty birth date or salary cells are read as missing values and left for
    the validator to report.
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8-sig"):
        self.delimiter = delimiter
        self.encoding = encoding

    def read(self, content: bytes) -> list[ContactDto]:
        try:
            text = content.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise CsvParseError(f"File encoding error: {e}") from e

        reader = csv.reader(io.StringIO(text, newline=""), delimiter=self.delimiter, strict=True)
        try:
            header = next(reader, None)
            if header is None or not any(cell.strip() for cell in header):
                raise CsvParseError("Missing header row")
            positions = self._map_header(header)

            records: list[ContactDto] = []
            for row in reader:
                if not any(cell.strip() for cell in row):
                    continue
                if len(row) != len(header):
                    raise CsvParseError(
                        f"Expected {len(header)} fields but found {len(row)}",
                        line_number=reader.line_num,
                    )
                records.append(self._to_dto(row, positions, reader.line_num))
        except csv.Error as e:
            raise CsvParseError(f"Malformed CSV: {e}", line_number=reader.line_num) from e

        logger.debug("Parsed %d contact rows", len(records))
        return records

    def _map_header(self, header: list[str]) -> dict[str, int]:
        """Return ContactDto field → column index."""
        positions: dict[str, int] = {}
        for index, raw in enumerate(header):
            key = normalize_header(raw)
            if key in _IGNORED_COLUMNS:
                continue
            field = _COLUMNS.get(key)
            if field is None:
                logger.debug("Ignoring unknown CSV column '%s'", raw)
                continue
            if field in positions:
                raise CsvParseError(f"Duplicate column '{raw}'", line_number=1)
            positions[field] = index

        missing = [f for f in _COLUMNS.values() if f not in positions]
        if missing:
            raise CsvParseError(
                f"Missing required column(s): {', '.join(missing)}", line_number=1
            )
        return positions

    def _to_dto(self, row: list[str], positions: dict[str, int], line_number: int) -> ContactDto:
        values = {field: row[index].strip() for field, index in positions.items()}
        try:
            return ContactDto(
                name=values["name"],
                birth_date=parse_date(values["birth_date"]) if values["birth_date"] else None,
                is_married=parse_bool(values["is_married"]) if values["is_married"] else False,
                phone_number=values["phone_number"],
                salary=parse_decimal(values["salary"]) if values["salary"] else None,
            )
        except ValueError as e:
            raise CsvParseError(str(e), line_number=line_number) from e
