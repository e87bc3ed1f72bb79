"""
Flat-file ledger I/O

Each ledger is a text file: one header line, then one pipe-delimited record
per line. Saves replace the whole file atomically (temp file + fsync +
os.replace), so a reader never sees a half-written ledger.
"""

import os
from pathlib import Path
import tempfile
from typing import Callable, List, Sequence, Tuple, TypeVar

import anyio.to_thread

from src.platform.exception.exceptions import DomainError, StorageUnavailableError
from src.platform.logging.loguru_io import Logger


FIELD_SEPARATOR = '|'

# (line number, fields) so load errors can point at the offending line
Record = Tuple[int, List[str]]
T = TypeVar('T')


def _read_file(path: Path) -> str:
    return path.read_text(encoding='utf-8')


def header_line(columns: Sequence[str]) -> str:
    return FIELD_SEPARATOR.join(columns)


async def read_records(path: Path, *, columns: Sequence[str]) -> List[Record]:
    """
    Read all records of a ledger file, skipping the header and blank lines

    A missing file is an empty ledger.

    Raises:
        StorageUnavailableError: File unreadable or a record has the wrong field count
    """
    try:
        content = await anyio.to_thread.run_sync(_read_file, path)
    except FileNotFoundError:
        Logger.base.info(f'📂 [LEDGER] {path} not found, starting empty')
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise StorageUnavailableError(f'Cannot read {path}: {e}') from e

    # Records end at "\n" only; str.splitlines also breaks on \x0b, \x85 and \u2028
    records: List[Record] = []
    for line_no, raw_line in enumerate(content.split('\n'), start=1):
        line = raw_line.removesuffix('\r')
        if line_no == 1 or not line.strip():
            continue
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != len(columns):
            raise StorageUnavailableError(
                f'{path}:{line_no}: expected {len(columns)} fields, got {len(fields)}'
            )
        records.append((line_no, fields))
    return records


def _replace_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f'.{path.name}.', dir=path.parent)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


async def write_records(
    path: Path, *, columns: Sequence[str], rows: Sequence[Sequence[str]]
) -> None:
    """
    Replace the ledger file with the header plus rows

    Raises:
        StorageUnavailableError: File unwritable; the previous file is left as it was
    """
    lines = [header_line(columns), *(FIELD_SEPARATOR.join(row) for row in rows)]
    content = '\n'.join(lines) + '\n'
    try:
        await anyio.to_thread.run_sync(_replace_file, path, content)
    except OSError as e:
        raise StorageUnavailableError(f'Cannot write {path}: {e}') from e
    Logger.base.debug(f'💾 [LEDGER] Saved {len(rows)} records to {path}')


def decode_records(
    path: Path, records: Sequence[Record], decode: Callable[[List[str]], T]
) -> List[T]:
    """
    Decode records into entities

    Raises:
        StorageUnavailableError: A record has a non-numeric number or breaks an entity rule
    """
    decoded: List[T] = []
    for line_no, fields in records:
        try:
            decoded.append(decode(fields))
        except (ValueError, DomainError) as e:
            raise StorageUnavailableError(f'{path}:{line_no}: malformed record ({e})') from e
    return decoded
