from pathlib import Path

import pytest

from src.platform.exception.exceptions import StorageUnavailableError
from src.platform.storage.flat_file import read_records, write_records


COLUMNS = ('id', 'name')


@pytest.mark.integration
class TestFlatFile:
    @pytest.mark.asyncio
    async def test_write_then_read(self, tmp_path: Path):
        path = tmp_path / 'nested' / 'ledger.txt'

        await write_records(path, columns=COLUMNS, rows=[['0', 'a'], ['1', 'b']])

        assert path.read_text() == 'id|name\n0|a\n1|b\n'
        assert await read_records(path, columns=COLUMNS) == [(2, ['0', 'a']), (3, ['1', 'b'])]

    @pytest.mark.asyncio
    async def test_no_temp_files_left(self, tmp_path: Path):
        path = tmp_path / 'ledger.txt'

        await write_records(path, columns=COLUMNS, rows=[['0', 'a']])
        await write_records(path, columns=COLUMNS, rows=[['0', 'b']])

        assert [p.name for p in tmp_path.iterdir()] == ['ledger.txt']

    @pytest.mark.asyncio
    async def test_wrong_field_count_points_at_line(self, tmp_path: Path):
        path = tmp_path / 'ledger.txt'
        path.write_text('id|name\n0|a\n1|b|extra\n')

        with pytest.raises(StorageUnavailableError, match=':3:'):
            await read_records(path, columns=COLUMNS)

    @pytest.mark.asyncio
    async def test_unwritable_target_keeps_previous_file(self, tmp_path: Path):
        path = tmp_path / 'ledger.txt'
        await write_records(path, columns=COLUMNS, rows=[['0', 'a']])
        blocker = tmp_path / 'blocked'
        blocker.write_text('not a directory')

        with pytest.raises(StorageUnavailableError):
            await write_records(blocker / 'ledger.txt', columns=COLUMNS, rows=[['0', 'b']])

        assert path.read_text() == 'id|name\n0|a\n'
