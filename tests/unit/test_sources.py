import pytest

from numstats.errors import ResourceUnavailable
from numstats.services.sources import (
    FileNumberSource,
    InMemoryNumberSource,
    NumberSource,
    RecordingNumberSource,
)

@pytest.mark.asyncio
async def test_file_source_parses_lines(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1\nabc\n3\n")
    assert await FileNumberSource(path).produce() == [1, 3]

@pytest.mark.asyncio
async def test_file_source_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert await FileNumberSource(str(path)).produce() == []

@pytest.mark.asyncio
async def test_file_source_rereads_on_every_call(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1\n2\n")
    source = FileNumberSource(path)
    assert await source.produce() == [1, 2]
    path.write_text("9\n")
    assert await source.produce() == [9]

@pytest.mark.asyncio
async def test_file_source_missing_file(tmp_path):
    path = tmp_path / "nope.txt"
    with pytest.raises(ResourceUnavailable) as excinfo:
        await FileNumberSource(path).produce()
    assert excinfo.value.resource == str(path)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert isinstance(excinfo.value, OSError)

@pytest.mark.asyncio
async def test_file_source_directory_is_unavailable(tmp_path):
    with pytest.raises(ResourceUnavailable):
        await FileNumberSource(tmp_path).produce()

@pytest.mark.asyncio
async def test_file_source_undecodable_bytes(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1\n\xff\xfe\n")
    with pytest.raises(ResourceUnavailable):
        await FileNumberSource(path).produce()

@pytest.mark.asyncio
async def test_file_source_custom_encoding(tmp_path):
    path = tmp_path / "utf16.txt"
    path.write_text("4\n5\n", encoding="utf-16")
    assert await FileNumberSource(path, encoding="utf-16").produce() == [4, 5]

@pytest.mark.asyncio
async def test_in_memory_source_returns_copies():
    source = InMemoryNumberSource([3, 1, 2])
    first = await source.produce()
    first.append(99)
    assert await source.produce() == [3, 1, 2]

@pytest.mark.asyncio
async def test_in_memory_source_replace():
    source = InMemoryNumberSource()
    assert await source.produce() == []
    source.replace([7, 7])
    assert await source.produce() == [7, 7]

@pytest.mark.asyncio
async def test_recording_source_counts_failed_calls(tmp_path):
    spy = RecordingNumberSource(FileNumberSource(tmp_path / "missing.txt"))
    with pytest.raises(ResourceUnavailable):
        await spy.produce()
    assert spy.call_count == 1
    assert spy.returns == []

@pytest.mark.asyncio
async def test_recording_source_records_each_return():
    inner = InMemoryNumberSource([1])
    spy = RecordingNumberSource(inner)
    await spy.produce()
    inner.replace([2, 3])
    await spy.produce()
    assert spy.call_count == 2
    assert spy.returns == [[1], [2, 3]]

def test_sources_satisfy_protocol(tmp_path):
    assert isinstance(FileNumberSource(tmp_path / "x"), NumberSource)
    assert isinstance(InMemoryNumberSource(), NumberSource)
    assert isinstance(RecordingNumberSource(InMemoryNumberSource()), NumberSource)
    assert not isinstance(object(), NumberSource)
