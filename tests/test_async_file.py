import pytest

from globalcoin.async_file import (
    AsyncFileError,
    AsyncFileNotFoundError,
    append_to_file,
    file_exists,
    get_file_size,
    load_bytes_from_file,
    read_portion_of_file,
    save_bytes_to_file,
)


@pytest.mark.asyncio
async def test_save_and_load_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    await save_bytes_to_file(b"\x00\x01payload", target)
    assert await load_bytes_from_file(target) == b"\x00\x01payload"


@pytest.mark.asyncio
async def test_save_truncates(tmp_path):
    target = tmp_path / "data.bin"
    await save_bytes_to_file(b"long content here", target)
    await save_bytes_to_file(b"short", target)
    assert await load_bytes_from_file(target) == b"short"


@pytest.mark.asyncio
async def test_load_missing_file(tmp_path):
    with pytest.raises(AsyncFileNotFoundError, match="File not found"):
        await load_bytes_from_file(tmp_path / "missing.bin")


@pytest.mark.asyncio
async def test_save_into_missing_directory(tmp_path):
    with pytest.raises(AsyncFileError, match="File creation failed"):
        await save_bytes_to_file(b"x", tmp_path / "nope" / "file.bin")


@pytest.mark.asyncio
async def test_read_portion(tmp_path):
    target = tmp_path / "data.bin"
    await save_bytes_to_file(b"0123456789", target)
    assert await read_portion_of_file(target, 2, 6) == b"2345"
    assert await read_portion_of_file(target, 4, 4) == b""


@pytest.mark.asyncio
async def test_read_portion_past_end(tmp_path):
    target = tmp_path / "data.bin"
    await save_bytes_to_file(b"0123", target)
    with pytest.raises(AsyncFileError, match="portion"):
        await read_portion_of_file(target, 2, 10)


@pytest.mark.asyncio
async def test_read_portion_missing_file(tmp_path):
    with pytest.raises(AsyncFileError):
        await read_portion_of_file(tmp_path / "missing.bin", 0, 1)


@pytest.mark.asyncio
async def test_read_portion_reversed_range(tmp_path):
    target = tmp_path / "data.bin"
    await save_bytes_to_file(b"0123", target)
    with pytest.raises(ValueError):
        await read_portion_of_file(target, 3, 1)


@pytest.mark.asyncio
async def test_file_exists(tmp_path):
    target = tmp_path / "data.bin"
    assert await file_exists(target) is False
    await save_bytes_to_file(b"x", target)
    assert await file_exists(target) is True


@pytest.mark.asyncio
async def test_get_file_size(tmp_path):
    target = tmp_path / "data.bin"
    assert await get_file_size(target) == 0
    await save_bytes_to_file(b"abcde", target)
    assert await get_file_size(target) == 5


@pytest.mark.asyncio
async def test_append_with_size_prefix(tmp_path):
    target = tmp_path / "log.bin"
    await append_to_file(target, b"abc", True, True)
    assert await load_bytes_from_file(target) == b"\x03\x00\x00\x00abc"


@pytest.mark.asyncio
async def test_append_concatenates(tmp_path):
    target = tmp_path / "log.bin"
    await append_to_file(target, b"one", True, False)
    await append_to_file(target, b"two", False, False)
    assert await load_bytes_from_file(target) == b"onetwo"


@pytest.mark.asyncio
async def test_append_without_create_on_missing_file(tmp_path):
    target = tmp_path / "log.bin"
    with pytest.raises(AsyncFileError):
        await append_to_file(target, b"data", False, False)
    assert await file_exists(target) is False