import pytest

from globalcoin.storage_directory import (
    StorageDirectory,
    StorageDirectoryError,
    StorageFileNotFoundError,
)


@pytest.mark.asyncio
async def test_create_makes_missing_directories(tmp_path):
    target = tmp_path / "a" / "b"
    storage = await StorageDirectory.create(target, "block")
    assert target.is_dir()
    assert storage.path == target
    assert storage.category == "block"


@pytest.mark.asyncio
async def test_init_on_empty_directory_starts_at_zero(tmp_path):
    storage = await StorageDirectory.create(tmp_path, "block")
    await storage.init()
    assert storage.last_index == 0


@pytest.mark.asyncio
async def test_last_index_before_init_raises(tmp_path):
    storage = await StorageDirectory.create(tmp_path, "block")
    with pytest.raises(StorageDirectoryError):
        storage.last_index
    with pytest.raises(StorageDirectoryError):
        await storage.add_chunk(b"data")


@pytest.mark.asyncio
async def test_init_finds_highest_matching_index(tmp_path):
    for name in ("block3", "block10", "blockx", "other50", "block"):
        (tmp_path / name).write_bytes(b"")
    storage = await StorageDirectory.create(tmp_path, "block")
    await storage.init()
    assert storage.last_index == 10


@pytest.mark.asyncio
async def test_add_chunk_writes_consecutive_files(tmp_path):
    storage = await StorageDirectory.create(tmp_path, "chunk")
    await storage.init()
    await storage.add_chunk(b"first")
    await storage.add_chunk(b"second")
    assert storage.last_index == 2
    assert (tmp_path / "chunk1").read_bytes() == b"first"
    assert await storage.get_chunk(2) == b"second"
    assert await storage.load_bytes_from_file_with_index(1) == b"first"
    assert await storage.load_bytes_from_last_file() == b"second"


@pytest.mark.asyncio
async def test_add_chunk_continues_after_existing(tmp_path):
    (tmp_path / "chunk4").write_bytes(b"old")
    storage = await StorageDirectory.create(tmp_path, "chunk")
    await storage.init()
    await storage.add_chunk(b"new")
    assert storage.last_index == 5
    assert (tmp_path / "chunk5").read_bytes() == b"new"


@pytest.mark.asyncio
async def test_save_and_load_round_trip(tmp_path):
    storage = await StorageDirectory.create(tmp_path, "x")
    await storage.save_bytes_to_file("payload.bin", b"\x00\x01\xff")
    assert await storage.load_bytes_from_file("payload.bin") == b"\x00\x01\xff"
    assert await storage.file_exists("payload.bin") is True
    assert await storage.file_exists("missing.bin") is False


@pytest.mark.asyncio
async def test_load_missing_file_raises(tmp_path):
    storage = await StorageDirectory.create(tmp_path, "block")
    with pytest.raises(StorageFileNotFoundError) as info:
        await storage.get_chunk(7)
    assert info.value.path.endswith("block7")
    assert isinstance(info.value, StorageDirectoryError)


@pytest.mark.asyncio
async def test_list_files_skips_directories(tmp_path):
    (tmp_path / "one").write_bytes(b"1")
    (tmp_path / "two").write_bytes(b"2")
    (tmp_path / "sub").mkdir()
    storage = await StorageDirectory.create(tmp_path, "block")
    names = sorted(p.name for p in await storage.list_files())
    assert names == ["one", "two"]