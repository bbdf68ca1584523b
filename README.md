# globalcoin

Building blocks for a small coin wallet: hashes, Merkle roots, compact
difficulty targets, a binary buffer format, secp256k1 key derivation,
seed phrases, password hashing and encryption, and simple on-disk storage.

## Modules

- `globalcoin.hashing` – `Hash`, an immutable 32-byte value. `Hash.compute(data)`
  gives the SHA3-256 digest, `Hash.from_bytes(data)` wraps exactly 32 bytes
  (anything else raises `HashError`), `Hash.empty()` is all zeroes and
  `Hash.hex()` gives the lower-case hex form.
- `globalcoin.merkle` – `compute_root(hashes)` returns the Merkle root, each
  branch being the SHA3-256 of the two child hashes concatenated. An odd node
  at any level is paired with itself; an empty list gives `Hash.empty()`.
- `globalcoin.bigint` – `int_from_hash` (hash bytes read as a little-endian
  integer), `compact_from_int` / `int_from_compact` for the compact
  8-bit-exponent, 23-bit-coefficient target form, and `squashed_to_float`,
  which divides by 10**300 and returns the quotient as a float. When the top
  bit of the three-byte coefficient is set, `compact_from_int` shifts the
  coefficient right by one byte and keeps the exponent unchanged.
- `globalcoin.buffer` – `BufferWriter` and `BufferReader` for little-endian
  `u8`/`u16`/`u32`/`u64`, variable-length integers (one byte below 253,
  otherwise a 253/254/255 marker followed by a `u16`/`u32`/`u64`), raw bytes,
  length-prefixed bytes and hashes. Reading past the end raises
  `EndOfBufferError`; `read_var_u32` raises `ValueExceedsU32Error` on a
  64-bit marker. Both derive from `BufferReaderError`.
- `globalcoin.timeutil` – `timestamp_now()` and
  `format_timestamp_to_gmt_string(timestamp)` (RFC 2822, UTC).
- `globalcoin.directory` – `does_directory_exist`, `create_directory`,
  `remove_directory` and `remove_directory_all`.
- `globalcoin.randomness` – `generate_secure_random_number(minimum, maximum)`
  and `generate_random_number(minimum, maximum)`, uniform integers in an
  inclusive range from the operating system's secure source. Bad ranges
  raise `RandomNumberError`.
- `globalcoin.key_derivation` – `derive_master_extended_secret_key(seed)`
  (PBKDF2-HMAC-SHA512 over the seed phrase, then HMAC-SHA512), and
  `derive_child_extended_secret_key(parent, index, hardened)` and
  `derive_child_public_key(parent_pubkey, chain_code, index)` on secp256k1.
  `ExtendedSecretKey.public_key()` gives the 33-byte compressed public key.
  Hardened derivation needs `index >= HARDENED_OFFSET` (0x80000000); public
  derivation refuses hardened indexes. Failures raise `KeyDerivationError`.
- `globalcoin.encryption` – `hash_password(password)` returns a 32-byte
  Argon2id hash with a fresh random salt (so two calls give different
  results); `ask_user_for_password()` prompts on standard input until at
  least 32 characters are entered and returns their hash.
  `encrypt(cleartext, key)` returns a 12-byte nonce followed by the
  ChaCha20-Poly1305 ciphertext, and `decrypt(ciphertext, key)` reverses it.
  Keys must be 32 bytes. Failures raise `EncryptionError`.
- `globalcoin.async_file` – coroutines `save_bytes_to_file`,
  `load_bytes_from_file`, `read_portion_of_file`, `file_exists`,
  `get_file_size` (0 when the file cannot be read) and `append_to_file`,
  which can create the file and prefix the data with its length as a
  little-endian `u32`. Errors raise `AsyncFileError`, and a missing file on
  load raises `AsyncFileNotFoundError`.
- `globalcoin.statedb` – `StateDb(path)`, a persistent bytes-to-bytes store
  kept in an SQLite file inside the directory `path`, with `insert`, `get`
  (returns `None` for a missing key), `remove`, `flush` and `close`. It can
  be used as a context manager.
- `globalcoin.storage_directory` – `StorageDirectory`, chunk files named
  `<category><index>` in one directory. Create one with
  `await StorageDirectory.create(path, category)`, then `await init()` to
  find the highest index already stored (0 if none). `add_chunk` writes the
  next index; `get_chunk`, `load_bytes_from_file_with_index` and
  `load_bytes_from_last_file` read chunks back. Using `last_index` before
  `init` raises `StorageDirectoryError`; a missing file raises
  `StorageFileNotFoundError`.
- `globalcoin.wordlist` – `WORDLIST`, the words used in seed phrases.
- `globalcoin.seed` – `generate_seed()` returns 24 random words from
  `WORDLIST` followed by a checksum word (the word whose index is the last
  byte of the SHA3-256 of the first 24 words); `check_seed(seed)` verifies
  that checksum. `generate_random_numbers(count, minimum, maximum)` raises
  `GenerateRandomNumbersError` when it cannot produce them.
- `globalcoin.resource` – `Resource`, an output owned by the wallet
  (transaction hash, output index, value, key index, availability and a
  `ResourceStatus` of `UNSPENT` or `SPENT`), with `mark_spent()` and
  `is_unspent()`. `new_unspent_resource(hash_, index, value, key_index)`
  builds an available, unspent one.
- `globalcoin.wallet_settings` – `WalletSettings` (`channel_size`, default
  128), with `default()`, `to_dict`/`from_dict` and `to_json`/`from_json`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Hashing and Merkle roots:

```python
from globalcoin.hashing import Hash
from globalcoin.merkle import compute_root

leaves = [Hash.compute(b"a"), Hash.compute(b"b"), Hash.compute(b"c")]
root = compute_root(leaves)
print(root.hex())
```

Writing and reading a buffer:

```python
from globalcoin.buffer import BufferReader, BufferWriter

writer = BufferWriter()
writer.write_var_u64(300)
writer.write_var_bytes(b"payload")
reader = BufferReader(writer.getvalue())
assert reader.read_var_u64() == 300
assert reader.read_var_bytes() == b"payload"
```

Seed phrases and key derivation:

```python
from globalcoin.seed import generate_seed, check_seed
from globalcoin.key_derivation import (
    HARDENED_OFFSET,
    derive_master_extended_secret_key,
    derive_child_extended_secret_key,
)

seed = generate_seed()
assert check_seed(seed)
master = derive_master_extended_secret_key(seed)
child = derive_child_extended_secret_key(master, HARDENED_OFFSET, True)
print(child.public_key().hex())
```

Encryption:

```python
import os
from globalcoin.encryption import encrypt, decrypt

key = os.urandom(32)
sealed = encrypt("hello", key)
assert decrypt(sealed, key) == "hello"
```

Chunk storage:

```python
import asyncio
from globalcoin.storage_directory import StorageDirectory

async def run():
    store = await StorageDirectory.create("chunks", "block")
    await store.init()
    await store.add_chunk(b"first chunk")
    print(await store.load_bytes_from_last_file())

asyncio.run(run())
```

## What this package does not do

It is a library of parts, not a running wallet. There is no command-line
program or user interface, no background wallet process that holds keys and
answers requests, no building or signing of transactions, no address
management beyond deriving keys, and no network node: nothing here talks to
other machines or keeps a chain in sync. `Resource` records what the wallet
owns but there is no code that selects resources to spend.