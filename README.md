# galoisaead

AES in Galois/Counter Mode (GCM): authenticated encryption with associated
data. The AES block cipher comes from `cryptography`. The GHASH universal
hash, the counter handling and the tag computation are part of this package.
Nonces of any positive length are accepted. The standard size is 96 bits,
and that is the size to use.

## Installation

```
pip install galoisaead
```

## Usage

```python
from galoisaead.gcm import Aes256Gcm, AeadError

key = bytes(32)              # use a random 32-byte key in practice
cipher = Aes256Gcm(key)

nonce = b"unique nonce"      # 12 bytes, never reuse with the same key
sealed = cipher.encrypt(nonce, b"plaintext message", b"header")
assert cipher.decrypt(nonce, sealed, b"header") == b"plaintext message"

try:
    cipher.decrypt(nonce, sealed, b"other header")
except AeadError:
    print("authentication failed")
```

`encrypt` returns the ciphertext with the 16-byte tag appended. `decrypt`
expects input in that same layout. To keep the tag separate, use the detached
forms:

```python
ciphertext, tag = cipher.encrypt_detached(nonce, b"data", b"")
plaintext = cipher.decrypt_detached(nonce, ciphertext, tag, b"")
```

The associated data defaults to empty in all four methods.

### Classes

- `AesGcm(key, nonce_size=12)` accepts a 16-, 24- or 32-byte key and any
  positive nonce size in bytes.
- `Aes128Gcm(key)` takes a 16-byte key and a 12-byte nonce.
- `Aes256Gcm(key)` takes a 32-byte key and a 12-byte nonce.

### Errors

`AeadError` is raised when any of the following happens:

- the plaintext or the associated data is longer than 2**36 bytes;
- the ciphertext is longer than 2**36 + 16 bytes;
- the ciphertext passed to `decrypt` is shorter than the tag;
- the tag does not match.

`ValueError` is raised for a key of the wrong length or a nonce of the wrong
length.

### GHASH

`galoisaead.ghash.GHash` gives access to the hash on its own:

- construct it with a 16-byte key;
- feed it with `update`, which takes whole 16-byte blocks and raises
  `ValueError` otherwise;
- or feed it with `update_padded`, which zero-pads the final partial block;
- take a `copy` to branch the state;
- call `finalize` to get the 16-byte result.

## What it does not do

This is a library only. It has no command-line tool. It does not generate
keys or nonces, and it does not keep track of which nonces have been used.

## Security notes

The GHASH field arithmetic is plain Python and does not run in constant time.
Tag verification uses a constant-time comparison (`hmac.compare_digest`).

## Running the tests

```
pip install -e ".[test]"
pytest
```