# zkprims

Building blocks for multi-party cryptographic protocols over the prime-order
ristretto255 group, in pure Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `zkprims.ristretto` | `Scalar` and `Point` arithmetic, `group_order()` |
| `zkprims.hashing` | `HashChain` (hashing of integers, points and scalars, with `result_scalar()` for Fiat–Shamir challenges), `HmacChain`, `digest_bigint`, `bigint_to_bytes`, `bigint_from_bytes` |
| `zkprims.commitments` | `HashCommitment` and `PedersenCommitment` |
| `zkprims.merkle` | `MerkleTree256` over group points and `MerkleProof` |
| `zkprims.dlog` | Schnorr proof of knowledge of a discrete log (`DLogProof`) |
| `zkprims.ec_ddh` | Chaum–Pedersen DDH membership proof (`ECDDHProof`, `ECDDHStatement`, `ECDDHWitness`) |
| `zkprims.pedersen_proofs` | `PedersenProof`, `PedersenBlindingProof` |
| `zkprims.elgamal_proofs` | `HomoElGamalProof` and `HomoElGamalDlogProof` with their statements and witnesses |
| `zkprims.ldei` | Low-degree exponent interpolation (`LdeiStatement`, `LdeiProof`, `InvalidLdeiStatement`) |
| `zkprims.polynomial` | `Polynomial` over the scalar field, Lagrange basis, `INFINITY` degree |
| `zkprims.feldman_vss` | Feldman verifiable secret sharing (`VerifiableSS`, `SecretShares`, `ShamirSecretSharing`) |
| `zkprims.coin_flip` | Two-party constant-round coin tossing |
| `zkprims.dh_key_exchange` | Plain elliptic-curve Diffie–Hellman |
| `zkprims.dh_pok` | Diffie–Hellman with committed proofs of knowledge |
| `zkprims.errors` | `ProofError`, `VerifyShareError`, `DeserializationError`, `NotOnCurve`, `MacError` |

Verification methods return nothing on success and raise on failure:
proofs raise `ProofError`, share validation raises `VerifyShareError`,
`HmacChain.verify_bigint` raises `MacError`. Malformed point or scalar
encodings raise `DeserializationError`.

Every proof takes an `algorithm` argument: a `hashlib` algorithm name such as
`"sha256"` (the default) or a zero-argument callable returning a hash object.
The digest must be at least 32 bytes long to derive a scalar.

## Installation

```
pip install zkprims
```

## Examples

Group arithmetic:

```python
from zkprims.ristretto import Point, Scalar

a = Scalar.random()
b = Scalar.random()
g = Point.generator()
assert (g * a) * b == (g * b) * a
assert (a * a.invert()).to_int() == 1
assert Point.from_bytes(g.to_bytes()) == g
```

A Schnorr proof of knowledge of a discrete log:

```python
from zkprims.dlog import DLogProof
from zkprims.ristretto import Scalar

proof = DLogProof.prove(Scalar.random(), algorithm="sha256")
proof.verify()  # raises ProofError if the proof does not hold
```

Verifiable secret sharing with threshold 3 among 5 parties:

```python
from zkprims.feldman_vss import VerifiableSS
from zkprims.ristretto import Scalar

value = Scalar.random()
vss, shares = VerifiableSS.share(3, 5, value, algorithm="sha256")
vss.validate_share(shares[0], 1)
assert vss.reconstruct([0, 1, 2, 4], [shares[0], shares[1], shares[2], shares[4]]) == value
```

Hashing values into a challenge scalar:

```python
from zkprims.hashing import HashChain
from zkprims.ristretto import Point

challenge = (
    HashChain("sha256")
    .chain_point(Point.generator())
    .chain_point(Point.base_point2())
    .chain_bigint(10)
    .result_scalar()
)
```

A Merkle tree over points:

```python
from zkprims.merkle import MerkleTree256
from zkprims.ristretto import Point

g = Point.generator()
tree = MerkleTree256.create_tree([g, g + g, g * 3])
proof = tree.build_proof(g)  # None if the point is not a leaf
proof.verify(tree.root())
```

## What it does not do

- Only the ristretto255 group is provided; there are no other curves and no
  pairings. Its encoding hides the x coordinate, so `Point.x_coord()` and
  `Point.coords()` return `None` and `Point.from_coords()` always raises
  `NotOnCurve`.
- Proofs and messages are plain Python objects; there is no wire format for
  them beyond the byte encodings of `Scalar` and `Point`.
- It is a library only: there is no command-line tool and no networking.
  Protocol messages are passed between parties by the caller.

## Running the tests

```
pip install zkprims[test]
pytest
```