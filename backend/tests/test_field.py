import pytest

from geoproof.core.field import HALF_MODULUS, MODULUS, PrimeField, sqrt_mod

# ═══════════════════════════════════════════════════════════════════════════════
# PRIME FIELD TESTS
# ═══════════════════════════════════════════════════════════════════════════════

def test_prime_field_add():
    assert PrimeField.add(10, 20) == 30
    assert PrimeField.add(MODULUS - 1, 2) == 1

def test_prime_field_sub():
    assert PrimeField.sub(30, 10) == 20
    # (0 - 1) % P should be P - 1
    assert PrimeField.sub(0, 1) == MODULUS - 1

def test_prime_field_mul():
    assert PrimeField.mul(10, 10) == 100
    assert PrimeField.square(MODULUS - 7) == 49

def test_prime_field_inv():
    a = 12345
    inv_a = PrimeField.inv(a)
    assert PrimeField.mul(a, inv_a) == 1
    assert PrimeField.div(49, 7) == 7

def test_prime_field_inv_zero():
    with pytest.raises(ZeroDivisionError):
        PrimeField.inv(MODULUS)

def test_reduce_rejects_non_integers():
    with pytest.raises(TypeError):
        PrimeField.reduce(1.5)
    with pytest.raises(TypeError):
        PrimeField.reduce(True)
    assert PrimeField.reduce(-1) == MODULUS - 1

# ═══════════════════════════════════════════════════════════════════════════════
# SIGNED LIFT
# ═══════════════════════════════════════════════════════════════════════════════

def test_to_signed():
    assert PrimeField.to_signed(5) == 5
    assert PrimeField.to_signed(MODULUS - 5) == -5
    assert PrimeField.to_signed(HALF_MODULUS) == HALF_MODULUS
    assert PrimeField.to_signed(HALF_MODULUS + 1) < 0

def test_is_positive():
    assert PrimeField.is_positive(1)
    assert not PrimeField.is_positive(0)
    assert not PrimeField.is_positive(MODULUS - 1)

# ═══════════════════════════════════════════════════════════════════════════════
# SQUARE ROOTS
# ═══════════════════════════════════════════════════════════════════════════════

def test_sqrt_small_primes():
    # 13 ≡ 1 (mod 4) exercises Tonelli-Shanks, 7 ≡ 3 (mod 4) the shortcut
    assert sqrt_mod(10, 13) in (6, 7)
    assert sqrt_mod(2, 7) in (3, 4)
    assert sqrt_mod(5, 7) is None
    assert sqrt_mod(0, 13) == 0

def test_sqrt_in_field_matches_euler_criterion():
    saw_non_residue = False
    for n in range(2, 40):
        root = sqrt_mod(n, MODULUS)
        if pow(n, (MODULUS - 1) // 2, MODULUS) == 1:
            assert root is not None
            assert root * root % MODULUS == n
        else:
            assert root is None
            saw_non_residue = True
    assert saw_non_residue
