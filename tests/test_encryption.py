import pytest
from Crypto.Cipher import PKCS1_v1_5

from giftcard.errors import EncryptionError, KeyConstructionError
from giftcard.perfect.encryption import encrypt_pin, make_public_key
from giftcard.perfect.PerfectGiftCardAPI import EXPONENT, MODULUS, RANDOM_NO


def test_make_public_key_from_site_constants():
    key = make_public_key(MODULUS, EXPONENT)
    assert key.n == int(MODULUS, 16)
    assert key.e == 65537
    assert not key.has_private()


def test_make_public_key_with_invalid_modulus():
    with pytest.raises(KeyConstructionError) as err:
        make_public_key('invalid', EXPONENT)
    assert str(err.value) == 'invalid modulus'


def test_make_public_key_with_invalid_exponent():
    with pytest.raises(KeyConstructionError) as err:
        make_public_key(MODULUS, 'invalid')
    assert str(err.value) == "invalid literal for int() with base 16: 'invalid'"
    assert isinstance(err.value.__cause__, ValueError)


def test_encrypted_pin_decrypts_to_pin_and_random_number(private_key):
    encrypted = encrypt_pin('0000', RANDOM_NO, private_key.publickey())
    assert len(encrypted) == private_key.size_in_bytes()
    decrypted = PKCS1_v1_5.new(private_key).decrypt(encrypted, None)
    assert decrypted == f'0000|{RANDOM_NO}'.encode()


def test_encryption_is_randomised(private_key):
    public_key = private_key.publickey()
    assert encrypt_pin('0000', RANDOM_NO, public_key) != encrypt_pin('0000', RANDOM_NO, public_key)


def test_encrypt_pin_without_key():
    with pytest.raises(EncryptionError) as err:
        encrypt_pin('0000', RANDOM_NO, None)
    assert str(err.value) == 'missing public modulus'
    assert err.value.response.status_code == 0


def test_encrypt_pin_too_long_for_key(private_key):
    with pytest.raises(EncryptionError):
        encrypt_pin('0' * 200, RANDOM_NO, private_key.publickey())


@pytest.mark.parametrize('modulus', ['0x' + MODULUS, 'D4_' + MODULUS[2:], f' {MODULUS} ', ''])
def test_make_public_key_rejects_non_hex_modulus(modulus):
    with pytest.raises(KeyConstructionError, match='invalid modulus'):
        make_public_key(modulus, EXPONENT)


@pytest.mark.parametrize('exponent', ['0x10001', '1_0001', ' 010001'])
def test_make_public_key_rejects_non_hex_exponent(exponent):
    with pytest.raises(KeyConstructionError):
        make_public_key(MODULUS, exponent)
